from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

from ape.logging import logger

from ape_funcvariation._utils import CONTRACT_SOURCE_ID, handle_contract_errors
from ape_funcvariation.basemodel import FuncVariationBase
from ape_funcvariation.config import FuncVariationConfig
from ape_funcvariation.counter import Counter
from ape_funcvariation.types import Call

if TYPE_CHECKING:
    from ape.api import AccountAPI
    from ape.contracts import ContractContainer, ContractInstance

CONTRACT_PATH = Path(__file__).parent / "contracts" / CONTRACT_SOURCE_ID


class CounterBackend(ABC, FuncVariationBase):
    """
    The capability interface scenarios are written against:
    deploy a fresh counter, call an operation on it and read its value.
    """

    name: str = ""

    def __init__(self, config: Optional[FuncVariationConfig] = None):
        self._config = config

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

    @property
    def config(self) -> FuncVariationConfig:
        return self._config if self._config is not None else self.plugin_config

    @abstractmethod
    def deploy(self) -> Any:
        """
        Deploy a fresh counter with value ``0``.

        Returns:
            A handle to pass to :meth:`call` and :meth:`read`.
        """

    @abstractmethod
    def call(self, handle: Any, call: Call) -> Any:
        """
        Apply ``call`` to the counter behind ``handle``.

        Raises:
            :class:`~ape_funcvariation.exceptions.GuardRejected`: When the
              counter rejects the call. The value is left unchanged.
        """

    @abstractmethod
    def read(self, handle: Any) -> int:
        """
        Read the current counter value.
        """


class MemoryBackend(CounterBackend):
    """
    Runs against the in-memory reference :class:`~ape_funcvariation.counter.Counter`.
    """

    name = "memory"

    def deploy(self) -> Counter:
        counter = Counter(pay_minimum=self.config.pay_minimum, pay_exact=self.config.pay_exact)
        logger.debug(f"Created in-memory counter {id(counter):#x}.")
        return counter

    def call(self, handle: Counter, call: Call) -> None:
        handle.apply(call)

    def read(self, handle: Counter) -> int:
        return handle.get()


class ApeBackend(CounterBackend):
    """
    Deploys the FuncVariation contract to the connected ape network and
    transacts with it from a test account.
    """

    name = "ape"

    def __init__(
        self,
        container: Optional["ContractContainer"] = None,
        sender: Optional["AccountAPI"] = None,
        config: Optional[FuncVariationConfig] = None,
    ):
        super().__init__(config=config)
        self._container = container
        self._sender = sender

    @cached_property
    def contract_container(self) -> "ContractContainer":
        if self._container is not None:
            return self._container

        logger.debug(f"Compiling '{CONTRACT_SOURCE_ID}'.")
        return self.compiler_manager.compile_source(
            "vyper", CONTRACT_PATH.read_text(), contractName=self.config.contract_name
        )

    @property
    def sender(self) -> "AccountAPI":
        if self._sender is not None:
            return self._sender

        return self.account_manager.test_accounts[self.config.sender_index]

    def deploy(self) -> "ContractInstance":
        instance = self.contract_container.deploy(
            self.config.pay_minimum, self.config.pay_exact, sender=self.sender
        )
        logger.debug(f"Deployed {self.config.contract_name} at '{instance.address}'.")
        return instance

    @handle_contract_errors
    def call(self, handle: "ContractInstance", call: Call) -> Any:
        kwargs: Dict[str, Any] = {"sender": self.sender}
        if call.operation.is_payable:
            kwargs["value"] = call.payment

        logger.debug(f"Sending '{call}' to '{handle.address}'.")
        return handle.invoke_transaction(call.operation.value, *call.arguments, **kwargs)

    def read(self, handle: "ContractInstance") -> int:
        return int(handle.call_view_method("get"))
