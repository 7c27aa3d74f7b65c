from typing import Any, Callable, Iterable, List, Optional, TypeVar

from ape.logging import logger

from ape_funcvariation.backends import CounterBackend
from ape_funcvariation.counter import Counter
from ape_funcvariation.exceptions import GuardRejected, ModelMismatchError
from ape_funcvariation.types import Call, Outcome

T = TypeVar("T")


def repeat(times: int, func: Callable[[], T]) -> List[T]:
    """
    Call ``func`` ``times`` times and return the results in order.
    """

    if times < 0:
        raise ValueError(f"Cannot repeat a negative number of times ({times}).")

    return [func() for _ in range(times)]


def run_calls(backend: CounterBackend, handle: Any, calls: Iterable[Call]) -> List[Outcome]:
    """
    Apply ``calls`` in order. Rejected calls are recorded as failed outcomes
    and the run continues with the next call.
    """

    outcomes = []
    for call in calls:
        reason = None
        try:
            backend.call(handle, call)
        except GuardRejected as err:
            reason = err.reason

        outcomes.append(
            Outcome(call=call, succeeded=reason is None, value=backend.read(handle), reason=reason)
        )

    return outcomes


class ModelCheckedCounter:
    """
    A freshly deployed counter shadowed by the reference model.

    Every call is applied to both the backend and the model. They must agree on
    whether the call was rejected and on the value afterwards, otherwise
    :class:`~ape_funcvariation.exceptions.ModelMismatchError` is raised.
    """

    def __init__(self, backend: CounterBackend, model: Optional[Counter] = None):
        self.backend = backend
        self.handle = backend.deploy()
        self.model = model or Counter(
            pay_minimum=backend.config.pay_minimum, pay_exact=backend.config.pay_exact
        )
        self.history: List[Outcome] = []
        self.check()

    def __repr__(self) -> str:
        return f"<ModelCheckedCounter backend={self.backend.name} value={self.model.value}>"

    @property
    def value(self) -> int:
        return self.check()

    def apply(self, call: Call):
        """
        Apply ``call`` to the backend and the model.

        Raises:
            :class:`~ape_funcvariation.exceptions.GuardRejected`: When both rejected the call.
            :class:`~ape_funcvariation.exceptions.ModelMismatchError`: When they disagree.
        """

        expected_error = _attempt(lambda: self.model.apply(call))
        actual_error = _attempt(lambda: self.backend.call(self.handle, call))

        if (expected_error is None) != (actual_error is None):
            expected = f"rejected ({expected_error.reason})" if expected_error else "accepted"
            actual = f"rejected ({actual_error.reason})" if actual_error else "accepted"
            raise ModelMismatchError(
                f"'{call}' was {actual} by the {self.backend.name} backend "
                f"but {expected} by the reference model."
            )

        value = self.check()
        self.history.append(
            Outcome(
                call=call,
                succeeded=actual_error is None,
                value=value,
                reason=actual_error.reason if actual_error else None,
            )
        )
        if actual_error:
            logger.debug(f"'{call}' rejected: {actual_error.reason}")
            raise actual_error

    def check(self) -> int:
        """
        Read the backend value and compare it with the model.
        """

        actual = self.backend.read(self.handle)
        if actual != self.model.value:
            raise ModelMismatchError(
                f"The {self.backend.name} backend holds {actual} "
                f"but the reference model holds {self.model.value}."
            )

        return actual


def _attempt(func: Callable[[], Any]) -> Optional[GuardRejected]:
    try:
        func()
    except GuardRejected as err:
        return err

    return None
