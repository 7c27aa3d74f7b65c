from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from ape_funcvariation._utils import MAX_UINT256


class Operation(str, Enum):
    """
    The mutating methods of the FuncVariation contract.
    Values are the contract method names.
    """

    INCREMENT = "inc"
    DECREMENT = "dec"
    INCREMENT_BY = "incWith"
    PAY_TO_INCREMENT = "paymeToIncrement"
    PAY_EXACT_TO_INCREMENT = "payExactToIncrement"

    @property
    def takes_amount(self) -> bool:
        return self not in (Operation.INCREMENT, Operation.DECREMENT)

    @property
    def is_payable(self) -> bool:
        return self in (Operation.PAY_TO_INCREMENT, Operation.PAY_EXACT_TO_INCREMENT)


class Call(BaseModel):
    """
    A single invocation of a counter operation.
    """

    operation: Operation
    amount: int = Field(default=0, ge=0, le=MAX_UINT256)
    payment: int = Field(default=0, ge=0, le=MAX_UINT256)

    @model_validator(mode="after")
    def check_arguments(self) -> "Call":
        if self.amount and not self.operation.takes_amount:
            raise ValueError(f"'{self.operation.value}' does not take an amount.")

        if self.payment and not self.operation.is_payable:
            raise ValueError(f"'{self.operation.value}' is not payable.")

        return self

    @property
    def arguments(self) -> List[int]:
        return [self.amount] if self.operation.takes_amount else []

    @classmethod
    def parse(cls, token: str) -> "Call":
        """
        Parse a call from its short-hand form: ``inc``, ``dec``, ``incWith:5``,
        ``paymeToIncrement:5@100`` or ``payExactToIncrement:5@10000000000000000``.
        """

        head, _, payment = token.partition("@")
        name, _, amount = head.partition(":")
        try:
            operation = Operation(name)
        except ValueError:
            options = ", ".join(op.value for op in Operation)
            raise ValueError(f"Unknown operation '{name}'. Expecting one of: {options}.")

        try:
            return cls(
                operation=operation,
                amount=int(amount) if amount else 0,
                payment=int(payment) if payment else 0,
            )
        except ValueError as err:
            # NOTE: pydantic's ValidationError is a ValueError; re-raise with the token.
            raise ValueError(f"Invalid call '{token}': {err}") from err

    def __str__(self) -> str:
        text = self.operation.value
        if self.operation.takes_amount:
            text = f"{text}:{self.amount}"
        if self.operation.is_payable:
            text = f"{text}@{self.payment}"

        return text


class Outcome(BaseModel):
    """
    The result of applying a :class:`Call`, with the counter value read afterwards.
    """

    call: Call
    succeeded: bool
    value: int
    reason: Optional[str] = None

    def __str__(self) -> str:
        status = "ok" if self.succeeded else f"rejected ({self.reason})"
        return f"{self.call} -> {status}, value={self.value}"
