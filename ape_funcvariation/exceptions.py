from typing import TYPE_CHECKING, Optional

from ape.exceptions import ApeException

if TYPE_CHECKING:
    from ape_funcvariation.types import Operation


class FuncVariationError(ApeException):
    """
    A general FuncVariation plugin error.
    """


class GuardRejected(FuncVariationError):
    """
    Raised when a guarded operation is rejected by the counter.
    The counter value is guaranteed to be unchanged.
    """

    def __init__(self, operation: "Operation", reason: Optional[str] = None):
        self.operation = operation
        self.reason = reason or "guard rejected"
        super().__init__(f"'{operation.value}' rejected: {self.reason}")


class ModelMismatchError(FuncVariationError):
    """
    Raised when a backend and the reference model disagree.
    """
