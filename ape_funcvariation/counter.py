from ape_funcvariation._utils import (
    ARITHMETIC_OVERFLOW,
    COUNTER_IS_ZERO,
    DEFAULT_PAY_EXACT,
    DEFAULT_PAY_MINIMUM,
    MAX_UINT256,
    PAYMENT_BELOW_MINIMUM,
    PAYMENT_NOT_EXACT,
)
from ape_funcvariation.exceptions import GuardRejected
from ape_funcvariation.types import Call, Operation


class Counter:
    """
    A pure-Python reference model of the FuncVariation contract.

    Every mutating method checks its guard before touching ``value``, so a
    rejected call always leaves the counter unchanged.
    """

    def __init__(self, pay_minimum: int = DEFAULT_PAY_MINIMUM, pay_exact: int = DEFAULT_PAY_EXACT):
        self.pay_minimum = pay_minimum
        self.pay_exact = pay_exact
        self.value = 0

    def __repr__(self) -> str:
        return f"<Counter value={self.value}>"

    def get(self) -> int:
        return self.value

    def inc(self):
        self._add(Operation.INCREMENT, 1)

    def dec(self):
        if self.value == 0:
            raise GuardRejected(Operation.DECREMENT, reason=COUNTER_IS_ZERO)

        self.value -= 1

    def inc_with(self, amount: int):
        self._add(Operation.INCREMENT_BY, amount)

    def payme_to_increment(self, amount: int, payment: int):
        if payment < self.pay_minimum:
            raise GuardRejected(Operation.PAY_TO_INCREMENT, reason=PAYMENT_BELOW_MINIMUM)

        self._add(Operation.PAY_TO_INCREMENT, amount)

    def pay_exact_to_increment(self, amount: int, payment: int):
        if payment != self.pay_exact:
            raise GuardRejected(Operation.PAY_EXACT_TO_INCREMENT, reason=PAYMENT_NOT_EXACT)

        self._add(Operation.PAY_EXACT_TO_INCREMENT, amount)

    def apply(self, call: Call):
        """
        Apply a :class:`~ape_funcvariation.types.Call` to the counter.

        Raises:
            :class:`~ape_funcvariation.exceptions.GuardRejected`: When the call's guard fails.
        """

        if call.operation == Operation.INCREMENT:
            self.inc()
        elif call.operation == Operation.DECREMENT:
            self.dec()
        elif call.operation == Operation.INCREMENT_BY:
            self.inc_with(call.amount)
        elif call.operation == Operation.PAY_TO_INCREMENT:
            self.payme_to_increment(call.amount, call.payment)
        elif call.operation == Operation.PAY_EXACT_TO_INCREMENT:
            self.pay_exact_to_increment(call.amount, call.payment)
        else:
            raise ValueError(f"Unknown operation '{call.operation}'.")

    def _add(self, operation: Operation, amount: int):
        if amount < 0:
            raise ValueError(f"Amount must be non-negative (got {amount}).")

        elif self.value + amount > MAX_UINT256:
            raise GuardRejected(operation, reason=ARITHMETIC_OVERFLOW)

        self.value += amount
