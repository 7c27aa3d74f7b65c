from ape.exceptions import ContractLogicError

from ape_funcvariation.exceptions import GuardRejected

PLUGIN_NAME = "funcvariation"
CONTRACT_SOURCE_ID = "FuncVariation.vy"
MAX_UINT256 = 2**256 - 1
DEFAULT_PAY_MINIMUM = 0
DEFAULT_PAY_EXACT = 10_000_000_000_000_000  # 0.01 ETH

# Revert reasons, kept in sync with contracts/FuncVariation.vy
COUNTER_IS_ZERO = "counter is zero"
PAYMENT_BELOW_MINIMUM = "payment below minimum"
PAYMENT_NOT_EXACT = "payment not exact"
ARITHMETIC_OVERFLOW = "arithmetic overflow"


def handle_contract_errors(f):
    """
    Translate contract reverts raised while sending a call into :class:`GuardRejected`.
    Wraps backend methods with the signature ``(self, handle, call, ...)``.
    """

    def func(self, handle, call, *args, **kwargs):
        try:
            return f(self, handle, call, *args, **kwargs)

        except ContractLogicError as err:
            raise GuardRejected(call.operation, reason=err.revert_message) from err

    return func
