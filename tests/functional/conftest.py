import pytest
from ape.exceptions import ContractLogicError

from ape_funcvariation import Counter, GuardRejected, Operation

FAKE_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
NON_PAYABLE = (Operation.INCREMENT.value, Operation.DECREMENT.value, Operation.INCREMENT_BY.value)


class FakeContractInstance:
    """
    Stands in for a deployed ``ContractInstance``: transacts against the
    reference counter and reverts the way ape reports contract reverts.
    """

    address = FAKE_ADDRESS

    def __init__(self, pay_minimum: int, pay_exact: int):
        self.counter = Counter(pay_minimum=pay_minimum, pay_exact=pay_exact)
        self.transactions = []

    def invoke_transaction(self, method_name, *args, sender=None, value=None):
        self.transactions.append((method_name, args, sender, value))
        if method_name in NON_PAYABLE and value:
            raise ContractLogicError(revert_message="non-payable")

        method = {
            "inc": self.counter.inc,
            "dec": self.counter.dec,
            "incWith": self.counter.inc_with,
            "paymeToIncrement": lambda amount: self.counter.payme_to_increment(amount, value),
            "payExactToIncrement": lambda amount: self.counter.pay_exact_to_increment(
                amount, value
            ),
        }[method_name]
        try:
            method(*args)
        except GuardRejected as err:
            raise ContractLogicError(revert_message=err.reason)

        return f"receipt:{method_name}"

    def call_view_method(self, method_name, *args):
        assert method_name == "get"
        return self.counter.get()


class FakeContractContainer:
    def __init__(self):
        self.deployments = []

    def deploy(self, *args, sender=None):
        instance = FakeContractInstance(*args)
        self.deployments.append((args, sender))
        return instance


@pytest.fixture
def fake_container():
    return FakeContractContainer()


@pytest.fixture
def fake_sender():
    return "__FAKE_SENDER__"
