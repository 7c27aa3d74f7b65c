import pytest

from ape_funcvariation import Call, GuardRejected, Operation

pytestmark = pytest.mark.integration


@pytest.fixture
def contract(ape_backend):
    return ape_backend.deploy()


def test_deploy_sets_payment_thresholds(contract, pay_minimum, pay_exact):
    assert contract.PAY_MINIMUM() == pay_minimum
    assert contract.PAY_EXACT() == pay_exact


def test_payment_is_kept_by_contract(ape_backend, contract, pay_exact):
    call = Call(operation=Operation.PAY_EXACT_TO_INCREMENT, amount=1, payment=pay_exact)
    ape_backend.call(contract, call)
    assert contract.balance == pay_exact


def test_rejected_payment_is_refunded(ape_backend, contract):
    call = Call(operation=Operation.PAY_EXACT_TO_INCREMENT, amount=1, payment=1)
    with pytest.raises(GuardRejected, match="payment not exact"):
        ape_backend.call(contract, call)

    assert contract.balance == 0
    assert ape_backend.read(contract) == 0


def test_receipt_is_returned(ape_backend, contract):
    receipt = ape_backend.call(contract, Call(operation=Operation.INCREMENT))
    assert receipt.txn_hash
    assert receipt.sender == ape_backend.sender.address
