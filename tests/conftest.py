import pytest
from ape.api.networks import LOCAL_NETWORK_NAME

from ape_funcvariation import ApeBackend, FuncVariationConfig, MemoryBackend

# Payment required by `payExactToIncrement` (0.01 ETH).
PAY_EXACT = 10_000_000_000_000_000
# Non-zero so that under-payment can be exercised.
PAY_MINIMUM = 1_000


def pytest_addoption(parser):
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="Run tests that compile and deploy the contract on a local ape network.",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: needs a local ape network and the Vyper compiler"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--integration"):
        return

    skip_integration = pytest.mark.skip(reason="Requires '--integration'.")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session")
def pay_minimum():
    return PAY_MINIMUM


@pytest.fixture(scope="session")
def pay_exact():
    return PAY_EXACT


@pytest.fixture(scope="session")
def funcvariation_config(pay_minimum, pay_exact):
    return FuncVariationConfig(pay_minimum=pay_minimum, pay_exact=pay_exact)


@pytest.fixture(scope="session")
def memory_backend(funcvariation_config):
    return MemoryBackend(config=funcvariation_config)


@pytest.fixture(scope="session")
def use_local_ethereum():
    import ape

    return ape.networks.parse_network_choice(f"ethereum:{LOCAL_NETWORK_NAME}:test")


@pytest.fixture(scope="session")
def ape_backend(funcvariation_config, use_local_ethereum):
    with use_local_ethereum:
        backend = ApeBackend(config=funcvariation_config)
        # Compile once for the whole session.
        _ = backend.contract_container
        yield backend


@pytest.fixture(
    scope="session",
    params=["memory", pytest.param("ape", marks=pytest.mark.integration)],
)
def backend(request):
    return request.getfixturevalue(f"{request.param}_backend")


@pytest.fixture
def counter(backend):
    return backend.deploy()
