"""
Pytest fixtures for the Starknet RPC client tests.
"""
import pytest

from starknet_rpc import Provider, StubInvoker

from test_helpers import TEST_RPC_URL, WIRE_TRANSACTIONS


@pytest.fixture
def stub_invoker():
    return StubInvoker()


@pytest.fixture
def provider(stub_invoker):
    """Provider answering from the stub_invoker fixture."""
    return Provider(invoker=stub_invoker)


@pytest.fixture
def http_provider():
    """Provider talking HTTP to TEST_RPC_URL; pair it with requests_mock."""
    p = Provider(rpc_url=TEST_RPC_URL)
    yield p
    p.close()


@pytest.fixture(params=sorted(WIRE_TRANSACTIONS))
def variant_name(request):
    """Name of every supported transaction variant, one per test run."""
    return request.param
