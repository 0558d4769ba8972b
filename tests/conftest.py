import pytest

from client_registry.schemas import Client
from client_registry.store import ClientStore


class FixedRng:
    """Stands in for numpy's Generator; `integers` always returns `value`."""

    def __init__(self, value: int = 0):
        self.value = value
        self.calls = 0

    def integers(self, low, high=None):
        self.calls += 1
        return self.value


def make_client(client_id: int = 1, **overrides) -> Client:
    fields = dict(
        client_id=client_id,
        client_name="Test Driver",
        client_age=40,
        phone_number="0600000000",
        address="1 Test Rd",
        policy_type="Basic",
        car_value=10000.0,
        nb_accidents_due=0,
        nb_accidents_not_due=0,
        nb_suspensions=0,
    )
    fields.update(overrides)
    return Client(**fields)


@pytest.fixture
def store():
    return ClientStore()


@pytest.fixture
def fixed_rng():
    return FixedRng(1)


@pytest.fixture
def balanced_store(store):
    for client_id in [50, 30, 70, 20, 40, 60, 80]:
        assert store.insert(make_client(client_id))
    return store
