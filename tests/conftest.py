import pytest
from fastapi.testclient import TestClient

from hearth.dispatcher import CommandDispatcher
from hearth.main import app
from hearth.models.household import HouseholdState
from hearth.state.store import StateStore


@pytest.fixture
def state():
    return HouseholdState()


@pytest.fixture
def store():
    return StateStore()


@pytest.fixture
def dispatcher(store):
    return CommandDispatcher(store=store, history_limit=5)


@pytest.fixture
def client():
    # Entering the client runs the lifespan, which reloads the defaults.
    with TestClient(app) as test_client:
        yield test_client
