import pytest

from config import Config, REMOVAL_DELETE, REMOVAL_DETACH, REMOVAL_SHARE
from participants import add_participant
from state import SplitState


@pytest.fixture
def state():
    return SplitState()


@pytest.fixture
def trio(state):
    """Alice, Bob and Carol on the roster of a fresh state."""
    return [add_participant(state, name) for name in ("Alice", "Bob", "Carol")]


@pytest.fixture
def share_state():
    return SplitState(item_removal_mode=REMOVAL_SHARE)


@pytest.fixture
def delete_state():
    return SplitState(item_removal_mode=REMOVAL_DELETE)


@pytest.fixture
def settings():
    return Config(ITEM_REMOVAL_MODE=REMOVAL_DETACH, LOG_LEVEL="WARNING")
