from participants import add_participant, remove_participant
from screens import ITEMS, ROSTER, can_advance, go_to_items, go_to_roster


def test_starts_on_roster(state):
    assert state.screen == ROSTER


def test_cannot_advance_with_empty_roster(state):
    assert can_advance(state) is False
    assert go_to_items(state) == ROSTER


def test_advance_and_back(state):
    add_participant(state, "Alice")

    assert can_advance(state) is True
    assert go_to_items(state) == ITEMS

    state.screen = ITEMS
    assert go_to_roster(state) == ROSTER


def test_transitions_do_not_mutate_state(state):
    alice = add_participant(state, "Alice")
    go_to_items(state)

    assert state.screen == ROSTER

    remove_participant(state, alice.participant_id)
    assert can_advance(state) is False


def test_removing_last_participant_returns_to_roster(state):
    alice = add_participant(state, "Alice")
    bob = add_participant(state, "Bob")
    state.screen = go_to_items(state)

    remove_participant(state, alice.participant_id)
    assert state.screen == ITEMS

    remove_participant(state, bob.participant_id)
    assert state.screen == ROSTER
