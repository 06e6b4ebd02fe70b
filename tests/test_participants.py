from participants import add_participant, get_participant, get_participants, remove_participant
from items import add_item_for_subset, get_items
from splitter import compute_total
from state import SplitState


def test_add_participant_trims_name(state):
    """Names are stored without surrounding whitespace."""
    participant = add_participant(state, "  Alice  ")

    assert participant.name == "Alice"
    assert get_participants(state) == [participant]


def test_blank_names_are_rejected(state):
    """Empty and whitespace-only names leave the roster unchanged."""
    assert add_participant(state, "") is None
    assert add_participant(state, "   ") is None
    assert add_participant(state, None) is None
    assert get_participants(state) == []


def test_ids_are_unique_and_never_reused(state):
    alice = add_participant(state, "Alice")
    bob = add_participant(state, "Bob")
    remove_participant(state, alice.participant_id)
    carol = add_participant(state, "Carol")

    ids = [alice.participant_id, bob.participant_id, carol.participant_id]
    assert len(set(ids)) == 3
    assert [p.name for p in get_participants(state)] == ["Bob", "Carol"]


def test_roster_keeps_insertion_order(state):
    for name in ("Zoe", "Adam", "Mia"):
        add_participant(state, name)

    assert [p.name for p in get_participants(state)] == ["Zoe", "Adam", "Mia"]


def test_remove_unknown_participant_is_noop(state, trio):
    assert remove_participant(state, 999) is False
    assert len(get_participants(state)) == 3


def test_remove_participant(state, trio):
    alice = trio[0]

    assert remove_participant(state, alice.participant_id) is True
    assert get_participant(state, alice.participant_id) is None


def test_stale_sharer_does_not_change_co_sharer_total(state):
    """Removing Alice leaves Bob paying half of the taxi."""
    alice = add_participant(state, "Alice")
    bob = add_participant(state, "Bob")
    add_item_for_subset(state, "Taxi", 50, [alice.participant_id, bob.participant_id])

    assert compute_total(state, alice.participant_id) == "25.00"
    assert compute_total(state, bob.participant_id) == "25.00"

    remove_participant(state, alice.participant_id)

    assert compute_total(state, bob.participant_id) == "25.00"
    assert compute_total(state, alice.participant_id) == "0.00"


def test_cascade_removal_resplits_items():
    state = SplitState(cascade_participant_removal=True)
    alice = add_participant(state, "Alice")
    bob = add_participant(state, "Bob")
    add_item_for_subset(state, "Taxi", 50, [alice.participant_id, bob.participant_id])
    add_item_for_subset(state, "Snack", 4, [alice.participant_id])

    remove_participant(state, alice.participant_id)

    assert compute_total(state, bob.participant_id) == "50.00"
    # Nobody is left to pay for the snack
    assert [item.name for item in get_items(state)] == ["Taxi"]
