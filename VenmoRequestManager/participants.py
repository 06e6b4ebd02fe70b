"""
Participants Module

This module handles the roster: the people who can be charged for shared
items.

Features:
    - Add/remove participants
    - Retrieve participant details in insertion order
    - Optional cascade of a removal through every item's sharer list

Data Model:
    Participant stored at: state.participants[participant_id]
    Fields:
        - participant_id: int (monotonic, never reused)
        - name: string (trimmed, non-empty)

    The items a participant is charged for are not stored on the
    participant; see items.get_items_for_participant().

Functions:
    add_participant: Add a new participant to the roster.
    remove_participant: Remove a participant from the roster.
    get_participants: Get all participants in insertion order.
    get_participant: Look up one participant by id.
"""

from typing import Optional

from logging_config import get_core_logger
from screens import can_advance, go_to_roster
from utils import clean_name

logger = get_core_logger()


class Participant:
    """
    Represents a person on the roster.

    Attributes:
        participant_id (int): Unique identifier for the participant.
        name (str): Name of the participant.
    """

    def __init__(self, participant_id: int, name: str):
        self.participant_id = participant_id
        self.name = name

    def to_dict(self) -> dict:
        """Convert participant to a plain dictionary."""
        return {
            "participant_id": self.participant_id,
            "name": self.name
        }

    def __repr__(self) -> str:
        """Return string representation of participant."""
        return f"Participant(id={self.participant_id}, name='{self.name}')"


def add_participant(state, name: str) -> Optional[Participant]:
    """
    Add a new participant to the roster.

    Args:
        state: The SplitState to add to.
        name: Name of the participant; surrounding whitespace is trimmed.

    Returns:
        Participant | None: The created participant, or None when the name
        is empty after trimming (the roster is left unchanged).
    """
    cleaned = clean_name(name)
    if cleaned is None:
        logger.debug("Rejected participant with empty name: %r", name)
        return None

    participant = Participant(
        participant_id=state.next_participant_id(),
        name=cleaned
    )
    state.participants[participant.participant_id] = participant

    logger.info("Added participant %s (%s)", participant.participant_id, participant.name)
    return participant


def remove_participant(state, participant_id: int) -> bool:
    """
    Remove a participant from the roster.

    By default the participant's id is left in the sharer list of any item
    it was part of, so co-sharers keep paying the same per-head amount.
    With state.cascade_participant_removal the id is dropped from every
    item instead and the remaining sharers split the price between them;
    items left with nobody to charge are deleted. Removing the last
    participant sends the form back to the roster view.

    Args:
        state: The SplitState to remove from.
        participant_id: The ID of the participant to remove.

    Returns:
        bool: True if a participant was removed, False if the id was unknown.
    """
    participant = state.participants.pop(participant_id, None)
    if participant is None:
        logger.debug("Ignored removal of unknown participant %s", participant_id)
        return False

    if state.cascade_participant_removal:
        for item_id, item in list(state.items.items()):
            if participant_id not in item.shared_with:
                continue
            item.drop_sharer(participant_id)
            if not item.shared_with:
                del state.items[item_id]

    # The items view needs at least one participant
    if not can_advance(state):
        state.screen = go_to_roster(state)

    logger.info("Removed participant %s (%s)", participant_id, participant.name)
    return True


def get_participants(state) -> list[Participant]:
    """
    Get all participants on the roster.

    Returns:
        list[Participant]: Participants in the order they were added.
    """
    return list(state.participants.values())


def get_participant(state, participant_id: int) -> Optional[Participant]:
    """Get one participant by id, or None if it is not on the roster."""
    return state.participants.get(participant_id)
