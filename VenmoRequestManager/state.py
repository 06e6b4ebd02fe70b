"""
State Module

This module holds the single in-memory store shared by the roster view and
the items view.

Features:
    - One owned state object per app instance (no module-level globals)
    - Participants and items kept in insertion order
    - Monotonic id generation for participants and items
    - Current screen of the two-view form

Data Model:
    participants: dict participant_id -> Participant
    items:        dict item_id -> Item (one record per logical purchase)
    screen:       "roster" or "items"

Nothing here is persisted; a state lives as long as the process does.
"""

import itertools
from typing import Optional

from config import REMOVAL_DETACH, VALID_REMOVAL_MODES, config as default_config
from screens import ROSTER


class SplitState:
    """
    Owned store for one bill-splitting session.

    Attributes:
        participants (dict): participant_id -> Participant, insertion ordered.
        items (dict): item_id -> Item, insertion ordered.
        screen (str): Current view, ROSTER or ITEMS.
        item_removal_mode (str): detach, share or delete.
        cascade_participant_removal (bool): Drop removed participants from items.
    """

    def __init__(
        self,
        item_removal_mode: str = REMOVAL_DETACH,
        cascade_participant_removal: bool = False
    ):
        if item_removal_mode not in VALID_REMOVAL_MODES:
            raise ValueError(
                f"item_removal_mode must be one of {sorted(VALID_REMOVAL_MODES)}, "
                f"got: {item_removal_mode}"
            )
        self.participants = {}
        self.items = {}
        self.screen = ROSTER
        self.item_removal_mode = item_removal_mode
        self.cascade_participant_removal = cascade_participant_removal
        # Ids are never reused, even after removal
        self._participant_ids = itertools.count(1)
        self._item_ids = itertools.count(1)

    def next_participant_id(self) -> int:
        return next(self._participant_ids)

    def next_item_id(self) -> int:
        return next(self._item_ids)

    def __repr__(self) -> str:
        return (
            f"SplitState(participants={len(self.participants)}, items={len(self.items)}, "
            f"screen='{self.screen}')"
        )

    @classmethod
    def from_config(cls, settings: Optional[object] = None) -> "SplitState":
        """Create a state using the removal settings of a Config."""
        settings = settings or default_config
        return cls(
            item_removal_mode=settings.ITEM_REMOVAL_MODE,
            cascade_participant_removal=settings.CASCADE_PARTICIPANT_REMOVAL
        )
