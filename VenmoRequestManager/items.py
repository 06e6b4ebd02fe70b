"""
Items Module

This module handles the ledger: shared purchases and who is liable for them.

Features:
    - Add an item shared by everyone on the roster
    - Add an item shared by a chosen subset of participants
    - Remove an item from one participant's list (detach/share/delete modes)
    - Per-participant item lists derived on every read

Data Model:
    Item stored once at: state.items[item_id]
    Fields:
        - item_id: int (monotonic, never reused)
        - name: string (trimmed, non-empty)
        - price: Decimal (>= 0)
        - shared_with: list of participant_ids liable for the price
        - detached: set of participant_ids who removed the item from
          their own list without changing anyone else's share

    A participant's item list is every item whose shared_with contains
    the participant and whose detached set does not, in the order the
    items were added.

Functions:
    add_item_for_all: Add an item shared by every current participant.
    add_item_for_subset: Add an item shared by the given participants.
    remove_item: Remove an item from one participant's list.
    get_items: Get all items.
    get_item: Look up one item by id.
    get_items_for_participant: Get the items a participant is charged for.
"""

from decimal import Decimal
from typing import Iterable, Optional

from config import REMOVAL_DELETE, REMOVAL_DETACH, REMOVAL_SHARE
from logging_config import get_core_logger
from utils import clean_name, format_amount, parse_price, parse_ids

logger = get_core_logger()


class Item:
    """
    Represents a single shared purchase.

    Attributes:
        item_id (int): Unique identifier for the item.
        name (str): What was bought.
        price (Decimal): Full price of the purchase.
        shared_with (list[int]): Participant IDs splitting the price.
        detached (set[int]): Participant IDs who removed it from their list.
    """

    def __init__(
        self,
        item_id: int,
        name: str,
        price: Decimal,
        shared_with: list[int],
        detached: Optional[set[int]] = None
    ):
        self.item_id = item_id
        self.name = name
        self.price = price
        self.shared_with = list(shared_with)
        self.detached = set(detached or ())

    def is_listed_for(self, participant_id: int) -> bool:
        """True if the item shows up in the participant's list."""
        return participant_id in self.shared_with and participant_id not in self.detached

    def drop_sharer(self, participant_id: int) -> None:
        """Stop charging a participant for this item."""
        self.shared_with = [pid for pid in self.shared_with if pid != participant_id]
        self.detached.discard(participant_id)

    def to_dict(self) -> dict:
        """Convert item to a plain dictionary (price as a 2-decimal string)."""
        return {
            "item_id": self.item_id,
            "name": self.name,
            "price": format_amount(self.price),
            "shared_with": list(self.shared_with)
        }

    def __repr__(self) -> str:
        """Return string representation of item."""
        return f"Item(id={self.item_id}, name='{self.name}', price={self.price}, shared_with={self.shared_with})"


def _create_item(state, name: str, price, participant_ids: list[int]) -> Optional[Item]:
    """
    Validate input and store a new item.

    Returns None without touching the state when the name is blank, the
    price is not a non-negative number or nobody is left to share it.
    """
    cleaned = clean_name(name)
    if cleaned is None:
        logger.debug("Rejected item with empty name: %r", name)
        return None

    parsed_price = parse_price(price)
    if parsed_price is None:
        logger.debug("Rejected item '%s' with invalid price: %r", cleaned, price)
        return None

    if not participant_ids:
        logger.debug("Rejected item '%s' with no participants selected", cleaned)
        return None

    item = Item(
        item_id=state.next_item_id(),
        name=cleaned,
        price=parsed_price,
        shared_with=participant_ids
    )
    logger.info(
        "Added item %s (%s, %s) shared by %s",
        item.item_id, item.name, format_amount(item.price), item.shared_with
    )
    state.items[item.item_id] = item
    return item


def add_item_for_all(state, name: str, price) -> Optional[Item]:
    """
    Add an item shared by every participant currently on the roster.

    Participants added later are not charged for it.

    Args:
        state: The SplitState to add to.
        name: Name of the item.
        price: Price as entered (string or number).

    Returns:
        Item | None: The created item, or None if the roster is empty or
        the name/price is invalid.
    """
    if not state.participants:
        logger.debug("Rejected item %r: roster is empty", name)
        return None
    return _create_item(state, name, price, list(state.participants))


def add_item_for_subset(state, name: str, price, participant_ids: Iterable) -> Optional[Item]:
    """
    Add an item shared by the given participants only.

    Ids are de-duplicated and ids not on the roster are ignored.

    Args:
        state: The SplitState to add to.
        name: Name of the item.
        price: Price as entered (string or number).
        participant_ids: IDs of the participants splitting the price.

    Returns:
        Item | None: The created item, or None if the name/price is invalid
        or no known participant was selected.
    """
    selected = [pid for pid in parse_ids(participant_ids) if pid in state.participants]
    return _create_item(state, name, price, selected)


def remove_item(state, participant_id: int, item_id: int) -> bool:
    """
    Remove an item from one participant's list.

    What happens to co-sharers depends on state.item_removal_mode:
        - detach: only this participant stops seeing the item; everyone
          else keeps paying the same per-head amount.
        - share: this participant's share is dropped and the remaining
          sharers split the full price; an item nobody shares is deleted.
        - delete: the item is deleted for every sharer.

    Args:
        state: The SplitState to change.
        participant_id: The participant whose list the item is removed from.
        item_id: The item to remove.

    Returns:
        bool: True if something changed, False if the participant or item
        is unknown or the item is not in that participant's list.
    """
    item = state.items.get(item_id)
    if item is None or participant_id not in state.participants or not item.is_listed_for(participant_id):
        logger.debug("Ignored removal of item %s for participant %s", item_id, participant_id)
        return False

    mode = state.item_removal_mode
    if mode == REMOVAL_DETACH:
        item.detached.add(participant_id)
    elif mode == REMOVAL_SHARE:
        item.drop_sharer(participant_id)
        if not item.shared_with:
            del state.items[item_id]
    elif mode == REMOVAL_DELETE:
        del state.items[item_id]

    logger.info("Removed item %s for participant %s (mode=%s)", item_id, participant_id, mode)
    return True


def get_items(state) -> list[Item]:
    """Get all items in the order they were added."""
    return list(state.items.values())


def get_item(state, item_id: int) -> Optional[Item]:
    return state.items.get(item_id)


def get_items_for_participant(state, participant_id: int) -> list[Item]:
    """
    Get the items a participant is charged for.

    Derived from the item store on every call, so the list can never
    drift from the items themselves.

    Args:
        state: The SplitState to read.
        participant_id: The ID of the participant.

    Returns:
        list[Item]: Items listed for the participant, in insertion order;
        empty if the participant is not on the roster.
    """
    if participant_id not in state.participants:
        return []
    return [item for item in state.items.values() if item.is_listed_for(participant_id)]
