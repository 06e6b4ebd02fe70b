"""
Splitter Module

This module handles the splitting arithmetic: how much each participant
owes for the items in their list.

Features:
    - Equal splitting among an item's sharers
    - Per-participant totals and per-item breakdowns
    - Decimal-safe, half-up rounding to cents
    - Tolerates sharer ids of participants who have left the roster

Data Model:
    Input - state.items (see items.py), each with price and shared_with.

    Output - totals (dict keyed by participant_id):
        - "25.00" style strings, exactly 2 decimals

Functions:
    per_head_share: One sharer's part of an item's price.
    compute_total: A participant's total as a 2-decimal string.
    calculate_totals: Totals for everyone on the roster.
    explain_participant_total: Item-by-item breakdown for one participant.
"""

from decimal import Decimal

from items import Item, get_items_for_participant
from participants import get_participant, get_participants
from utils import format_amount


def per_head_share(item: Item) -> Decimal:
    """
    Calculate one sharer's part of an item's price.

    The price is divided by the number of ids in shared_with, including
    ids of participants who have since been removed from the roster, so
    removing someone never changes what the others owe.

    Args:
        item: The item to split.

    Returns:
        Decimal: Unrounded per-head amount; 0 if nobody shares the item.
    """
    if not item.shared_with:
        return Decimal("0")
    return item.price / Decimal(max(1, len(item.shared_with)))


def _participant_share(item: Item, participant_id: int) -> Decimal:
    # An item listed for someone outside shared_with contributes nothing
    if participant_id not in item.shared_with:
        return Decimal("0")
    return per_head_share(item)


def compute_total(state, participant_id: int) -> str:
    """
    Calculate what a participant owes across all items in their list.

    Shares are summed unrounded and the sum is rounded once, half-up, to
    2 decimal places.

    Args:
        state: The SplitState to read.
        participant_id: The ID of the participant.

    Returns:
        str: Total such as "25.00"; "0.00" for an unknown participant.
    """
    total = sum(
        (_participant_share(item, participant_id) for item in get_items_for_participant(state, participant_id)),
        Decimal("0")
    )
    return format_amount(total)


def calculate_totals(state) -> dict:
    """
    Calculate totals for every participant on the roster.

    Returns:
        dict: participant_id -> total string, in roster order.
    """
    return {p.participant_id: compute_total(state, p.participant_id) for p in get_participants(state)}


def explain_participant_total(state, participant_id: int) -> dict:
    """
    Generate a breakdown of how a participant's total was calculated.

    Args:
        state: The SplitState to read.
        participant_id: ID of the participant to explain.

    Returns:
        dict: Explanation containing:
            - participant_id: int
            - name: string or None if not on the roster
            - items: list of dicts with item_id, name, price,
              num_sharers and share (2-decimal strings)
            - total: string (same value as compute_total)
    """
    participant = get_participant(state, participant_id)

    breakdown = []
    for item in get_items_for_participant(state, participant_id):
        breakdown.append({
            "item_id": item.item_id,
            "name": item.name,
            "price": format_amount(item.price),
            "num_sharers": len(item.shared_with),
            "share": format_amount(_participant_share(item, participant_id))
        })

    return {
        "participant_id": participant_id,
        "name": participant.name if participant else None,
        "items": breakdown,
        "total": compute_total(state, participant_id)
    }


def grand_total(state) -> str:
    """
    Total requested from everyone on the roster, as a 2-decimal string.

    Items no current participant is charged for (detached by every
    sharer, or shared only by removed participants) do not count.
    """
    total = sum(
        (
            _participant_share(item, p.participant_id)
            for p in get_participants(state)
            for item in get_items_for_participant(state, p.participant_id)
        ),
        Decimal("0")
    )
    return format_amount(total)
