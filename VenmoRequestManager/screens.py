"""
Screens Module

The form has exactly two views: the roster, where participants are added,
and the items view, where purchases are entered and totals shown.

    ROSTER --(roster non-empty)--> ITEMS
    ITEMS  --------------------->  ROSTER

Transitions are pure: they return the next screen and never mutate the
state. Callers assign the result back to ``state.screen``.
"""

ROSTER = "roster"
ITEMS = "items"
SCREENS = (ROSTER, ITEMS)


def can_advance(state) -> bool:
    """Moving to the items view requires at least one participant."""
    return len(state.participants) > 0


def go_to_items(state) -> str:
    """Return ITEMS when the guard holds, otherwise the current screen."""
    if not can_advance(state):
        return state.screen
    return ITEMS


def go_to_roster(state) -> str:
    return ROSTER
