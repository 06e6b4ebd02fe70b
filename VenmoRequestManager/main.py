"""
Venmo Request Manager - FastAPI JSON API

This module exposes the roster, the ledger and the screen toggle as a
small JSON API over the same operations the form app uses.

Features:
    - Add/remove participants
    - Add items for everyone or for a subset of participants
    - Remove an item from one participant's list
    - Per-participant totals with item breakdowns
    - Roster/items screen transitions

Endpoints:
    GET    /state                                   - Everything, with totals
    POST   /participants                            - Add participant
    DELETE /participants/{participant_id}           - Remove participant
    POST   /items                                   - Add item
    DELETE /participants/{participant_id}/items/{item_id} - Remove item from one list
    GET    /participants/{participant_id}/total     - Total and breakdown
    POST   /screen/next                             - Roster -> items (guarded)
    POST   /screen/back                             - Items -> roster
    GET    /health                                  - Health check

Usage:
    uvicorn main:app --reload
"""

from typing import Optional, Union

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from config import config as default_config
from items import add_item_for_all, add_item_for_subset, remove_item
from logging_config import get_api_logger
from participants import add_participant, get_participant, get_participants, remove_participant
from screens import can_advance, go_to_items, go_to_roster
from splitter import explain_participant_total, grand_total
from state import SplitState


# =============================================================================
# Pydantic Models for Request/Response Validation
# =============================================================================

class ParticipantCreate(BaseModel):
    """Request model for adding a participant."""
    name: str = Field(..., description="Participant name")


class ParticipantResponse(BaseModel):
    """Response model for participant data."""
    participant_id: int
    name: str


class ItemCreate(BaseModel):
    """Request model for adding an item."""
    name: str = Field(..., description="Item name")
    price: Union[str, float] = Field(..., description="Price (non-negative)")
    participant_ids: Optional[list[int]] = Field(
        None, description="Participants sharing the item; omit to share with everyone"
    )


class ItemResponse(BaseModel):
    """Response model for item data."""
    item_id: int
    name: str
    price: str
    shared_with: list[int]


class ItemShare(BaseModel):
    item_id: int
    name: str
    price: str
    num_sharers: int
    share: str


class TotalResponse(BaseModel):
    """Response model for one participant's total."""
    participant_id: int
    name: Optional[str]
    items: list[ItemShare]
    total: str


class ScreenResponse(BaseModel):
    screen: str
    can_advance: bool


class StateResponse(BaseModel):
    """Response model for the whole session."""
    screen: str
    can_advance: bool
    participants: list[TotalResponse]
    grand_total: str


# =============================================================================
# FastAPI Application
# =============================================================================

def get_state(request: Request) -> SplitState:
    return request.app.state.split_state


def create_api(settings=None, state=None) -> FastAPI:
    """
    Create the JSON API around one SplitState.

    Args:
        settings: Config to read removal behavior and log level from.
        state: Existing state to serve; a fresh one is created if omitted.
    """
    settings = settings or default_config
    logger = get_api_logger(settings.log_level)

    api = FastAPI(
        title="Venmo Request Manager",
        description="Split shared purchases and see what to request from everyone",
        version="1.0.0"
    )
    api.state.split_state = state if state is not None else SplitState.from_config(settings)

    # =========================================================================
    # API Endpoints
    # =========================================================================

    @api.get("/state", response_model=StateResponse)
    async def read_state(request: Request):
        """Return every participant with their items and total."""
        split_state = get_state(request)
        return StateResponse(
            screen=split_state.screen,
            can_advance=can_advance(split_state),
            participants=[
                explain_participant_total(split_state, p.participant_id)
                for p in get_participants(split_state)
            ],
            grand_total=grand_total(split_state)
        )

    @api.post("/participants", response_model=ParticipantResponse, status_code=201)
    async def create_participant(request: Request, participant_data: ParticipantCreate):
        participant = add_participant(get_state(request), participant_data.name)
        if participant is None:
            raise HTTPException(status_code=400, detail="name must be a non-empty string")
        return ParticipantResponse(**participant.to_dict())

    @api.delete("/participants/{participant_id}", status_code=204)
    async def delete_participant(request: Request, participant_id: int):
        if not remove_participant(get_state(request), participant_id):
            raise HTTPException(status_code=404, detail=f"Participant {participant_id} not found")

    @api.post("/items", response_model=ItemResponse, status_code=201)
    async def create_item(request: Request, item_data: ItemCreate):
        """
        Add an item.

        Request flow:
            1. Validate body shape using the Pydantic model
            2. participant_ids omitted -> add_item_for_all()
               otherwise -> add_item_for_subset()
            3. Rejected input (blank name, bad price, nobody selected) -> 400
        """
        split_state = get_state(request)
        if item_data.participant_ids is None:
            item = add_item_for_all(split_state, item_data.name, item_data.price)
        else:
            item = add_item_for_subset(split_state, item_data.name, item_data.price, item_data.participant_ids)

        if item is None:
            raise HTTPException(
                status_code=400,
                detail="Item rejected: name must be non-empty, price a non-negative number "
                       "and at least one participant selected"
            )
        return ItemResponse(**item.to_dict())

    @api.delete("/participants/{participant_id}/items/{item_id}", status_code=204)
    async def delete_participant_item(request: Request, participant_id: int, item_id: int):
        if not remove_item(get_state(request), participant_id, item_id):
            raise HTTPException(
                status_code=404,
                detail=f"Item {item_id} is not listed for participant {participant_id}"
            )

    @api.get("/participants/{participant_id}/total", response_model=TotalResponse)
    async def read_total(request: Request, participant_id: int):
        split_state = get_state(request)
        if get_participant(split_state, participant_id) is None:
            raise HTTPException(status_code=404, detail=f"Participant {participant_id} not found")
        return explain_participant_total(split_state, participant_id)

    @api.post("/screen/next", response_model=ScreenResponse)
    async def next_screen(request: Request):
        split_state = get_state(request)
        split_state.screen = go_to_items(split_state)
        return ScreenResponse(screen=split_state.screen, can_advance=can_advance(split_state))

    @api.post("/screen/back", response_model=ScreenResponse)
    async def previous_screen(request: Request):
        split_state = get_state(request)
        split_state.screen = go_to_roster(split_state)
        return ScreenResponse(screen=split_state.screen, can_advance=can_advance(split_state))

    # =========================================================================
    # Health Check Endpoint
    # =========================================================================

    @api.get("/health")
    async def health_check():
        """Health check endpoint to verify API is running."""
        return {"status": "healthy", "service": "Venmo Request Manager"}

    logger.info("JSON API ready (item_removal_mode=%s)", api.state.split_state.item_removal_mode)
    return api


app = create_api()


# =============================================================================
# Run with: python main.py
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=default_config.HOST, port=8000, reload=True)
