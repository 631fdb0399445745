"""Events: list (date ascending) and create."""
from fastapi import APIRouter, Depends, HTTPException

from acappella.api.bodies import CreateEventBody
from acappella.api.state import AppState, get_state
from acappella.core.record_store import StoreError, record_to_dict

router = APIRouter()


@router.get("/")
def list_events(state: AppState = Depends(get_state)):
    """All events, earliest date first."""
    try:
        events = state.store.events.list()
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return [record_to_dict(e) for e in events]


@router.post("/", status_code=201)
def create_event(body: CreateEventBody, state: AppState = Depends(get_state)):
    """Create an event; returns its id."""
    try:
        record_id = state.store.events.create(body.model_dump())
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"id": record_id}
