"""M-Pesa donation requests. Only the pending request is recorded here."""
from fastapi import APIRouter, Depends, HTTPException

from acappella.api.bodies import CreateDonationBody
from acappella.api.state import AppState, get_state
from acappella.core.record_store import StoreError, record_to_dict

router = APIRouter()


@router.get("/")
def list_donations(state: AppState = Depends(get_state)):
    try:
        donations = state.store.donations.list()
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return [record_to_dict(d) for d in donations]


@router.post("/", status_code=201)
def create_donation(body: CreateDonationBody, state: AppState = Depends(get_state)):
    """Record a donation request with status pending and no transaction id."""
    try:
        record_id = state.store.donations.create(body.model_dump())
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"id": record_id}
