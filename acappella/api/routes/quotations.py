"""Quotation requests from the booking form. Status starts as pending; follow-up happens elsewhere."""
from fastapi import APIRouter, Depends, HTTPException

from acappella.api.bodies import CreateQuotationBody
from acappella.api.state import AppState, get_state
from acappella.core.record_store import StoreError, record_to_dict

router = APIRouter()


@router.get("/")
def list_quotations(state: AppState = Depends(get_state)):
    """All requests, most recent first."""
    try:
        quotations = state.store.quotations.list()
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return [record_to_dict(q) for q in quotations]


@router.post("/", status_code=201)
def create_quotation(body: CreateQuotationBody, state: AppState = Depends(get_state)):
    """Record a booking inquiry with status pending."""
    try:
        record_id = state.store.quotations.create(body.model_dump())
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"id": record_id}
