"""Members: list and create."""
from fastapi import APIRouter, Depends, HTTPException

from acappella.api.bodies import CreateMemberBody
from acappella.api.state import AppState, get_state
from acappella.core.record_store import StoreError, record_to_dict

router = APIRouter()


@router.get("/")
def list_members(state: AppState = Depends(get_state)):
    try:
        members = state.store.members.list()
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return [record_to_dict(m) for m in members]


@router.post("/", status_code=201)
def create_member(body: CreateMemberBody, state: AppState = Depends(get_state)):
    try:
        record_id = state.store.members.create(body.model_dump())
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"id": record_id}
