"""Songs: list, filter by category, create."""
from fastapi import APIRouter, Depends, HTTPException

from acappella.api.bodies import CreateSongBody
from acappella.api.state import AppState, get_state
from acappella.core.record_store import StoreError, record_to_dict

router = APIRouter()


@router.get("/")
def list_songs(state: AppState = Depends(get_state)):
    try:
        songs = state.store.songs.list()
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return [record_to_dict(s) for s in songs]


@router.get("/category/{category}")
def songs_by_category(category: str, state: AppState = Depends(get_state)):
    """Songs in one category (original, cover, live); exact match."""
    try:
        songs = state.store.songs.by_category(category)
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return [record_to_dict(s) for s in songs]


@router.post("/", status_code=201)
def create_song(body: CreateSongBody, state: AppState = Depends(get_state)):
    try:
        record_id = state.store.songs.create(body.model_dump())
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"id": record_id}
