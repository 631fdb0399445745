"""Landing page sections: live records, or the static samples when there are none."""
from fastapi import APIRouter, Depends

from acappella.api.state import AppState, get_state
from acappella.core.content import (
    display_events,
    display_members,
    display_songs,
    initials,
    voice_part_color,
)
from acappella.core.record_store import record_to_dict

router = APIRouter()


@router.get("/members")
def members_section(state: AppState = Depends(get_state)):
    """Members with avatar initials and voice-part color."""
    out = []
    for m in display_members(state.store):
        item = record_to_dict(m)
        item["initials"] = initials(m.name)
        item["voicePartColor"] = voice_part_color(m.voice_part)
        out.append(item)
    return out


@router.get("/events")
def events_section(state: AppState = Depends(get_state)):
    return [record_to_dict(e) for e in display_events(state.store)]


@router.get("/songs/{category}")
def songs_section(category: str, state: AppState = Depends(get_state)):
    return [record_to_dict(s) for s in display_songs(state.store, category)]
