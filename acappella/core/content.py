"""Landing page content: live records when the store has any, else the static samples."""
import logging
from typing import Callable, List, TypeVar

from acappella.core.record_store import RecordStore, StoreError
from acappella.core.sample_data import SAMPLE_EVENTS, SAMPLE_MEMBERS, SAMPLE_SONGS
from acappella.models.record import Event, Member, Song

logger = logging.getLogger(__name__)

T = TypeVar("T")

VOICE_PART_COLORS = {
    "Lead": "#FFD700",
    "Tenor": "#60A5FA",
    "Baritone": "#4ADE80",
    "Bass": "#F87171",
    "Soprano": "#F472B6",
}
# Unknown voice parts use the primary gold
DEFAULT_VOICE_PART_COLOR = "#FFD700"


def _live_or_sample(read: Callable[[], List[T]], samples: List[T], kind: str) -> List[T]:
    try:
        live = read()
    except StoreError as e:
        logger.warning("Reading %s failed, showing samples: %s", kind, e)
        return list(samples)
    return live if live else list(samples)


def display_members(store: RecordStore) -> List[Member]:
    return _live_or_sample(store.members.list, SAMPLE_MEMBERS, "members")


def display_events(store: RecordStore) -> List[Event]:
    return _live_or_sample(store.events.list, SAMPLE_EVENTS, "events")


def display_songs(store: RecordStore, category: str) -> List[Song]:
    samples = [s for s in SAMPLE_SONGS if s.category == category]
    return _live_or_sample(lambda: store.songs.by_category(category), samples, "songs")


def voice_part_color(voice_part: str) -> str:
    return VOICE_PART_COLORS.get(voice_part, DEFAULT_VOICE_PART_COLOR)


def initials(name: str) -> str:
    """Avatar fallback when a member image fails to load."""
    return "".join(part[0] for part in name.split())
