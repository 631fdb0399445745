"""Audio player state as seen by the page."""
from dataclasses import dataclass


@dataclass
class PlaybackState:
    """Snapshot of one audio player instance."""
    song_id: str
    is_playing: bool
    is_loading: bool
    current_time: float
    duration: float  # NaN until metadata has loaded
    display_time: str
    progress_percentage: float
