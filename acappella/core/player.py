"""Single-audio-player coordination: at most one player instance plays at a time.

The page root owns a PlaybackCoordinator holding the "currently playing id".
Each AudioPlayer owns its own AudioResource and subscribes to the
coordinator; when the id changes away from it, the player pauses its own
audio. Players never hold references to each other.
"""
import logging
import math
from typing import Callable, List, Optional

from acappella.core.audio import AudioResource
from acappella.models.playback import PlaybackState
from acappella.models.record import Song

logger = logging.getLogger(__name__)


class PlaybackCoordinator:
    """Owner of the currently playing id; notifies subscribers when it changes."""

    def __init__(self) -> None:
        self._current: Optional[str] = None
        self._subscribers: List[Callable[[Optional[str]], None]] = []

    @property
    def currently_playing(self) -> Optional[str]:
        return self._current

    def set_currently_playing(self, song_id: Optional[str]) -> None:
        if song_id == self._current:
            return
        self._current = song_id
        for callback in list(self._subscribers):
            callback(song_id)

    def subscribe(self, callback: Callable[[Optional[str]], None]) -> Callable[[], None]:
        """Register for changes; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe


def _known(duration: float) -> bool:
    return not math.isnan(duration) and duration > 0


def format_time(seconds: float) -> str:
    """m:ss; NaN shows as 0:00."""
    if math.isnan(seconds):
        return "0:00"
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"


class AudioPlayer:
    """One player instance for a song; controls are inert until it is the current player."""

    def __init__(
        self,
        song: Song,
        coordinator: PlaybackCoordinator,
        audio: Optional[AudioResource] = None,
    ) -> None:
        self.song = song
        self.audio = audio if audio is not None else AudioResource(song.audio_url)
        self._coordinator = coordinator
        self.is_playing = False
        self.is_loading = False
        self.has_error = False
        self.current_time = 0.0
        self.duration = math.nan

        self._handlers = {
            "loadstart": self._on_load_start,
            "loadedmetadata": self._on_loaded_metadata,
            "canplay": self._on_can_play,
            "timeupdate": self._on_time_update,
            "ended": self._on_ended,
            "error": self._on_error,
        }
        for event, handler in self._handlers.items():
            self.audio.add_event_listener(event, handler)
        self._unsubscribe = coordinator.subscribe(self._on_current_changed)

    @property
    def song_id(self) -> str:
        return self.song.id

    @property
    def is_current(self) -> bool:
        return self._coordinator.currently_playing == self.song_id

    # Coordination

    def _on_current_changed(self, current: Optional[str]) -> None:
        if current != self.song_id and self.is_playing:
            self.audio.pause()
            self.is_playing = False
            logger.debug("Player %s paused (now playing: %s)", self.song_id, current)

    def request_play(self) -> bool:
        """Take over playback. Returns False while the resource is still loading."""
        if self.is_loading:
            return False
        self._coordinator.set_currently_playing(self.song_id)
        self.audio.play()
        self.is_playing = True
        self.has_error = False
        return True

    def stop(self) -> None:
        """Pause, rewind to zero and release the currently playing id if held."""
        self.audio.pause()
        self.audio.seek(0.0)
        self.is_playing = False
        self.current_time = 0.0
        if self.is_current:
            self._coordinator.set_currently_playing(None)

    def toggle(self) -> bool:
        """Play/pause button. Returns the resulting is_playing."""
        if self.is_playing:
            self.stop()
        else:
            self.request_play()
        return self.is_playing

    def seek_to_pointer(self, x: float, width: float) -> bool:
        """Seek by pointer offset along a progress bar of the given width.

        Returns False (and leaves position untouched) when this is not the
        current player, the bar has no width, or duration is not known yet.
        """
        if not self.is_current or width <= 0 or not _known(self.duration):
            return False
        fraction = max(0.0, min(1.0, x / width))
        target = fraction * self.duration
        self.audio.seek(target)
        self.current_time = target
        return True

    # Media events

    def _on_load_start(self) -> None:
        self.is_loading = True

    def _on_loaded_metadata(self) -> None:
        self.duration = self.audio.duration

    def _on_can_play(self) -> None:
        self.is_loading = False

    def _on_time_update(self) -> None:
        self.current_time = self.audio.current_time

    def _on_ended(self) -> None:
        self.stop()

    def _on_error(self) -> None:
        logger.warning("Audio failed to load for %s (%s)", self.song_id, self.audio.src)
        self.is_loading = False
        self.has_error = True
        self.stop()

    # Display

    def display_time(self) -> str:
        """'elapsed / total'; total falls back to the song's nominal duration."""
        if _known(self.duration):
            total = format_time(self.duration)
        else:
            total = self.song.duration or "0:00"
        return f"{format_time(self.current_time)} / {total}"

    def progress_percentage(self) -> float:
        if not _known(self.duration):
            return 0.0
        return max(0.0, min(100.0, self.current_time / self.duration * 100))

    def snapshot(self) -> PlaybackState:
        return PlaybackState(
            song_id=self.song_id,
            is_playing=self.is_playing,
            is_loading=self.is_loading,
            current_time=self.current_time,
            duration=self.duration,
            display_time=self.display_time(),
            progress_percentage=self.progress_percentage(),
        )

    def close(self) -> None:
        """Unmount: stop, drop listeners and the coordinator subscription."""
        if self.is_playing or self.is_current:
            self.stop()
        for event, handler in self._handlers.items():
            self.audio.remove_event_listener(event, handler)
        self._unsubscribe()
