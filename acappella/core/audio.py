"""Audio resource owned by a single player: position, duration, paused flag, media events."""
import logging
import math
from collections import defaultdict
from typing import Callable, DefaultDict, List

logger = logging.getLogger(__name__)

MEDIA_EVENTS = ("loadstart", "loadedmetadata", "canplay", "timeupdate", "ended", "error")


class AudioResource:
    """In-memory media element.

    Playback position and readiness are pushed in by whoever drives the
    media (the browser bridge, or tests) through load_start(),
    loaded_metadata(), can_play(), time_update(), end() and fail().
    Listeners registered with add_event_listener() fire synchronously.
    """

    def __init__(self, src: str) -> None:
        self.src = src
        self.current_time = 0.0
        self.duration = math.nan
        self.paused = True
        self._listeners: DefaultDict[str, List[Callable[[], None]]] = defaultdict(list)

    def add_event_listener(self, event: str, callback: Callable[[], None]) -> None:
        if event not in MEDIA_EVENTS:
            raise ValueError(f"Unknown media event: {event}")
        self._listeners[event].append(callback)

    def remove_event_listener(self, event: str, callback: Callable[[], None]) -> None:
        try:
            self._listeners[event].remove(callback)
        except ValueError:
            pass

    def _emit(self, event: str) -> None:
        for callback in list(self._listeners[event]):
            callback()

    # Controls

    def play(self) -> None:
        self.paused = False

    def pause(self) -> None:
        self.paused = True

    def seek(self, position: float) -> None:
        """Move playhead; clamped to [0, duration] once duration is known."""
        position = max(0.0, float(position))
        if not math.isnan(self.duration):
            position = min(position, self.duration)
        self.current_time = position

    # Media events

    def load_start(self) -> None:
        self._emit("loadstart")

    def loaded_metadata(self, duration: float) -> None:
        self.duration = float(duration)
        self._emit("loadedmetadata")

    def can_play(self) -> None:
        self._emit("canplay")

    def time_update(self, position: float) -> None:
        self.current_time = float(position)
        self._emit("timeupdate")

    def end(self) -> None:
        """Playback reached the end of the media."""
        self.paused = True
        self._emit("ended")

    def fail(self) -> None:
        """Media could not be loaded or decoded."""
        logger.debug("Audio resource failed: %s", self.src)
        self.paused = True
        self._emit("error")
