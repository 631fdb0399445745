"""Shared application state (injected into routes)."""
from pathlib import Path
from typing import Optional

from acappella.core.record_store import RecordStore


class AppState:
    def __init__(self, records_path: Optional[Path] = None) -> None:
        self.store = RecordStore(records_path)


_state = AppState()


def get_state() -> AppState:
    return _state
