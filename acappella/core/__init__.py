"""Core services: record store, audio players, modals, forms."""
from acappella.core.record_store import RecordStore, StoreError
from acappella.core.player import AudioPlayer, PlaybackCoordinator
from acappella.core.modal import ModalController

__all__ = [
    "RecordStore",
    "StoreError",
    "AudioPlayer",
    "PlaybackCoordinator",
    "ModalController",
]
