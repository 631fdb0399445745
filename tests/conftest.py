"""
Pytest configuration and fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from acappella.api.app import app
from acappella.api.state import AppState, get_state
from acappella.core.notifications import Notifier
from acappella.core.player import PlaybackCoordinator
from acappella.core.record_store import RecordStore
from acappella.models.record import Song


@pytest.fixture
def store(tmp_path):
    """Empty record store backed by a temp file."""
    return RecordStore(tmp_path / "records.json")


@pytest.fixture
def state(tmp_path):
    return AppState(tmp_path / "records.json")


@pytest.fixture
def client(state):
    """API client whose routes use a temp-file store."""
    app.dependency_overrides[get_state] = lambda: state
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def coordinator():
    return PlaybackCoordinator()


def make_song(song_id, duration="4:32"):
    return Song(
        id=song_id,
        created_at="",
        title=f"Song {song_id}",
        audio_url=f"/audio/{song_id}.mp3",
        duration=duration,
        category="original",
    )


@pytest.fixture
def song_factory():
    return make_song
