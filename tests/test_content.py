"""Two-tier content read: live records, else static samples."""
from acappella.core import content
from acappella.core.record_store import StoreError
from acappella.core.sample_data import SAMPLE_EVENTS, SAMPLE_MEMBERS


def test_empty_store_falls_back_to_samples(store):
    assert content.display_members(store) == SAMPLE_MEMBERS
    assert content.display_events(store) == SAMPLE_EVENTS
    assert [s.id for s in content.display_songs(store, "cover")] == ["cover-1", "cover-2", "cover-3"]


def test_live_records_replace_samples(store):
    store.members.create({"name": "Ken Ogetii", "voice_part": "Tenor", "image_url": "", "years_with_group": 4})
    members = content.display_members(store)
    assert [m.name for m in members] == ["Ken Ogetii"]


def test_live_songs_only_replace_their_category(store):
    store.songs.create({"title": "New", "audio_url": "/audio/new.mp3", "duration": "3:00", "category": "original"})
    assert [s.title for s in content.display_songs(store, "original")] == ["New"]
    assert len(content.display_songs(store, "live")) == 3


def test_store_error_degrades_to_samples(store, monkeypatch):
    def fail(*args, **kwargs):
        raise StoreError("down")

    monkeypatch.setattr(store, "load", fail)
    assert content.display_events(store) == SAMPLE_EVENTS


def test_initials_and_colors():
    assert content.initials("Davis Rogoncho") == "DR"
    assert content.initials("Ken") == "K"
    assert content.voice_part_color("Tenor") == "#60A5FA"
    assert content.voice_part_color("Alto") == content.DEFAULT_VOICE_PART_COLOR
