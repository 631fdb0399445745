"""Data models for records and playback."""
from acappella.models.record import Donation, Event, Member, QuotationRequest, Song
from acappella.models.playback import PlaybackState

__all__ = [
    "Event",
    "Song",
    "Member",
    "QuotationRequest",
    "Donation",
    "PlaybackState",
]
