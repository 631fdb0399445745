"""Stored record kinds: events, songs, members, quotation requests, donations."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Event:
    """Scheduled or past performance."""
    id: str
    created_at: str
    title: str
    date: str  # calendar date, e.g. "2024-03-17"
    time: str
    location: str
    type: str
    status: str  # "confirmed" | "tentative" | "past" (open set)
    description: Optional[str] = None
    attendance_link: Optional[str] = None


@dataclass
class Song:
    """Recording shown in the gallery."""
    id: str
    created_at: str
    title: str
    audio_url: str
    duration: str  # display only; real duration comes from the audio resource
    category: str  # "original" | "cover" | "live"
    description: Optional[str] = None
    youtube_id: Optional[str] = None


@dataclass
class Member:
    """Group member bio."""
    id: str
    created_at: str
    name: str
    voice_part: str
    image_url: str
    years_with_group: int
    testimony: Optional[str] = None


@dataclass
class QuotationRequest:
    """Booking inquiry from the public form, pending manual follow-up."""
    id: str
    created_at: str
    full_name: str
    phone: str
    email: str
    event_type: str
    event_date: str
    location: str
    amplification_needed: bool = False
    guest_count: Optional[str] = None
    duration: Optional[str] = None
    specific_songs: Optional[str] = None
    special_requests: Optional[str] = None
    status: str = "pending"  # "pending" | "contacted" | "quoted" | "booked"


@dataclass
class Donation:
    """M-Pesa donation request. Completion happens outside this system."""
    id: str
    created_at: str
    amount: float
    phone_number: str
    status: str = "pending"  # "pending" | "completed" | "failed"
    transaction_id: Optional[str] = None
