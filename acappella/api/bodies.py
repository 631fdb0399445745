"""Request bodies for record creation. Wire names are camelCase; snake_case is accepted too."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CreateBody(BaseModel):
    # Server-assigned fields (id, status, transactionId) are rejected
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class CreateEventBody(CreateBody):
    title: str
    date: str
    time: str
    location: str
    type: str
    status: str
    description: Optional[str] = None
    attendance_link: Optional[str] = None


class CreateSongBody(CreateBody):
    title: str
    audio_url: str
    duration: str
    category: str
    description: Optional[str] = None
    youtube_id: Optional[str] = None


class CreateMemberBody(CreateBody):
    name: str
    voice_part: str
    image_url: str
    years_with_group: int = Field(ge=0)
    testimony: Optional[str] = None


class CreateQuotationBody(CreateBody):
    full_name: str
    phone: str
    email: str
    event_type: str
    event_date: str
    location: str
    guest_count: Optional[str] = None
    duration: Optional[str] = None
    amplification_needed: bool
    specific_songs: Optional[str] = None
    special_requests: Optional[str] = None


class CreateDonationBody(CreateBody):
    amount: float = Field(gt=0, allow_inf_nan=False)
    phone_number: str
