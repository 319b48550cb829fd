"""
Pydantic models for events and the rows attached to them.

``EventCreate`` requires the slug, name and date range; everything else
is optional.  ``EventItem`` and ``EventParticipationOption`` attach items
and participation options to an event; both carry the ``deleted`` flag
that the event's cascading soft delete sets.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import PartialModel, ReadModel


class EventCreate(BaseModel):
    registration_required: Optional[bool] = Field(None, examples=[True])
    registration_status: Optional[str] = Field(None, examples=["open"])
    audience: Optional[str] = Field(None, examples=["public"])
    slug: str = Field(..., examples=["summer-summit-2025"])
    name: str = Field(..., examples=["Summer Summit"])
    logo: Optional[str] = None
    content: Optional[str] = None
    deleted: Optional[bool] = None
    starts_on: datetime = Field(..., examples=["2025-09-01T09:00:00Z"])
    ends_on: datetime = Field(..., examples=["2025-09-03T18:00:00Z"])
    date_confirmed: Optional[bool] = None


class EventUpdate(PartialModel):
    """All fields optional; unspecified fields keep their stored values."""

    not_nullable = ("slug", "name", "deleted", "starts_on", "ends_on")

    registration_required: Optional[bool] = None
    registration_status: Optional[str] = None
    audience: Optional[str] = None
    slug: Optional[str] = None
    name: Optional[str] = None
    logo: Optional[str] = None
    content: Optional[str] = None
    deleted: Optional[bool] = None
    starts_on: Optional[datetime] = None
    ends_on: Optional[datetime] = None
    date_confirmed: Optional[bool] = None


class EventRead(ReadModel):
    id: int
    registration_required: Optional[bool] = None
    registration_status: Optional[str] = None
    audience: Optional[str] = None
    slug: str
    name: str
    logo: Optional[str] = None
    content: Optional[str] = None
    deleted: bool = False
    starts_on: datetime
    ends_on: datetime
    date_confirmed: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventItemCreate(BaseModel):
    event_id: int
    item_id: int
    deleted: Optional[bool] = None


class EventItemUpdate(PartialModel):
    not_nullable = ("event_id", "item_id", "deleted")

    event_id: Optional[int] = None
    item_id: Optional[int] = None
    deleted: Optional[bool] = None


class EventItemRead(ReadModel):
    id: int
    event_id: int
    item_id: int
    deleted: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventParticipationOptionCreate(BaseModel):
    event_id: int
    participation_option: str = Field(..., examples=["onsite"])
    deleted: Optional[bool] = None


class EventParticipationOptionUpdate(PartialModel):
    not_nullable = ("event_id", "participation_option", "deleted")

    event_id: Optional[int] = None
    participation_option: Optional[str] = None
    deleted: Optional[bool] = None


class EventParticipationOptionRead(ReadModel):
    id: int
    event_id: int
    participation_option: str
    deleted: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
