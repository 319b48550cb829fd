"""
Participant schemas.

A participant is identified internally by ``id`` and externally by the
Keycloak user id and e-mail address, both unique.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from .common import PartialModel, ReadModel


class ParticipantCreate(BaseModel):
    keycloak_id: UUID = Field(..., examples=["3f1c2b8e-7d4a-4f6e-9a51-2c9d8e7b6a10"])
    first_language: Optional[str] = Field(None, examples=["en"])
    email_language: Optional[str] = Field(None, examples=["en"])
    dob: Optional[datetime] = Field(None, examples=["1990-05-17T00:00:00Z"])
    gender: Optional[str] = None
    email: EmailStr = Field(..., examples=["jane.doe@example.com"])
    country: Optional[str] = Field(None, examples=["CH"])
    first_name: str = Field(..., examples=["Jane"])
    last_name: str = Field(..., examples=["Doe"])


class ParticipantUpdate(PartialModel):
    """All fields optional; only the fields sent are written."""

    not_nullable = ("keycloak_id", "email", "first_name", "last_name")

    keycloak_id: Optional[UUID] = None
    first_language: Optional[str] = None
    email_language: Optional[str] = None
    dob: Optional[datetime] = None
    gender: Optional[str] = None
    email: Optional[EmailStr] = None
    country: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ParticipantRead(ReadModel):
    id: int
    keycloak_id: str
    first_language: Optional[str] = None
    email_language: Optional[str] = None
    dob: Optional[datetime] = None
    gender: Optional[str] = None
    email: str
    country: Optional[str] = None
    first_name: str
    last_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
