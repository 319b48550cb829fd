"""
Participant endpoints for API v1.

Participants can be fetched by numeric id, by e-mail address or by
Keycloak user id.  Updates are partial: fields left out of the PATCH
body keep their stored values.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import EmailStr

from event_service_api.app.core.db import Database, get_db
from event_service_api.app.schemas.common import ERROR_RESPONSES, Envelope, Message, envelope
from event_service_api.app.schemas.participant import ParticipantCreate, ParticipantRead, ParticipantUpdate
from event_service_api.app.services.participant_service import ParticipantService
from .pagination import Page, page_params

router = APIRouter(responses=ERROR_RESPONSES)


@router.post(
    "/participant/",
    response_model=Envelope[ParticipantRead],
    status_code=status.HTTP_201_CREATED,
)
def create_participant(payload: ParticipantCreate, db: Database = Depends(get_db)):
    """Register a new participant.

    ``keycloak_id`` must be a UUID and ``email`` a valid address; both
    must be unique.
    """
    participant = ParticipantService(db).create(payload)
    return envelope("Created new participant!", participant)


@router.get("/participants", response_model=Envelope[List[ParticipantRead]])
def list_participants(page: Page = Depends(page_params), db: Database = Depends(get_db)):
    participants = ParticipantService(db).list(skip=page.skip, limit=page.limit)
    return envelope("Fetched!", participants)


@router.get("/participant/email/{email}", response_model=Envelope[ParticipantRead])
def get_participant_by_email(email: EmailStr, db: Database = Depends(get_db)):
    """Look a participant up by e-mail.

    The address is normalised the same way as on create, so the domain
    part matches regardless of case.
    """
    return envelope("Fetched!", ParticipantService(db).get_by_email(str(email)))


@router.get("/participant/keycloakid/{keycloak_id}", response_model=Envelope[ParticipantRead])
def get_participant_by_keycloak_id(keycloak_id: UUID, db: Database = Depends(get_db)):
    return envelope("Fetched!", ParticipantService(db).get_by_keycloak_id(str(keycloak_id)))


@router.get("/participant/{participant_id}", response_model=Envelope[ParticipantRead])
def get_participant(participant_id: int, db: Database = Depends(get_db)):
    return envelope("Fetched!", ParticipantService(db).get(participant_id))


@router.patch("/participant/{participant_id}", response_model=Envelope[ParticipantRead])
def update_participant(participant_id: int, payload: ParticipantUpdate, db: Database = Depends(get_db)):
    participant = ParticipantService(db).update(participant_id, payload)
    return envelope("Participant updated successfully", participant)


@router.delete("/participant/{participant_id}", response_model=Message)
def delete_participant(participant_id: int, db: Database = Depends(get_db)):
    ParticipantService(db).delete(participant_id)
    return envelope("Participant deleted successfully!")
