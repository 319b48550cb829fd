"""Participant data access, with lookups by e-mail and Keycloak id."""

from event_service_api.app.schemas.participant import ParticipantRead
from event_service_api.app.services.base import ResourceService


class ParticipantService(ResourceService):
    table = "participant"
    entity = "participant"
    columns = (
        "keycloak_id",
        "first_language",
        "email_language",
        "dob",
        "gender",
        "email",
        "country",
        "first_name",
        "last_name",
    )
    select_columns = ("id",) + columns + ("created_at", "updated_at")
    read_schema = ParticipantRead

    def get_by_email(self, email: str) -> ParticipantRead:
        return self.get_by("email", email)

    def get_by_keycloak_id(self, keycloak_id: str) -> ParticipantRead:
        return self.get_by("keycloak_id", keycloak_id)
