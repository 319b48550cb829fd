from typing import List, Optional

from event_service_api.app.schemas.participation_status import ParticipationStatusRead
from event_service_api.app.services.base import ResourceService


class ParticipationStatusService(ResourceService):
    table = "participation_status"
    entity = "participation status"
    columns = (
        "participation_option",
        "participant_id",
        "event_id",
        "confirmed",
        "registration_date",
        "deleted",
    )
    select_columns = ("id",) + columns + ("created_at", "updated_at")
    order_by = "created_at ASC, id ASC"
    read_schema = ParticipationStatusRead

    def list_for_event(
        self, skip: int = 0, limit: int = 10, event_id: Optional[int] = None
    ) -> List[ParticipationStatusRead]:
        """Page through statuses in registration order, optionally for one event."""
        return self.list(skip=skip, limit=limit, filters={"event_id": event_id})
