"""
Business logic for events.

Besides the common CRUD operations an event supports two kinds of
deletion:

* ``delete`` is a soft delete.  The event row and every row hanging off
  it (event items, event participation options and participation
  statuses) get ``deleted = 1`` in a single transaction, so either all
  of them are marked or none is.
* ``hard_delete`` removes the event row.  Dependent rows go with it via
  ``ON DELETE CASCADE``.

Event items and event participation options are plain resources with
their own services below.
"""

import sqlite3
from typing import List, Optional

from event_service_api.app.core.errors import InvalidValuesError, NotFoundError
from event_service_api.app.schemas.event import EventItemRead, EventParticipationOptionRead, EventRead
from event_service_api.app.services.base import ResourceService

# Tables whose rows reference an event through ``event_id`` and are
# soft-deleted together with it.
EVENT_DEPENDENT_TABLES = ("event_item", "event_participation_option", "participation_status")


class EventService(ResourceService):
    table = "event"
    entity = "event"
    columns = (
        "registration_required",
        "registration_status",
        "audience",
        "slug",
        "name",
        "logo",
        "content",
        "deleted",
        "starts_on",
        "ends_on",
        "date_confirmed",
    )
    select_columns = ("id",) + columns + ("created_at", "updated_at")
    read_schema = EventRead

    def list_events(self, skip: int = 0, limit: int = 10, slug: Optional[str] = None) -> List[EventRead]:
        return self.list(skip=skip, limit=limit, filters={"slug": slug})

    def delete(self, key: int) -> None:
        """Soft-delete an event and its dependent rows.

        Raises ``NotFoundError`` if no event has the id; in that case no
        dependent row is touched.
        """
        try:
            with self.db.transaction() as cursor:
                cursor.execute(
                    "UPDATE event SET deleted = 1, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                    (key,),
                )
                if cursor.rowcount == 0:
                    raise NotFoundError()
                marked = {}
                for table in EVENT_DEPENDENT_TABLES:
                    cursor.execute(
                        f"UPDATE {table} SET deleted = 1, updated_at = CURRENT_TIMESTAMP WHERE event_id = ?",
                        (key,),
                    )
                    marked[table] = cursor.rowcount
        except sqlite3.Error as exc:
            raise self._store_error("deleting", exc) from exc
        except OverflowError as exc:
            raise InvalidValuesError() from exc
        self.logger.info("Soft-deleted event %s (dependents: %s)", key, marked)

    def hard_delete(self, key: int) -> None:
        """Remove the event row for good."""
        self._delete_where(self.key_column, key)


class EventItemService(ResourceService):
    table = "event_item"
    entity = "event item"
    columns = ("event_id", "item_id", "deleted")
    select_columns = ("id",) + columns + ("created_at", "updated_at")
    read_schema = EventItemRead


class EventParticipationOptionService(ResourceService):
    table = "event_participation_option"
    entity = "event participation option"
    columns = ("event_id", "participation_option", "deleted")
    select_columns = ("id",) + columns + ("created_at", "updated_at")
    read_schema = EventParticipationOptionRead
