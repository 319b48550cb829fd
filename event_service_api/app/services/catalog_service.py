"""
Data access for the name-keyed lookup tables.

Participation options, platforms and audiences are keyed by ``name``;
renaming one is an ordinary partial update of the ``name`` column and
the foreign keys pointing at it follow along.
"""

from event_service_api.app.schemas.catalog import AudienceRead, ParticipationOptionRead, PlatformRead
from event_service_api.app.services.base import ResourceService


class ParticipationOptionService(ResourceService):
    table = "participation_option"
    entity = "participation option"
    key_column = "name"
    columns = ("name",)
    select_columns = ("name",)
    order_by = "name ASC"
    read_schema = ParticipationOptionRead


class PlatformService(ResourceService):
    table = "platform"
    entity = "platform"
    key_column = "name"
    columns = ("name",)
    select_columns = ("name",)
    order_by = "name ASC"
    read_schema = PlatformRead


class AudienceService(ResourceService):
    table = "audience"
    entity = "audience"
    key_column = "name"
    columns = ("name", "description")
    select_columns = ("name", "description")
    order_by = "name ASC"
    read_schema = AudienceRead
