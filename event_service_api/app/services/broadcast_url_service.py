from event_service_api.app.schemas.broadcast_url import BroadcastURLRead
from event_service_api.app.services.base import ResourceService


class BroadcastURLService(ResourceService):
    table = "broadcast_url"
    entity = "broadcast url"
    columns = ("url", "platform", "language")
    select_columns = ("id",) + columns + ("created_at", "updated_at")
    read_schema = BroadcastURLRead
