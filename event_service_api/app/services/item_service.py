"""Items and the links between items and broadcast URLs."""

from event_service_api.app.schemas.item import ItemBroadcastURLRead, ItemRead
from event_service_api.app.services.base import ResourceService


class ItemService(ResourceService):
    table = "item"
    entity = "item"
    columns = ("start_date", "duration", "name", "content", "original_language", "translated")
    select_columns = ("id",) + columns + ("created_at", "updated_at")
    read_schema = ItemRead


class ItemBroadcastURLService(ResourceService):
    table = "item_broadcast_url"
    entity = "item broadcast url"
    columns = ("item_id", "broadcast_url_id")
    select_columns = ("id",) + columns + ("created_at", "updated_at")
    read_schema = ItemBroadcastURLRead
