"""Service layer tests against a real SQLite file, without HTTP."""

from contextlib import contextmanager

import pytest

from event_service_api.app.core.errors import InvalidValuesError, NotFoundError, StoreError
from event_service_api.app.schemas.catalog import AudienceCreate, AudienceUpdate, PlatformCreate
from event_service_api.app.schemas.event import EventCreate, EventItemCreate, EventUpdate
from event_service_api.app.schemas.item import ItemCreate
from event_service_api.app.services.catalog_service import AudienceService, PlatformService
from event_service_api.app.services.event_service import EventItemService, EventService
from event_service_api.app.services.item_service import ItemService


class ExplodingDatabase:
    """Stands in for ``Database`` where no statement may run."""

    @contextmanager
    def transaction(self):
        raise AssertionError("no statement should be executed")
        yield


def _event(slug="summit", **extra):
    return EventCreate(
        slug=slug,
        name="Summit",
        starts_on="2025-09-01T09:00:00Z",
        ends_on="2025-09-03T18:00:00Z",
        **extra,
    )


def test_create_returns_stored_row_with_absent_optionals(db):
    event = EventService(db).create(_event())

    assert event.id == 1
    assert event.slug == "summit"
    assert event.logo is None
    assert event.registration_status is None
    assert event.deleted is False
    assert event.created_at is not None


def test_update_leaves_omitted_fields_alone(db):
    service = EventService(db)
    created = service.create(_event(content="Programme", logo="logo.png"))

    updated = service.update(created.id, EventUpdate(name="Winter Summit"))

    assert updated.name == "Winter Summit"
    assert updated.content == "Programme"
    assert updated.logo == "logo.png"
    assert updated.starts_on == created.starts_on


def test_update_with_explicit_null_clears_optional_field(db):
    service = EventService(db)
    created = service.create(_event(logo="logo.png"))

    updated = service.update(created.id, EventUpdate(logo=None))

    assert updated.logo is None


def test_empty_update_runs_no_statement():
    with pytest.raises(InvalidValuesError):
        EventService(ExplodingDatabase()).update(1, EventUpdate())


def test_update_unknown_key_is_not_found(db):
    with pytest.raises(NotFoundError):
        EventService(db).update(42, EventUpdate(name="Nope"))


def test_get_unknown_key_is_not_found(db):
    with pytest.raises(NotFoundError):
        EventService(db).get(42)


def test_delete_unknown_key_is_not_found(db):
    with pytest.raises(NotFoundError):
        ItemService(db).delete(42)


def test_unique_violation_is_store_error(db):
    service = EventService(db)
    service.create(_event())

    with pytest.raises(StoreError) as excinfo:
        service.create(_event())
    assert excinfo.value.message.startswith("problem creating event:")
    assert excinfo.value.status_code == 500


def test_list_pages_and_filters(db):
    service = EventService(db)
    for slug in ("a", "b", "c"):
        service.create(_event(slug=slug))

    assert [e.slug for e in service.list_events(skip=1, limit=1)] == ["b"]
    assert [e.slug for e in service.list_events(slug="c")] == ["c"]
    assert service.list_events(slug="missing") == []


def test_list_on_empty_table(db):
    assert PlatformService(db).list() == []


def test_rename_moves_name_keyed_record(db):
    service = AudienceService(db)
    service.create(AudienceCreate(name="public", description="Everyone"))

    renamed = service.update("public", AudienceUpdate(name="everyone"))

    assert renamed.name == "everyone"
    assert renamed.description == "Everyone"
    with pytest.raises(NotFoundError):
        service.get("public")


def test_soft_delete_marks_event_and_dependents(db):
    events = EventService(db)
    event = events.create(_event())
    other = events.create(_event(slug="other"))
    item = ItemService(db).create(
        ItemCreate(
            start_date="2025-09-01T10:00:00Z",
            duration=30,
            name="Keynote",
            original_language="en",
            translated=False,
        )
    )
    links = EventItemService(db)
    link = links.create(EventItemCreate(event_id=event.id, item_id=item.id))
    other_link = links.create(EventItemCreate(event_id=other.id, item_id=item.id))

    events.delete(event.id)

    assert events.get(event.id).deleted is True
    assert links.get(link.id).deleted is True
    assert events.get(other.id).deleted is False
    assert links.get(other_link.id).deleted is False


def test_soft_delete_unknown_event_is_not_found(db):
    with pytest.raises(NotFoundError):
        EventService(db).delete(99)


def test_hard_delete_removes_event(db):
    events = EventService(db)
    event = events.create(_event())

    events.hard_delete(event.id)

    with pytest.raises(NotFoundError):
        events.get(event.id)


def test_platform_create_accepts_capitalised_name(db):
    platform = PlatformService(db).create(PlatformCreate.model_validate({"Name": "youtube"}))
    assert platform.name == "youtube"
