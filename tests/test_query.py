"""Tests for the partial mutation query builder."""

import pytest

from event_service_api.app.core.errors import InvalidValuesError
from event_service_api.app.core.query import (
    UPDATED_AT_ASSIGNMENT,
    build_insert,
    build_update,
    build_where,
)

EVENT_COLUMNS = ("registration_required", "slug", "name", "logo", "deleted", "starts_on")


class TestBuildUpdate:
    def test_only_present_fields_in_fixed_order(self):
        statement = build_update({"name": "Summit", "slug": "summit"}, EVENT_COLUMNS)

        assert statement.assignments == ("slug = ?", "name = ?", UPDATED_AT_ASSIGNMENT)
        assert statement.args == ("summit", "Summit")

    def test_set_clause_joins_assignments(self):
        statement = build_update({"logo": "logo.png"}, EVENT_COLUMNS)

        assert statement.set_clause == "logo = ?, updated_at = CURRENT_TIMESTAMP"

    def test_order_does_not_depend_on_input_order(self):
        first = build_update({"deleted": True, "registration_required": False}, EVENT_COLUMNS)
        second = build_update({"registration_required": False, "deleted": True}, EVENT_COLUMNS)

        assert first == second
        assert first.args == (False, True)

    def test_explicit_none_is_present(self):
        statement = build_update({"logo": None}, EVENT_COLUMNS)

        assert statement.assignments[0] == "logo = ?"
        assert statement.args == (None,)

    def test_no_fields_is_invalid(self):
        with pytest.raises(InvalidValuesError) as excinfo:
            build_update({}, EVENT_COLUMNS)
        assert excinfo.value.message == "invalid values"

    def test_unknown_fields_are_ignored(self):
        with pytest.raises(InvalidValuesError):
            build_update({"id": 3, "created_at": "2025-01-01"}, EVENT_COLUMNS)

        statement = build_update({"id": 3, "name": "x"}, EVENT_COLUMNS)
        assert statement.args == ("x",)

    def test_input_is_not_modified(self):
        values = {"name": "Summit"}
        build_update(values, EVENT_COLUMNS)
        assert values == {"name": "Summit"}


class TestBuildInsert:
    def test_columns_placeholders_and_args_align(self):
        statement = build_insert(
            {"starts_on": "2025-09-01T09:00:00Z", "name": "Summit", "slug": "summit"},
            EVENT_COLUMNS,
        )

        assert statement.columns == ("slug", "name", "starts_on")
        assert statement.placeholders == ("?", "?", "?")
        assert statement.args == ("summit", "Summit", "2025-09-01T09:00:00Z")
        assert statement.column_list == "slug, name, starts_on"
        assert statement.placeholder_list == "?, ?, ?"

    def test_no_updated_at_on_insert(self):
        statement = build_insert({"name": "Summit"}, EVENT_COLUMNS)
        assert "updated_at" not in statement.columns

    def test_no_fields_is_invalid(self):
        with pytest.raises(InvalidValuesError):
            build_insert({}, EVENT_COLUMNS)


class TestBuildWhere:
    def test_no_filters(self):
        assert build_where({}) == ("", ())

    def test_none_filters_are_skipped(self):
        assert build_where({"slug": None}) == ("", ())

    def test_filters_are_bound(self):
        clause, args = build_where({"event_id": 4, "slug": "x'; DROP TABLE event; --"})

        assert clause == " WHERE event_id = ? AND slug = ?"
        assert args == (4, "x'; DROP TABLE event; --")
