"""
Shared data access for every resource.

``ResourceService`` implements get/list/create/update/delete once.  An
entity service only declares its table, key column, the fixed order of
its writable columns, the columns it returns and the schema used to
read rows back.  Writes go through the partial mutation query builder in
``core.query``: only the fields present in the request are written.

Every statement binds its values as parameters.  Table and column names
come from the class attributes below and never from the request.
An integer outside SQLite's signed 64-bit range cannot be bound at all;
such a request is rejected as invalid values.
"""

import logging
import sqlite3
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel

from event_service_api.app.core.db import Database
from event_service_api.app.core.errors import InvalidValuesError, NotFoundError, StoreError
from event_service_api.app.core.query import build_insert, build_update, build_where


class ResourceService:
    """Generic CRUD over one table.

    Subclasses must set ``table``, ``entity``, ``columns``,
    ``select_columns`` and ``read_schema``.
    """

    table: ClassVar[str]
    # Human readable entity name used in log lines and error messages.
    entity: ClassVar[str]
    key_column: ClassVar[str] = "id"
    # Writable columns, in the order they appear in generated statements.
    columns: ClassVar[Tuple[str, ...]]
    select_columns: ClassVar[Tuple[str, ...]]
    order_by: ClassVar[str] = "id ASC"
    read_schema: ClassVar[Type[BaseModel]]

    def __init__(self, db: Database) -> None:
        self.db = db
        self.logger = logging.getLogger(type(self).__module__)

    # -- helpers ---------------------------------------------------------

    @property
    def _select(self) -> str:
        return f"SELECT {', '.join(self.select_columns)} FROM {self.table}"

    def _to_read(self, row: sqlite3.Row) -> BaseModel:
        return self.read_schema.model_validate(dict(row))

    def _store_error(self, verb: str, exc: sqlite3.Error) -> StoreError:
        self.logger.exception("Problem %s %s", verb, self.entity)
        return StoreError(f"problem {verb} {self.entity}: {exc}")

    @staticmethod
    def present_values(data: BaseModel) -> Dict[str, Any]:
        """Fields the client actually sent, as JSON-compatible values.

        Datetimes become ISO strings and UUIDs plain strings so that
        SQLite stores them as text.
        """
        return data.model_dump(mode="json", exclude_unset=True)

    def _fetch_one(self, cursor: sqlite3.Cursor, column: str, value: Any) -> Optional[sqlite3.Row]:
        return cursor.execute(f"{self._select} WHERE {column} = ?", (value,)).fetchone()

    # -- operations ------------------------------------------------------

    def get(self, key: Any) -> BaseModel:
        """Return the record whose key column equals ``key``."""
        return self.get_by(self.key_column, key)

    def get_by(self, column: str, value: Any) -> BaseModel:
        try:
            with self.db.transaction() as cursor:
                row = self._fetch_one(cursor, column, value)
        except sqlite3.Error as exc:
            raise self._store_error("fetching", exc) from exc
        except OverflowError as exc:
            raise InvalidValuesError() from exc
        if row is None:
            raise NotFoundError()
        return self._to_read(row)

    def list(
        self,
        skip: int = 0,
        limit: int = 10,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> List[BaseModel]:
        """Return a page of records, optionally narrowed by equality filters."""
        where, where_args = build_where(filters or {})
        query = f"{self._select}{where} ORDER BY {self.order_by} LIMIT ? OFFSET ?"
        try:
            with self.db.transaction() as cursor:
                rows = cursor.execute(query, where_args + (limit, skip)).fetchall()
        except sqlite3.Error as exc:
            raise self._store_error("listing", exc) from exc
        except OverflowError as exc:
            raise InvalidValuesError() from exc
        return [self._to_read(row) for row in rows]

    def create(self, data: BaseModel) -> BaseModel:
        """Insert the present fields of ``data`` and return the stored row."""
        statement = build_insert(self.present_values(data), self.columns)
        try:
            with self.db.transaction() as cursor:
                cursor.execute(
                    f"INSERT INTO {self.table} ({statement.column_list}) "
                    f"VALUES ({statement.placeholder_list})",
                    statement.args,
                )
                row = self._fetch_one(cursor, "rowid", cursor.lastrowid)
        except sqlite3.Error as exc:
            raise self._store_error("creating", exc) from exc
        except OverflowError as exc:
            raise InvalidValuesError() from exc
        record = self._to_read(row)
        self.logger.info("Created %s %s", self.entity, getattr(record, self.key_column))
        return record

    def update(self, key: Any, data: BaseModel) -> BaseModel:
        """Write the present fields of ``data`` to the record at ``key``.

        Raises ``InvalidValuesError`` when ``data`` carries no field (no
        statement is executed) and ``NotFoundError`` when no row has the
        key.
        """
        values = self.present_values(data)
        statement = build_update(values, self.columns)
        # A rename moves the record to a new key.
        new_key = values.get(self.key_column, key)
        try:
            with self.db.transaction() as cursor:
                cursor.execute(
                    f"UPDATE {self.table} SET {statement.set_clause} WHERE {self.key_column} = ?",
                    statement.args + (key,),
                )
                if cursor.rowcount == 0:
                    raise NotFoundError()
                row = self._fetch_one(cursor, self.key_column, new_key)
        except sqlite3.Error as exc:
            raise self._store_error("updating", exc) from exc
        except OverflowError as exc:
            raise InvalidValuesError() from exc
        self.logger.info("Updated %s %s", self.entity, key)
        return self._to_read(row)

    def delete(self, key: Any) -> None:
        """Remove the record at ``key``; raises ``NotFoundError`` if absent."""
        self._delete_where(self.key_column, key)

    def _delete_where(self, column: str, value: Any) -> None:
        try:
            with self.db.transaction() as cursor:
                cursor.execute(f"DELETE FROM {self.table} WHERE {column} = ?", (value,))
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            raise self._store_error("deleting", exc) from exc
        except OverflowError as exc:
            raise InvalidValuesError() from exc
        if not affected:
            raise NotFoundError()
        self.logger.info("Deleted %s %s", self.entity, value)
