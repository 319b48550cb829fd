"""
SQLite database access.

``Database`` is created once from the settings and shared by all
requests.  It opens a fresh connection for every unit of work
(``transaction``), so no connection is ever shared between requests;
the statements of one unit of work are committed together or rolled
back together.  ``init_db`` creates the schema when the application
starts.

Rows are returned as ``sqlite3.Row`` objects so that columns can be
read by name.  No type detection is enabled: timestamps come back as
the ISO strings they were stored as and are parsed by the response
schemas.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from fastapi import Request

from .config import Settings

logger = logging.getLogger(__name__)

# Boolean columns are stored as 0/1.  Timestamp columns hold ISO 8601
# text; ``created_at``/``updated_at`` default to CURRENT_TIMESTAMP.
SCHEMA = """
CREATE TABLE IF NOT EXISTS participant (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    keycloak_id TEXT NOT NULL UNIQUE,
    first_language TEXT,
    email_language TEXT,
    dob TIMESTAMP,
    gender TEXT,
    email TEXT NOT NULL UNIQUE,
    country TEXT,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS participation_option (
    name TEXT PRIMARY KEY,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS platform (
    name TEXT PRIMARY KEY,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS audience (
    name TEXT PRIMARY KEY,
    description TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS broadcast_url (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    url TEXT NOT NULL,
    platform TEXT NOT NULL,
    language TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY(platform) REFERENCES platform(name) ON UPDATE CASCADE
);

CREATE TABLE IF NOT EXISTS item (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    start_date TIMESTAMP NOT NULL,
    duration INTEGER NOT NULL,
    name TEXT NOT NULL,
    content TEXT,
    original_language TEXT NOT NULL,
    translated INTEGER NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS item_broadcast_url (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    item_id INTEGER NOT NULL,
    broadcast_url_id INTEGER NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY(item_id) REFERENCES item(id) ON DELETE CASCADE,
    FOREIGN KEY(broadcast_url_id) REFERENCES broadcast_url(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS event (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    registration_required INTEGER,
    registration_status TEXT,
    audience TEXT,
    slug TEXT NOT NULL UNIQUE,
    name TEXT NOT NULL,
    logo TEXT,
    content TEXT,
    deleted INTEGER NOT NULL DEFAULT 0,
    starts_on TIMESTAMP NOT NULL,
    ends_on TIMESTAMP NOT NULL,
    date_confirmed INTEGER,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY(audience) REFERENCES audience(name) ON UPDATE CASCADE
);

CREATE TABLE IF NOT EXISTS event_item (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    event_id INTEGER NOT NULL,
    item_id INTEGER NOT NULL,
    deleted INTEGER NOT NULL DEFAULT 0,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY(event_id) REFERENCES event(id) ON DELETE CASCADE,
    FOREIGN KEY(item_id) REFERENCES item(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS event_participation_option (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    event_id INTEGER NOT NULL,
    participation_option TEXT NOT NULL,
    deleted INTEGER NOT NULL DEFAULT 0,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY(event_id) REFERENCES event(id) ON DELETE CASCADE,
    FOREIGN KEY(participation_option) REFERENCES participation_option(name) ON UPDATE CASCADE
);

CREATE TABLE IF NOT EXISTS participation_status (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    participation_option TEXT NOT NULL,
    participant_id INTEGER NOT NULL,
    event_id INTEGER NOT NULL,
    confirmed INTEGER,
    registration_date TIMESTAMP NOT NULL,
    deleted INTEGER NOT NULL DEFAULT 0,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY(participation_option) REFERENCES participation_option(name) ON UPDATE CASCADE,
    FOREIGN KEY(participant_id) REFERENCES participant(id) ON DELETE CASCADE,
    FOREIGN KEY(event_id) REFERENCES event(id) ON DELETE CASCADE
);

CREATE INDEX IF NOT EXISTS idx_broadcast_url_platform ON broadcast_url(platform);
CREATE INDEX IF NOT EXISTS idx_event_item_event_id ON event_item(event_id);
CREATE INDEX IF NOT EXISTS idx_event_participation_option_event_id ON event_participation_option(event_id);
CREATE INDEX IF NOT EXISTS idx_participation_status_event_id ON participation_status(event_id);
"""


class Database:
    """Factory for SQLite connections to a single database file."""

    def __init__(self, path: str) -> None:
        self.path = path

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Resolve ``settings.database_url`` to a file path.

        Absolute paths are used as is; relative paths are resolved
        against the project root (the directory holding the
        ``event_service_api`` package).
        """
        db_url = settings.database_url
        if os.path.isabs(db_url):
            return cls(db_url)
        base_dir = Path(__file__).resolve().parents[3]
        return cls(str((base_dir / db_url).resolve()))

    def get_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        # SQLite leaves foreign key enforcement off unless asked per connection.
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, roll back on error, always close."""
        conn = self.get_connection()
        try:
            yield conn.cursor()
            conn.commit()
        except BaseException:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self) -> None:
        """Create all tables and indices that do not exist yet."""
        conn = self.get_connection()
        try:
            conn.executescript(SCHEMA)
            conn.commit()
        finally:
            conn.close()
        logger.info("Database schema ready at %s", self.path)


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the application's ``Database``."""
    return request.app.state.db
