"""Tests for settings, database path resolution and logging setup."""

import dataclasses
import logging
import os

import pytest

from event_service_api.app.core.config import Settings
from event_service_api.app.core.db import Database
from event_service_api.app.core.logging_config import setup_logging


def test_defaults_without_environment():
    settings = Settings.from_env({})

    assert settings == Settings()
    assert settings.api_prefix == "/v1"
    assert settings.app_port == 8080
    assert settings.log_file is None


def test_reads_environment():
    settings = Settings.from_env(
        {
            "PROJECT_NAME": "Events",
            "API_PREFIX": "/api/v2/",
            "DEBUG": "yes",
            "LOG_LEVEL": "DEBUG",
            "DATABASE_URL": "/tmp/events.db",
            "APP_HOST": "0.0.0.0",
            "APP_PORT": "9000",
        }
    )

    assert settings.project_name == "Events"
    assert settings.api_prefix == "/api/v2"
    assert settings.debug is True
    assert settings.log_level == "DEBUG"
    assert settings.database_url == "/tmp/events.db"
    assert settings.app_host == "0.0.0.0"
    assert settings.app_port == 9000


def test_invalid_port_is_rejected():
    with pytest.raises(ValueError):
        Settings.from_env({"APP_PORT": "eighty"})


def test_settings_are_immutable():
    settings = Settings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.database_url = "other.db"


def test_absolute_database_path_is_kept(tmp_path):
    path = str(tmp_path / "events.db")
    assert Database.from_settings(Settings(database_url=path)).path == path


def test_relative_database_path_is_resolved_against_project_root():
    db = Database.from_settings(Settings(database_url="events.db"))

    assert os.path.isabs(db.path)
    assert os.path.basename(db.path) == "events.db"
    assert os.path.isdir(os.path.join(os.path.dirname(db.path), "event_service_api"))


def test_setup_logging_reapplies_level_without_adding_handlers():
    root = logging.getLogger()
    previous_level = root.level
    try:
        setup_logging("DEBUG")
        handlers = list(root.handlers)

        setup_logging("warning")

        assert root.level == logging.WARNING
        assert root.handlers == handlers
    finally:
        root.setLevel(previous_level)
