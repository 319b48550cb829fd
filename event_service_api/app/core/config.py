"""
Application configuration.

``Settings`` is an immutable dataclass read from environment variables
once, at startup, via ``Settings.from_env``.  The resulting value is
handed to ``create_app`` which keeps it on ``app.state``; nothing else
reads the environment.  Every field has a default so the service starts
without any configuration.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    project_name: str = "Event Service API"
    api_version: str = "1.0.0"
    api_prefix: str = "/v1"
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``Database.from_settings``.
    database_url: str = "event_service.db"

    app_host: str = "127.0.0.1"
    app_port: int = 8080

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Raises ``ValueError`` when ``APP_PORT`` is not an integer.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            project_name=env.get("PROJECT_NAME", defaults.project_name),
            api_version=env.get("API_VERSION", defaults.api_version),
            api_prefix=env.get("API_PREFIX", defaults.api_prefix).rstrip("/"),
            debug=_as_bool(env.get("DEBUG", "false")),
            log_level=env.get("LOG_LEVEL", defaults.log_level),
            log_file=env.get("LOG_FILE") or None,
            database_url=env.get("DATABASE_URL", defaults.database_url),
            app_host=env.get("APP_HOST", defaults.app_host),
            app_port=int(env.get("APP_PORT", str(defaults.app_port))),
        )
