"""Entry point that serves the Event Service API with Uvicorn.

Connection and listen settings come from the environment (see
``event_service_api.app.core.config``); ``APP_HOST`` and ``APP_PORT``
default to ``127.0.0.1`` and ``8080``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from event_service_api.app.core.config import Settings
from event_service_api.app.main import create_app


async def serve(settings: Settings) -> None:
    """Run the API until the server is stopped."""
    app = create_app(settings)
    logging.getLogger(__name__).info(
        "Starting %s on %s:%s", settings.project_name, settings.app_host, settings.app_port
    )
    config = Config(
        app=app,
        host=settings.app_host,
        port=settings.app_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    settings = Settings.from_env()
    asyncio.run(serve(settings))


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
