"""
Top‑level package for the Event Service API.

The package itself exports nothing; the FastAPI application and all of
its layers (configuration, database access, services and versioned
routers) live under ``event_service_api.app``.  Keeping a real package
marker here lets the tests and ``run.py`` import modules with fully
qualified names such as ``event_service_api.app.main``.
"""

__all__ = []
