"""
Application package initializer.

The code is split by layer rather than by domain: ``core`` holds the
ambient pieces (settings, logging, database, error taxonomy and the
partial mutation query builder), ``schemas`` the request/response
models, ``services`` the data access for every resource and
``api/v1`` the HTTP routers.  Every resource type (participants,
events, items, broadcast URLs, audiences, platforms, participation
options and statuses) follows the same pattern through these layers.
"""

from .main import app  # noqa: F401
