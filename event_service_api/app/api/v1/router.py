"""
Top‑level router for version 1 of the API.

Every endpoint module declares its full paths (the single-record group
such as ``/event/{id}`` next to its plural collection ``/events``), so
the routers are included here without a prefix.  The whole router is
mounted under ``Settings.api_prefix`` by ``create_app``.
"""

from fastapi import APIRouter

from .endpoints import (
    audiences,
    broadcast_urls,
    events,
    items,
    participants,
    participation_options,
    participation_statuses,
    platforms,
)

router = APIRouter()

router.include_router(participants.router, tags=["participants"])
router.include_router(participation_options.router, tags=["participation options"])
router.include_router(platforms.router, tags=["platforms"])
router.include_router(audiences.router, tags=["audiences"])
router.include_router(broadcast_urls.router, tags=["broadcast urls"])
router.include_router(items.router, tags=["items"])
router.include_router(events.router, tags=["events"])
router.include_router(participation_statuses.router, tags=["participation statuses"])
