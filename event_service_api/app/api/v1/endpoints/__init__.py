"""
Endpoint modules for API v1.

Each module defines an ``APIRouter`` for one resource group.  The
routers declare their full paths (the single-record group and the
plural collection route live side by side) and are aggregated in
``router.py`` without a prefix.
"""
