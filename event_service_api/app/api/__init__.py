"""
API package containing versioned routes.

Each version lives in its own subpackage (``v1``) exposing a top‑level
``router``.  The application mounts it under ``Settings.api_prefix``.
"""
