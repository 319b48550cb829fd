"""
Pydantic schema definitions for API payloads.

Each resource defines a ``<Name>Create`` model (required fields enforced
on POST), a ``<Name>Update`` model (every field optional, presence
tracked for partial updates) and a ``<Name>Read`` model for responses.
"""
