"""
Core infrastructure shared by every resource.

Settings, logging setup, the SQLite database wrapper, the error
taxonomy and the partial mutation query builder.  Nothing in here knows
about individual entities.
"""
