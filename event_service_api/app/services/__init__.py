"""
Service layer.

One service class per resource, all built on ``base.ResourceService``.
Services are instantiated per request with the application's
``Database`` and raise the errors defined in ``core.errors``; they know
nothing about HTTP.
"""
