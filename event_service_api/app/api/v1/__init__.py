"""
Version 1 of the API.

Resource groups follow the same shape: ``POST /<resource>/`` creates,
``GET|PATCH|DELETE /<resource>/{key}`` address one record and a plural
sibling ``GET /<resources>`` pages through the collection.
"""
