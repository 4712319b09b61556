"""
API package containing the HTTP routes.

``router`` aggregates the entity routers from ``endpoints`` and
``deps`` builds the services each request handler depends on.
"""
