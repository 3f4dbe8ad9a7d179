"""
API package containing the HTTP routes.

``router`` aggregates the routers defined in ``endpoints`` and is
mounted by the application under ``/api``.
"""
