"""
API package containing the HTTP routes.

``router`` aggregates the endpoint modules under ``endpoints``.
"""
