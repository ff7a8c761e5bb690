"""
Application package initializer.

The service is split into the usual layers: ``core`` holds settings,
logging, errors and the SQLite store; ``schemas`` holds the pydantic
payload models; ``services`` wraps store calls; ``api`` exposes the
HTTP routes.
"""

from .main import app  # noqa: F401
