"""
Pydantic schema definitions for API payloads.

Schemas are separated from the SQLite table so the API representation
never exposes the internal row id.
"""
