"""Endpoint modules; each exposes a ``router``."""
