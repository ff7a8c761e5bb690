"""
Simple configuration management.

The ``Settings`` dataclass reads presentation options (project name,
API version, log level) from environment variables.  The storage file
and the listen address are part of the service contract and are fixed:
data lives in ``products.db`` in the working directory and the
listener binds to ``127.0.0.1:3030``.
"""

import os
from dataclasses import dataclass

DATABASE_PATH = "products.db"
HOST = "127.0.0.1"
PORT = 3030


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Not overridable from the environment.
    database_path: str = DATABASE_PATH
    host: str = HOST
    port: int = PORT


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
