"""
SQLite persistence for the product collection.

The store owns a single connection to one database file holding the
``product`` table.  All access goes through one ``asyncio.Lock`` so
that concurrent requests are serialised: reads wait behind writes and
vice versa.  The collection supports exactly two operations, read-all
and replace-all; there is no per-item identity exposed to callers.

``get_store`` is the FastAPI dependency that hands the application's
store to route handlers.
"""

import asyncio
import logging
import os
import sqlite3
from pathlib import Path
from typing import Iterable, List, Optional

from fastapi import Request
from pydantic import ValidationError

from .exceptions import StorageInitError, StorageQueryError, StorageWriteError
from product_store_api.app.schemas.product import Product


logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS product (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    price REAL NOT NULL,
    quantity TEXT NOT NULL
)
"""


def resolve_database_path(path: str) -> str:
    """Resolve ``path`` against the current working directory."""
    if os.path.isabs(path):
        return path
    return str((Path.cwd() / path).resolve())


class ProductStore:
    """Durable storage of the product collection.

    Call :meth:`initialize` once before use.  It is idempotent, so
    reopening an existing file keeps its rows untouched.
    """

    def __init__(self, path: str) -> None:
        self.path = resolve_database_path(path)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = asyncio.Lock()

    def initialize(self) -> None:
        """Open (creating if needed) the database file and ensure the schema."""
        if self._conn is not None:
            return
        try:
            # Connecting creates the file when it does not exist yet.
            conn = sqlite3.connect(self.path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise StorageInitError(f"Cannot open database {self.path}") from exc
        try:
            with conn:
                conn.execute(SCHEMA)
        except sqlite3.Error as exc:
            conn.close()
            raise StorageInitError(f"Cannot create product table in {self.path}") from exc
        self._conn = conn
        logger.info("Product store ready at %s", self.path)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    async def list_all(self) -> List[Product]:
        """Return every stored product in engine order."""
        async with self._lock:
            if self._conn is None:
                raise StorageQueryError("Product store is not initialized")
            try:
                rows = self._conn.execute(
                    "SELECT name, price, quantity FROM product"
                ).fetchall()
                return [
                    Product(name=name, price=price, quantity=quantity)
                    for name, price, quantity in rows
                ]
            except sqlite3.Error as exc:
                raise StorageQueryError("Failed to read products") from exc
            except ValidationError as exc:
                # Rows written outside the service may not fit the schema.
                raise StorageQueryError("Malformed product row in store") from exc

    async def replace_all(self, items: Iterable[Product]) -> None:
        """Replace the whole collection with ``items`` in one transaction.

        Fields are stored verbatim, without deduplication.  On failure
        the transaction is rolled back and the previous content stays.
        """
        rows = [(item.name, item.price, item.quantity) for item in items]
        async with self._lock:
            if self._conn is None:
                raise StorageWriteError("Product store is not initialized")
            try:
                with self._conn:
                    self._conn.execute("DELETE FROM product")
                    self._conn.executemany(
                        "INSERT INTO product (name, price, quantity) VALUES (?, ?, ?)",
                        rows,
                    )
            except sqlite3.Error as exc:
                raise StorageWriteError("Failed to replace products") from exc


def get_store(request: Request) -> ProductStore:
    """Dependency returning the store attached to the running application."""
    return request.app.state.store
