"""
Logging setup for the product store service.

Everything logs through ``logging.getLogger(__name__)``; this module
only attaches a single console handler to the root logger so store,
service and startup messages share one format.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger and set its level.

    Unknown level names fall back to ``INFO``.  When the root logger
    already has handlers (uvicorn, pytest, a second ``create_app``) it
    is left alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
