"""Tests for settings defaults and logging setup."""

import importlib
import logging

from product_store_api.app.core import config
from product_store_api.app.core.logging_config import setup_logging


class TestSettings:
    def test_fixed_service_address_and_file(self):
        settings = config.Settings()
        assert settings.database_path == "products.db"
        assert settings.host == "127.0.0.1"
        assert settings.port == 3030

    def test_environment_cannot_move_store_or_listener(self, monkeypatch):
        monkeypatch.setenv("DATABASE_PATH", "elsewhere.db")
        monkeypatch.setenv("HOST", "0.0.0.0")
        monkeypatch.setenv("PORT", "8081")
        try:
            settings = importlib.reload(config).Settings()
            assert settings.database_path == "products.db"
            assert settings.host == "127.0.0.1"
            assert settings.port == 3030
        finally:
            monkeypatch.undo()
            importlib.reload(config)

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        try:
            assert importlib.reload(config).Settings().log_level == "DEBUG"
        finally:
            monkeypatch.undo()
            importlib.reload(config)


class TestSetupLogging:
    def test_configures_bare_root_logger(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", logging.WARNING)

        setup_logging("debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", logging.WARNING)

        setup_logging("chatty")

        assert root.level == logging.INFO

    def test_does_not_add_duplicate_handlers(self):
        root = logging.getLogger()
        setup_logging("DEBUG")
        count = len(root.handlers)
        setup_logging("DEBUG")
        assert len(root.handlers) == count
