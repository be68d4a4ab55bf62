"""Tests for environment-driven configuration."""

import logging
from pathlib import Path

from contactbook import AppConfig
from contactbook.config import LOG_FORMAT


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig.from_env({})
        assert config.log_level == "WARNING"
        assert config.log_file is None
        assert config.header_width == 50
        assert config.clear_screen is True

    def test_reads_prefixed_variables(self):
        config = AppConfig.from_env(
            {
                "CONTACTBOOK_LOG_LEVEL": "debug",
                "CONTACTBOOK_LOG_FILE": "contactbook.log",
                "CONTACTBOOK_HEADER_WIDTH": "60",
                "CONTACTBOOK_CLEAR_SCREEN": "false",
            }
        )
        assert config.log_level == "DEBUG"
        assert config.log_file == Path("contactbook.log")
        assert config.header_width == 60
        assert config.clear_screen is False

    def test_invalid_integer_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = AppConfig.from_env({"CONTACTBOOK_HEADER_WIDTH": "wide"})
        assert config.header_width == 50
        assert "CONTACTBOOK_HEADER_WIDTH" in caplog.text

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("CONTACTBOOK_LOG_LEVEL", "INFO")
        assert AppConfig.from_env().log_level == "INFO"

    def test_configure_logging(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        AppConfig(log_level="info", log_file="out.log").configure_logging()

        assert calls == [{"level": logging.INFO, "format": LOG_FORMAT, "filename": "out.log"}]

    def test_unknown_level_uses_warning(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        AppConfig(log_level="chatty").configure_logging()

        assert calls[0]["level"] == logging.WARNING
