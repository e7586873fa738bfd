"""Tests for config/settings.py and config/logging_config.py."""

import json
import logging

import pytest
from loguru import logger
from pydantic import ValidationError

from config.logging_config import configure_logging, configure_logging_from_settings
from config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TG_BOT_TOKEN", raising=False)
        settings = Settings(_env_file=None)
        assert settings.api_url == "https://api.telegram.org"
        assert settings.bot_token == ""
        assert settings.log_level == "INFO"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("TG_BOT_TOKEN", "123:abc")
        monkeypatch.setenv("TG_LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.bot_token == "123:abc"
        assert settings.log_level == "DEBUG"

    def test_from_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("TG_BOT_TOKEN", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("TG_BOT_TOKEN=from-file\nTG_API_URL=http://localhost:8081/\n")
        settings = Settings(_env_file=env_file)
        assert settings.bot_token == "from-file"
        assert settings.api_url == "http://localhost:8081"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="loud")

    def test_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for the JSON-lines log sinks."""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        yield
        logger.remove()

    def test_writes_json_lines_with_context(self, tmp_path):
        log_file = tmp_path / "tgtypes.log"
        configure_logging(str(log_file), force=True)

        with logger.contextualize(chat_id=-1001160242915, method="sendSticker"):
            logger.info("sent")
        logger.complete()

        [line] = log_file.read_text(encoding="utf-8").splitlines()
        record = json.loads(line)
        assert record["message"] == "sent"
        assert record["level"] == "INFO"
        assert record["chat_id"] == -1001160242915
        assert record["method"] == "sendSticker"
        assert "message_id" not in record

    def test_errors_go_to_error_log(self, tmp_path):
        configure_logging(str(tmp_path / "tgtypes.log"), force=True)
        logger.info("fine")
        logger.error("broken")

        lines = (tmp_path / "error.log").read_text(encoding="utf-8").splitlines()
        assert [json.loads(line)["message"] for line in lines] == ["broken"]

    def test_level_filters_main_log(self, tmp_path):
        log_file = tmp_path / "tgtypes.log"
        configure_logging(str(log_file), level="WARNING", force=True)
        logger.info("hidden")
        logger.warning("shown")

        messages = [json.loads(line)["message"] for line in log_file.read_text().splitlines()]
        assert messages == ["shown"]

    def test_stdlib_logging_intercepted(self, tmp_path):
        log_file = tmp_path / "tgtypes.log"
        configure_logging(str(log_file), force=True)
        logging.getLogger("some.library").warning("from stdlib")

        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert record["message"] == "from stdlib"
        assert record["level"] == "WARNING"

    def test_idempotent_without_force(self, tmp_path):
        first = tmp_path / "first.log"
        configure_logging(str(first), force=True)
        configure_logging(str(tmp_path / "second.log"))
        logger.info("where")

        assert first.read_text(encoding="utf-8")
        assert not (tmp_path / "second.log").exists()

    def test_from_settings(self, tmp_path):
        log_file = tmp_path / "from-settings.log"
        settings = Settings(_env_file=None, log_file=str(log_file), log_level="error")
        configure_logging_from_settings(settings, force=True)
        logger.warning("dropped")
        logger.error("kept")

        messages = [json.loads(line)["message"] for line in log_file.read_text().splitlines()]
        assert messages == ["kept"]
