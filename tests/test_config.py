"""Test settings loading and logging setup."""
import sys
from loguru import logger
from api.config import Settings
from api.logs import configure_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("RADAR_PORT", raising=False)
    monkeypatch.delenv("RADAR_STRICT_PROTOCOLS", raising=False)
    s = Settings(_env_file=None)
    assert s.port == 3000
    assert s.strict_protocols is False
    assert s.cors_origins == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("RADAR_PORT", "8080")
    monkeypatch.setenv("RADAR_STRICT_PROTOCOLS", "true")
    monkeypatch.setenv("RADAR_LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.port == 8080
    assert s.strict_protocols is True
    assert s.log_level == "debug"


def test_configure_logging_level(capsys):
    """Only messages at or above the configured level reach stderr."""
    configure_logging("warning")
    try:
        logger.info("below threshold")
        logger.warning("radar offline")
        err = capsys.readouterr().err
    finally:
        logger.remove()
        logger.add(sys.__stderr__)

    assert "radar offline" in err
    assert "below threshold" not in err
