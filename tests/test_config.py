"""
Tests for settings and logging configuration.
"""

import structlog

from src.barcode.renderer import RenderGeometry
from src.config import Settings, configure_logging


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        monkeypatch.delenv("STRICT_CHECKSUM", raising=False)
        settings = Settings()

        assert settings.environment == "dev"
        assert settings.strict_checksum is False
        assert not settings.is_production
        assert settings.render_geometry() == RenderGeometry.display()

    def test_environment_overrides(self, monkeypatch, tmp_path):
        """Test values are read from environment variables."""
        monkeypatch.setenv("STRICT_CHECKSUM", "true")
        monkeypatch.setenv("STORE_PATH", str(tmp_path / "b.json"))
        monkeypatch.setenv("RENDER_SHOW_CAPTION", "1")
        monkeypatch.setenv("RENDER_BAR_HEIGHT", "120")

        settings = Settings()
        geometry = settings.render_geometry()

        assert settings.strict_checksum is True
        assert settings.store_path == tmp_path / "b.json"
        assert geometry.show_caption
        assert geometry.bar_height == 120


class TestLogging:
    """Tests for configure_logging."""

    def test_json_logging(self, capsys):
        """Test JSON rendering writes key/value events to stderr."""
        configure_logging(Settings(log_format="json", log_level="DEBUG"))
        structlog.get_logger("test").info("hello", code="4006381333931")

        err = capsys.readouterr().err
        assert '"event": "hello"' in err
        assert '"code": "4006381333931"' in err

    def test_level_filtering(self, capsys):
        """Test events below the configured level are dropped."""
        configure_logging(Settings(log_format="text", log_level="WARNING"))
        structlog.get_logger("test").info("quiet")

        assert "quiet" not in capsys.readouterr().err
