"""
Tests for environment-driven settings.
"""

import logging

import pytest

from astroyantra.config import (
    MIN_CANVAS_PX,
    Settings,
    configure_logging,
    load_settings,
)


class TestLoadSettings:
    """Test ASTROYANTRA_* parsing."""

    def test_defaults(self, monkeypatch):
        """Without variables the defaults apply."""
        for name in (
            "ASTROYANTRA_LOG_LEVEL",
            "ASTROYANTRA_CANVAS_WIDTH",
            "ASTROYANTRA_CANVAS_HEIGHT",
            "ASTROYANTRA_NOMINATIM_URL",
            "ASTROYANTRA_USER_AGENT",
            "ASTROYANTRA_HTTP_TIMEOUT",
        ):
            monkeypatch.delenv(name, raising=False)

        assert load_settings() == Settings()

    def test_overrides(self, monkeypatch):
        """Variables override defaults; level is upper-cased."""
        monkeypatch.setenv("ASTROYANTRA_LOG_LEVEL", "debug")
        monkeypatch.setenv("ASTROYANTRA_CANVAS_WIDTH", "800")
        monkeypatch.setenv("ASTROYANTRA_HTTP_TIMEOUT", "2.5")

        settings = load_settings()
        assert settings.log_level == "DEBUG"
        assert settings.canvas_width == 800
        assert settings.http_timeout == 2.5

    def test_bad_number(self, monkeypatch):
        """A malformed number names the variable."""
        monkeypatch.setenv("ASTROYANTRA_CANVAS_HEIGHT", "tall")

        with pytest.raises(ValueError, match="ASTROYANTRA_CANVAS_HEIGHT"):
            load_settings()

    @pytest.mark.parametrize("value", ["0", "-600", "80"])
    def test_canvas_too_small(self, monkeypatch, value):
        """A canvas with no room inside the blueprint padding is rejected."""
        monkeypatch.setenv("ASTROYANTRA_CANVAS_WIDTH", value)

        with pytest.raises(ValueError, match="ASTROYANTRA_CANVAS_WIDTH must be at least"):
            load_settings()

    def test_smallest_canvas_accepted(self, monkeypatch):
        """MIN_CANVAS_PX itself is a valid size."""
        monkeypatch.setenv("ASTROYANTRA_CANVAS_HEIGHT", str(MIN_CANVAS_PX))

        assert load_settings().canvas_height == MIN_CANVAS_PX

    def test_configure_logging(self, monkeypatch):
        """configure_logging hands the level to basicConfig."""
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

        configure_logging(Settings(log_level="WARNING"))
        assert calls["level"] == "WARNING"
