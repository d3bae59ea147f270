"""Tests for configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from findfont.config import FindFontSettings, LoggingConfig, SearchConfig, get_default_settings
from findfont.config import settings as settings_module
from findfont.core import DEFAULT_SUFFIXES


class TestSearchConfig:
    """Tests for SearchConfig."""

    def test_defaults(self):
        """Defaults search the standard suffixes and the current directory."""
        config = SearchConfig()
        assert config.suffixes == list(DEFAULT_SUFFIXES)
        assert config.extra_directories == []
        assert config.include_current_directory is True
        assert config.platform is None

    def test_suffix_normalization(self):
        """Suffixes are lower-cased, dotted and deduplicated."""
        config = SearchConfig(suffixes=["TTF", ".Otf", " ", "ttf", "woff2"])
        assert config.suffixes == [".ttf", ".otf", ".woff2"]

    def test_invalid_suffixes_type(self):
        """A non-list suffix value is rejected."""
        with pytest.raises(ValidationError):
            SearchConfig(suffixes=42)


class TestFindFontSettings:
    """Tests for FindFontSettings."""

    def test_default_settings(self):
        """get_default_settings returns default models."""
        settings = get_default_settings()
        assert isinstance(settings.search, SearchConfig)
        assert isinstance(settings.logging, LoggingConfig)
        assert settings.logging.log_level == "WARNING"

    def test_search_directories_appends_extra(self, monkeypatch):
        """Extra directories follow the platform directories, without duplicates."""
        calls = []

        def fake_font_directories(system=None, include_current=True):
            calls.append((system, include_current))
            return ["/usr/share/fonts", "/opt/fonts"]

        monkeypatch.setattr(settings_module, "font_directories", fake_font_directories)
        settings = FindFontSettings(
            search=SearchConfig(
                extra_directories=[Path("/srv/fonts"), Path("/opt/fonts")],
                include_current_directory=False,
                platform="Linux",
            )
        )

        assert settings.search_directories() == ["/usr/share/fonts", "/opt/fonts", "/srv/fonts"]
        assert calls == [("Linux", False)]
