"""Tests for centralized configuration."""

from pathlib import Path

import pytest

from config import ExpansionConfig, Settings, paths


class TestConfig:
    """Tests for centralized configuration."""

    def test_default_settings(self):
        """Test that default settings are loaded correctly."""
        settings = Settings()

        assert settings.expansion.origin == "origin"
        assert settings.expansion.default_count == 1
        assert settings.logging.level == "WARNING"

    def test_settings_from_env(self, monkeypatch):
        """Test that settings can be loaded from environment variables."""
        monkeypatch.setenv("STORYLOOM_ORIGIN", "start")
        monkeypatch.setenv("STORYLOOM_DEFAULT_COUNT", "7")
        monkeypatch.setenv("STORYLOOM_LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.expansion.origin == "start"
        assert settings.expansion.default_count == 7
        assert settings.logging.level == "DEBUG"

    def test_settings_from_empty_env(self, monkeypatch):
        """Test that missing variables fall back to defaults."""
        for name in ("STORYLOOM_ORIGIN", "STORYLOOM_DEFAULT_COUNT", "STORYLOOM_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        assert Settings.from_env() == Settings()

    def test_immutable_config(self):
        """Test that config dataclasses are immutable."""
        config = ExpansionConfig()
        with pytest.raises(Exception):  # FrozenInstanceError
            config.origin = "changed"

    def test_path_config(self):
        """Test that path configuration provides correct paths."""
        assert isinstance(paths.root_dir, Path)
        assert paths.grammars_dir == paths.root_dir / "grammars"
        assert (paths.grammars_dir / "pets.json").exists()
