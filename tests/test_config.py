"""Tests for environment-driven settings (config.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from cast_profiles.config import Settings, get_settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.device == "chromecast-ultra"
        assert settings.device_file is None
        assert settings.debug is False

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CAST_PROFILES_DEVICE", "google-tv-4k")
        monkeypatch.setenv("CAST_PROFILES_DEVICE_FILE", "/tmp/tv.json")
        monkeypatch.setenv("CAST_PROFILES_DEBUG", "1")
        settings = Settings(_env_file=None)
        assert settings.device == "google-tv-4k"
        assert settings.device_file == Path("/tmp/tv.json")
        assert settings.debug is True

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CAST_PROFILES_DEVICE=chromecast-gen3\n", encoding="utf-8")
        assert Settings(_env_file=env_file).device == "chromecast-gen3"


class TestGetSettings:
    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("CAST_PROFILES_DEVICE", "chromecast-gen3")
        get_settings.cache_clear()
        second = get_settings()
        assert second is not first
        assert second.device == "chromecast-gen3"
