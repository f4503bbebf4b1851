"""Unit tests for configuration utilities."""

import pytest

from subrip.utils.config import get_settings


class TestSettings:
    """Test cases for Settings class."""

    @pytest.fixture
    def no_env_file(self, tmp_path, monkeypatch):
        """Run test in a directory without .env file."""
        monkeypatch.chdir(tmp_path)
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_settings_defaults(self, monkeypatch, no_env_file):
        """Should use defaults when nothing is configured."""
        for name in ("ENCODING", "STRIP_HTML", "LOG_LEVEL", "LOG_JSON"):
            monkeypatch.delenv(f"SUBRIP_{name}", raising=False)

        settings = get_settings()

        assert settings.encoding == "utf-8"
        assert settings.strip_html is False
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_settings_loads_from_prefixed_env(self, monkeypatch):
        """Should load SUBRIP_* variables from environment."""
        monkeypatch.setenv("SUBRIP_ENCODING", "cp1252")
        monkeypatch.setenv("SUBRIP_STRIP_HTML", "true")
        monkeypatch.setenv("SUBRIP_MAX_CONTENT_CHARS", "100")

        settings = get_settings()

        assert settings.encoding == "cp1252"
        assert settings.strip_html is True
        assert settings.max_content_chars == 100

    def test_settings_loads_from_env_file(self, monkeypatch, no_env_file, tmp_path):
        """Should read values from a .env file in the working directory."""
        monkeypatch.delenv("SUBRIP_LOG_LEVEL", raising=False)
        (tmp_path / ".env").write_text("SUBRIP_LOG_LEVEL=DEBUG\n")

        assert get_settings().log_level == "DEBUG"

    def test_get_settings_is_cached(self, monkeypatch):
        """Should return cached settings on subsequent calls."""
        monkeypatch.setenv("SUBRIP_ENCODING", "latin-1")

        settings1 = get_settings()
        monkeypatch.setenv("SUBRIP_ENCODING", "utf-16")
        settings2 = get_settings()

        # Same instance due to caching
        assert settings1 is settings2
        assert settings1.encoding == "latin-1"

    def test_cache_clear_reloads_settings(self, monkeypatch):
        """Should reload settings after cache clear."""
        monkeypatch.setenv("SUBRIP_ENCODING", "latin-1")
        settings1 = get_settings()

        get_settings.cache_clear()
        monkeypatch.setenv("SUBRIP_ENCODING", "utf-16")
        settings2 = get_settings()

        assert settings1.encoding == "latin-1"
        assert settings2.encoding == "utf-16"
        assert settings1 is not settings2
