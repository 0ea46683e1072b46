"""Tests for application settings."""

from campus.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.app_name == "Campus Administration"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.file_logging is False
        assert settings.role_table_path is None

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("CAMPUS_DEBUG", "true")
        monkeypatch.setenv("CAMPUS_ROLE_TABLE_PATH", "/etc/campus/roles.yaml")

        settings = Settings()
        assert settings.debug is True
        assert settings.role_table_path == "/etc/campus/roles.yaml"

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
