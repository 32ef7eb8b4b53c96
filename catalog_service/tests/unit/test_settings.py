from catalog_service.app.core.setting import CatalogSettings, get_settings


class TestCatalogSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SEED_SAMPLE_DATA", raising=False)
        settings = CatalogSettings(_env_file=None)

        assert settings.SEED_SAMPLE_DATA is True
        assert settings.ENABLE_FILE_LOGGING is False
        assert "GET" in settings.CORS_METHODS

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("seed_sample_data", "false")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = CatalogSettings(_env_file=None)

        assert settings.SEED_SAMPLE_DATA is False
        assert settings.LOG_LEVEL == "DEBUG"

    def test_get_settings_is_singleton(self):
        assert get_settings() is get_settings()
