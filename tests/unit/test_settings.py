from resource_kit.settings import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("RESOURCE_KIT_DEFAULT_TIMEOUT_MS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.default_timeout_ms == 60000
    assert settings.content_type == "application/json"
    assert settings.verify_ssl is True


def test_env_override(monkeypatch):
    monkeypatch.setenv("RESOURCE_KIT_DEFAULT_TIMEOUT_MS", "1500")
    monkeypatch.setenv("RESOURCE_KIT_VERIFY_SSL", "false")
    settings = Settings(_env_file=None)
    assert settings.default_timeout_ms == 1500
    assert settings.verify_ssl is False


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
