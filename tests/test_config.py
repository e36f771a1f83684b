"""Tests for application configuration."""


def test_settings_defaults():
    """Verify default settings load without errors."""
    from bookreviews.config import Settings

    settings = Settings()
    assert settings.app_name == "Book Reviews API"
    assert settings.port == 5000
    assert settings.access_token_ttl == 3600
    assert settings.access_token_algorithm == "HS256"
    assert settings.session_cookie_name == "connect.sid"
    assert settings.debug is False


def test_settings_from_environment(monkeypatch):
    """Environment variables override defaults (case-insensitive)."""
    from bookreviews.config import Settings

    monkeypatch.setenv("ACCESS_TOKEN_SECRET", "from-env")
    monkeypatch.setenv("catalog_read_delay", "0.5")

    settings = Settings()
    assert settings.access_token_secret == "from-env"
    assert settings.catalog_read_delay == 0.5


def test_cookie_max_age_capped_by_token_ttl():
    """The session cookie never outlives the token it carries."""
    from bookreviews.config import Settings

    settings = Settings(session_max_age=86400, access_token_ttl=3600)
    assert settings.session_cookie_max_age == 3600

    settings = Settings(session_max_age=600, access_token_ttl=3600)
    assert settings.session_cookie_max_age == 600


def test_get_settings_is_cached():
    from bookreviews.config import get_settings

    assert get_settings() is get_settings()
