"""Tests for Settings."""

from unittest.mock import patch

from mockapi.config import Settings, get_settings


def test_defaults():
    with patch.dict("os.environ", {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.host == "0.0.0.0"
    assert settings.port == 8000
    assert settings.enable_docs is False


def test_port_from_environment():
    with patch.dict("os.environ", {"PORT": "9090"}):
        settings = Settings(_env_file=None)

    assert settings.port == 9090


def test_get_cors_allowed_methods_default():
    """Test CORS methods cover every method the API routes."""
    with patch.dict("os.environ", {}, clear=True):
        methods = Settings(_env_file=None).get_cors_allowed_methods()

    assert {"GET", "POST", "PUT", "DELETE"} <= set(methods)


def test_get_cors_allowed_methods_wildcard():
    """Test CORS methods returns wildcard list when set to '*'."""
    with patch.dict("os.environ", {"CORS_ALLOWED_METHODS": "*"}):
        settings = Settings(_env_file=None)
        assert settings.get_cors_allowed_methods() == ["*"]


def test_get_cors_allowed_headers_wildcard():
    with patch.dict("os.environ", {"CORS_ALLOWED_HEADERS": "*"}):
        settings = Settings(_env_file=None)
        assert settings.get_cors_allowed_headers() == ["*"]


def test_get_allowed_origins_strips_spaces():
    with patch.dict("os.environ", {"ALLOWED_ORIGINS": "http://a.test, http://b.test"}):
        settings = Settings(_env_file=None)
        assert settings.get_allowed_origins() == ["http://a.test", "http://b.test"]


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
