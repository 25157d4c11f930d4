"""Tests for main application entry point."""

from unittest.mock import patch

from fastapi import FastAPI


def test_main_app_exists():
    """Test that main module exports app."""
    from mockapi.main import app

    assert isinstance(app, FastAPI)
    paths = {route.path for route in app.routes}
    assert {"/health", "/users/{user_id}", "/posts/{post_id}"} <= paths


def test_run_starts_uvicorn_with_settings():
    from mockapi.config import get_settings
    from mockapi.main import run

    with patch("mockapi.main.uvicorn.run") as mock_run:
        run()

    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert args == ("mockapi.main:app",)
    assert kwargs["host"] == get_settings().host
    assert kwargs["port"] == get_settings().port
