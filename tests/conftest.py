"""Global pytest configuration and fixtures for all tests."""

import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def set_test_env_vars():
    """
    Set environment variables for testing.

    Runs once before any test and restores the original environment
    afterwards.
    """
    original_env = {}

    test_env_vars = {
        "ENABLE_DOCS": "false",
        "DEBUG": "false",
        "LOG_LEVEL": "WARNING",
    }

    for key, value in test_env_vars.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value

    yield

    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value
