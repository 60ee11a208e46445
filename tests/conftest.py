"""Shared pytest fixtures for settings isolation."""

import pytest

_SETTINGS_ENV_NAMES = (
    "ENVIRONMENT_NAME",
    "APPLICATION_NAME",
    "APPLICATION_VERSION",
    "APPLICATION_HOST",
    "APPLICATION_PORT",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "HTTPS_REDIRECT_ENABLED",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Clear settings variables and run from a directory without `.env`.

    Returns:
        None: Fixture mutates process environment for the test duration only.
    """

    for env_name in _SETTINGS_ENV_NAMES:
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.chdir(tmp_path)
