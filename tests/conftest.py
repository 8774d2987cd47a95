"""Shared fixtures isolating tests from host environment configuration."""

import pytest

_SETTINGS_ENVIRONMENT_VARIABLES = (
    "ENVIRONMENT_NAME",
    "APPLICATION_HOST",
    "APPLICATION_PORT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Clear settings variables and run each test outside any `.env` file.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Per-test temporary directory.

    Returns:
        None: Environment is isolated as a side effect.
    """

    for variable_name in _SETTINGS_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(variable_name, raising=False)
    monkeypatch.chdir(tmp_path)
