"""Tests for runtime entrypoint startup behavior."""

import pytest

import app.main as main_module


def test_main_runs_uvicorn_with_configured_host_and_port(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Start uvicorn on settings host and port and log the startup line.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        capsys: Pytest stdout capture fixture.
    """

    captured_calls: list[dict[str, object]] = []

    def _fake_run(application, host: str, port: int) -> None:
        captured_calls.append({"application": application, "host": host, "port": port})

    monkeypatch.setenv("APPLICATION_HOST", "127.0.0.1")
    monkeypatch.setenv("APPLICATION_PORT", "3100")
    monkeypatch.setenv("ENVIRONMENT_NAME", "staging")
    monkeypatch.setattr(main_module.uvicorn, "run", _fake_run)

    main_module.main()

    assert len(captured_calls) == 1
    assert captured_calls[0]["host"] == "127.0.0.1"
    assert captured_calls[0]["port"] == 3100
    output = capsys.readouterr().out
    assert "Server running on http://127.0.0.1:3100 (environment: staging)" in output


def test_main_exits_with_status_one_on_invalid_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Exit with status 1 before starting the server when settings are invalid.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
    """

    def _fail_run(*_args, **_kwargs) -> None:
        raise AssertionError("uvicorn.run must not be called")

    monkeypatch.setenv("APPLICATION_PORT", "70000")
    monkeypatch.setattr(main_module.uvicorn, "run", _fail_run)

    with pytest.raises(SystemExit) as exit_info:
        main_module.main()

    assert exit_info.value.code == 1
