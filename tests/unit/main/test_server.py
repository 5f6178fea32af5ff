from __future__ import annotations

from src.main import server


def test_main_runs_uvicorn_with_settings(monkeypatch) -> None:
    calls = {}

    def fake_run(app_path, **kwargs) -> None:
        calls["app"] = app_path
        calls.update(kwargs)

    monkeypatch.setenv("API_HOST", "127.0.0.1")
    monkeypatch.setenv("API_PORT", "8081")
    monkeypatch.setenv("API_RELOAD", "true")
    monkeypatch.setattr("src.main.server.uvicorn.run", fake_run)

    server.main()

    assert calls == {
        "app": "src.main.app:app",
        "host": "127.0.0.1",
        "port": 8081,
        "reload": True,
        "log_config": None,
    }


def test_main_reads_settings_at_call_time(monkeypatch) -> None:
    applied = []

    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setattr("src.main.server.uvicorn.run", lambda *args, **kwargs: None)
    monkeypatch.setattr(
        "src.main.server.update_logging_from_settings",
        lambda settings: applied.append(settings.logging.level.value),
    )

    server.main()

    assert applied == ["WARNING"]
    assert not hasattr(server, "settings")
