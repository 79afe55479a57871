"""Process entry point."""
import app.main as main


def test_run_binds_configured_host_and_port(settings, monkeypatch):
    settings.APP_HOST = "127.0.0.1"
    settings.APP_PORT = 9123
    calls = []
    monkeypatch.setattr(main, "get_settings", lambda: settings)
    monkeypatch.setattr(main.uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    main.run()

    assert len(calls) == 1
    target, kwargs = calls[0]
    assert target == "app.main:create_app"
    assert kwargs["factory"] is True
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9123
    assert kwargs["log_level"] == "warning"
