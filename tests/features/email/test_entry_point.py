"""Tests for the email proxy console script."""

from fastapi import FastAPI

from bizadmin.api import email_proxy
from bizadmin.config.settings import AppSettings


def test_main_runs_uvicorn(monkeypatch):
    calls = {}
    settings = AppSettings(_env_file=None, host="127.0.0.1", port=3999, log_level="WARNING")
    monkeypatch.setattr(email_proxy, "get_settings", lambda: settings)
    monkeypatch.setattr(
        email_proxy.uvicorn,
        "run",
        lambda app, **kwargs: calls.update(app=app, **kwargs),
    )

    email_proxy.main()

    assert isinstance(calls["app"], FastAPI)
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 3999
    assert calls["log_config"] is None
