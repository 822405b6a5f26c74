from __future__ import annotations

import subprocess

import pytest
import requests

from uw import update
from uw.errors import UpdateError
from uw.schema import UpdateConfig


class FakeResponse:
    def __init__(self, payload, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


def _serve(monkeypatch, response: FakeResponse, seen: list[tuple[str, float]]) -> None:
    def fake_get(url: str, timeout: float):
        seen.append((url, timeout))
        return response

    monkeypatch.setattr(update.requests, "get", fake_get)


def _record_runs(monkeypatch, returncode: int = 0) -> list[list[str]]:
    runs: list[list[str]] = []

    def fake_run(cmd, check):
        runs.append(list(cmd))
        if returncode:
            raise subprocess.CalledProcessError(returncode, cmd)

    monkeypatch.setattr(update.subprocess, "run", fake_run)
    return runs


def test_fetch_latest_version(monkeypatch) -> None:
    seen: list[tuple[str, float]] = []
    _serve(monkeypatch, FakeResponse({"info": {"version": "1.2.0"}}), seen)

    assert update.fetch_latest_version(UpdateConfig(timeout=5)) == "1.2.0"
    assert seen == [("https://pypi.org/pypi/uw/json", 5)]


def test_up_to_date_skips_install(monkeypatch) -> None:
    _serve(monkeypatch, FakeResponse({"info": {"version": "0.1.0"}}), [])
    runs = _record_runs(monkeypatch)

    assert update.self_update(UpdateConfig(), current="0.1.0") == ("0.1.0", False)
    assert runs == []


def test_newer_release_is_installed(monkeypatch) -> None:
    _serve(monkeypatch, FakeResponse({"info": {"version": "0.2.0"}}), [])
    runs = _record_runs(monkeypatch)

    assert update.self_update(UpdateConfig(), current="0.1.0") == ("0.2.0", True)
    assert len(runs) == 1
    assert runs[0][1:] == ["-m", "pip", "install", "--upgrade", "uw==0.2.0"]


def test_http_failure_is_reported(monkeypatch) -> None:
    _serve(monkeypatch, FakeResponse({}, status_code=503), [])
    runs = _record_runs(monkeypatch)

    with pytest.raises(UpdateError, match="update check failed"):
        update.self_update(UpdateConfig(), current="0.1.0")
    assert runs == []


def test_missing_version_is_reported(monkeypatch) -> None:
    _serve(monkeypatch, FakeResponse({"info": {}}), [])

    with pytest.raises(UpdateError, match="no version published"):
        update.fetch_latest_version(UpdateConfig())


def test_install_failure_keeps_pip_exit_code(monkeypatch) -> None:
    _serve(monkeypatch, FakeResponse({"info": {"version": "0.2.0"}}), [])
    _record_runs(monkeypatch, returncode=2)

    with pytest.raises(UpdateError) as excinfo:
        update.self_update(UpdateConfig(), current="0.1.0")
    assert excinfo.value.exit_code == 2
