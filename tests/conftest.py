from __future__ import annotations

import subprocess

import pytest

from config_loader import load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for var in ("MKIT_WRANGLER_COMMAND", "MKIT_KV_BINDING", "MKIT_COMMAND_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings(tmp_path) -> dict:
    return load_config(project_dir=tmp_path)


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted answers to input(); fail loudly if the wizard asks too much."""
    queue: list[str] = []

    def _input(question: str = "") -> str:
        if not queue:
            raise AssertionError(f"unexpected prompt: {question!r}")
        return queue.pop(0)

    monkeypatch.setattr("builtins.input", _input)
    return queue


@pytest.fixture
def fake_wrangler(monkeypatch):
    """Replace subprocess.run for wrangler calls with canned results keyed by argv tail."""
    calls: list[list[str]] = []
    results: dict[tuple[str, ...], subprocess.CompletedProcess | Exception] = {}

    def _run(cmd, **kwargs):
        calls.append(list(cmd))
        key = tuple(cmd[2:])
        result = results.get(key)
        if result is None:
            return subprocess.CompletedProcess(cmd, 1, "", "unknown command")
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr("kv_namespace.subprocess.run", _run)

    class _Fake:
        def __init__(self) -> None:
            self.calls = calls

        def on(self, *args: str, stdout: str = "", returncode: int = 0, stderr: str = "") -> None:
            results[args] = subprocess.CompletedProcess(list(args), returncode, stdout, stderr)

        def raise_on(self, *args: str, exc: Exception) -> None:
            results[args] = exc

    return _Fake()
