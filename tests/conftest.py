"""
Shared fixtures: clean ALWAYS_RUN_DIAGNOSTIC_TEARDOWNS env, fresh default registry, pytester.
"""
from pathlib import Path

import pytest

import namedteardown
from namedteardown.constants import ENV_ALWAYS_RUN_DIAGNOSTICS

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path):
    """No env flag, no user/project config files, always-run off, and an empty default registry per test."""
    monkeypatch.delenv(ENV_ALWAYS_RUN_DIAGNOSTICS, raising=False)
    fake_home = tmp_path / "fakehome"
    fake_home.mkdir()
    monkeypatch.setattr(Path, "home", staticmethod(lambda: fake_home))
    monkeypatch.chdir(tmp_path)
    namedteardown.refresh_always_run_diagnostics()
    namedteardown.reset_registry()
    yield
    namedteardown.reset_registry()
    namedteardown.set_always_run_diagnostics(False)


class Counter:
    """Counter whose steps record the value they expected to see."""

    def __init__(self) -> None:
        self.value = 0
        self.order: list[str] = []

    def step(self, label: str, expected: int):
        def _step() -> None:
            self.value += 1
            self.order.append(label)
            assert self.value == expected, f"{label}: expected {expected}, got {self.value}"

        return _step


@pytest.fixture
def counter() -> Counter:
    return Counter()
