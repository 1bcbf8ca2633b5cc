"""
Process-wide default registry and the module-level API bound to it.

The always-run-diagnostics setting is process-wide: it is read from
ALWAYS_RUN_DIAGNOSTIC_TEARDOWNS (and the YAML config layers) once, when this module
is imported. Setting the variable later has no effect unless
refresh_always_run_diagnostics() is called. set_always_run_diagnostics() changes it
for the default registry, for any default registry built after reset_registry(), and
for the registries handed out by the pytest plugin.
Depends: namedteardown.config, _registry.
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from namedteardown.config import load_config
from namedteardown._teardown._registry import Action, Reporter, TeardownRegistry

_always_run_diagnostics: bool = load_config().always_run_diagnostics
_default_registry: TeardownRegistry | None = None


def get_registry() -> TeardownRegistry:
    """Return the process-wide registry, creating it on first call."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TeardownRegistry(always_run_diagnostics=_always_run_diagnostics)
    return _default_registry


def reset_registry(registry: TeardownRegistry | None = None) -> TeardownRegistry | None:
    """
    Replace the process-wide registry (None: build a new one lazily on next use).
    Pending entries of the old registry are dropped, not run. Returns the old registry.
    The always-run setting is kept.
    """
    global _default_registry
    old = _default_registry
    _default_registry = registry
    return old


def get_always_run_diagnostics() -> bool:
    if _default_registry is not None:
        return _default_registry.always_run_diagnostics
    return _always_run_diagnostics


def set_always_run_diagnostics(value: bool) -> None:
    """Force (or stop forcing) every diagnostic teardown to run, regardless of condition."""
    global _always_run_diagnostics
    _always_run_diagnostics = bool(value)
    if _default_registry is not None:
        _default_registry.always_run_diagnostics = _always_run_diagnostics


def refresh_always_run_diagnostics(project_root: Path | None = None) -> bool:
    """Re-read the setting from the environment and config files; returns the new value."""
    set_always_run_diagnostics(load_config(project_root).always_run_diagnostics)
    return _always_run_diagnostics


def add_teardown(name: str, action: Action) -> None:
    get_registry().add_teardown(name, action)


def add_global_teardown(action: Action) -> None:
    get_registry().add_global_teardown(action)


def add_diagnostic_teardown(name: str, condition: Any, action: Action) -> None:
    get_registry().add_diagnostic_teardown(name, condition, action)


def add_global_diagnostic_teardown(condition: Any, action: Action) -> None:
    get_registry().add_global_diagnostic_teardown(condition, action)


def teardown(name: str) -> None:
    get_registry().teardown(name)


def verify_teardown(reporter: Reporter | None = None) -> list[str]:
    return get_registry().verify_teardown(reporter)


@contextmanager
def teardown_scope(name: str) -> Generator[str, None, None]:
    """with teardown_scope("DB"): ... runs teardown("DB") on exit."""
    with get_registry().scope(name) as scoped:
        yield scoped


def pending_names() -> list[str]:
    return get_registry().pending_names()
