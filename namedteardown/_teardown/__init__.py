"""
Named teardown registries: registry engine, diagnostic conditions, and the
process-wide default registry with its module-level API.
"""
from namedteardown._teardown._conditions import FailureStatus, classify_condition
from namedteardown._teardown._default import (
    add_diagnostic_teardown,
    add_global_diagnostic_teardown,
    add_global_teardown,
    add_teardown,
    get_always_run_diagnostics,
    get_registry,
    pending_names,
    refresh_always_run_diagnostics,
    reset_registry,
    set_always_run_diagnostics,
    teardown,
    teardown_scope,
    verify_teardown,
)
from namedteardown._teardown._registry import TeardownRegistry

__all__ = [
    "TeardownRegistry",
    "FailureStatus",
    "classify_condition",
    "add_teardown",
    "add_global_teardown",
    "add_diagnostic_teardown",
    "add_global_diagnostic_teardown",
    "teardown",
    "teardown_scope",
    "verify_teardown",
    "pending_names",
    "get_registry",
    "reset_registry",
    "get_always_run_diagnostics",
    "set_always_run_diagnostics",
    "refresh_always_run_diagnostics",
]
