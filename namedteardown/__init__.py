"""namedteardown: named deferred-cleanup lists for tests (add_teardown, teardown, verify_teardown)."""

from namedteardown._teardown import (
    FailureStatus,
    TeardownRegistry,
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
from namedteardown.version import version as __version__

__all__ = [
    "TeardownRegistry",
    "FailureStatus",
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
    "__version__",
]
