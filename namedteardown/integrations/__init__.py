"""
Optional test-framework integrations. No pytest import at package load.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from namedteardown.integrations.pytest_plugin import OutcomeStatus


def __getattr__(name: str):
    """Lazy load the pytest helpers so pytest is not required at import time."""
    if name == "OutcomeStatus":
        from namedteardown.integrations.pytest_plugin import OutcomeStatus
        return OutcomeStatus
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
