"""
TeardownRegistry: named LIFO teardown lists plus conditional diagnostic lists.

Not thread-safe. Callers that register or tear down from several threads must
hold their own lock around every call on a shared registry.
Depends: namedteardown.config, namedteardown.constants, _conditions.
"""
import logging
from contextlib import contextmanager
from typing import Any, Callable, Generator, Protocol, Union

from namedteardown.config import load_config
from namedteardown.constants import format_uncleared

from namedteardown._teardown._conditions import classify_condition

logger = logging.getLogger(__name__)

Action = Callable[[], None]


class _FailingReporter(Protocol):
    def fail(self, msg: str) -> Any: ...


# pytest.fail, or a unittest.TestCase (anything with .fail(msg)).
Reporter = Union[Callable[[str], Any], _FailingReporter]


def _report(reporter: Reporter, message: str) -> None:
    """Deliver a failure message to a reporter object or callable."""
    fail = getattr(reporter, "fail", None)
    if callable(fail):
        fail(message)
    else:
        reporter(message)  # type: ignore[operator]


def _run_reversed(actions: list[Action]) -> None:
    for action in reversed(actions):
        action()


class TeardownRegistry:
    """
    Process-wide (or per-test) store of named teardown lists.

    Typical use::

        registry.add_teardown("DATABASE", conn.close)
        registry.add_diagnostic_teardown("DATABASE", status, dump_tables)
        ...
        registry.teardown("DATABASE")  # dump_tables (if failed), then conn.close

    always_run_diagnostics is read at teardown time, so flipping it after
    registration still takes effect. When not given it comes from load_config().
    """

    def __init__(self, always_run_diagnostics: bool | None = None) -> None:
        if always_run_diagnostics is None:
            always_run_diagnostics = load_config().always_run_diagnostics
        self.always_run_diagnostics = always_run_diagnostics
        self._teardowns: dict[str, list[Action]] = {}
        self._diagnostics: dict[str, list[Action]] = {}

    # -- registration ---------------------------------------------------

    def add_teardown(self, name: str, action: Action) -> None:
        """Append action to the named list; teardown(name) calls it last-in-first-out."""
        self._teardowns.setdefault(name, []).append(action)
        logger.debug("teardown added to %r (%d pending)", name, len(self._teardowns[name]))

    def add_global_teardown(self, action: Action) -> None:
        """Append action to every name that currently has a teardown list."""
        for name in list(self._teardowns):
            self.add_teardown(name, action)

    def add_diagnostic_teardown(self, name: str, condition: Any, action: Action) -> None:
        """
        Add a diagnostic teardown, run before any other teardown for name.

        Useful for logging or dumping state, or sleeping to allow inspection, right
        before resources are released. The condition is classified now but evaluated
        only when the teardown runs (see classify_condition for accepted values).
        Avoid stacking several sleeping diagnostics; put one on the innermost list.
        """
        cond = classify_condition(condition)

        def diagnostic() -> None:
            if self.always_run_diagnostics or cond.evaluate():
                action()
            else:
                logger.debug("diagnostic teardown for %r skipped (%s)", name, type(cond).__name__)

        self._diagnostics.setdefault(name, []).append(diagnostic)
        logger.debug("diagnostic teardown added to %r (%s)", name, type(cond).__name__)

    def add_global_diagnostic_teardown(self, condition: Any, action: Action) -> None:
        """Add a diagnostic teardown to every name that currently has a diagnostic list."""
        for name in list(self._diagnostics):
            self.add_diagnostic_teardown(name, condition, action)

    # -- execution ------------------------------------------------------

    def teardown(self, name: str) -> None:
        """
        Run the named list: diagnostics first, then teardowns, each last-in-first-out.

        Unknown names are a no-op. Both lists for name are dropped even if an action raises.
        """
        combined = self._teardowns.get(name, []) + self._diagnostics.get(name, [])
        try:
            if combined:
                logger.debug("tearing down %r (%d actions)", name, len(combined))
            _run_reversed(combined)
        finally:
            self._teardowns.pop(name, None)
            self._diagnostics.pop(name, None)

    @contextmanager
    def scope(self, name: str) -> Generator[str, None, None]:
        """Context manager that calls teardown(name) on exit, including on error."""
        try:
            yield name
        finally:
            self.teardown(name)

    # -- verification ---------------------------------------------------

    def verify_teardown(self, reporter: Reporter | None = None) -> list[str]:
        """
        Run and drop every list that was never torn down; report them as a failure.

        Best effort only: each list still runs diagnostics-first LIFO, but the order
        across names is arbitrary. This must not replace calling teardown(name) at the
        right point. Returns the uncleared names; reporter (if given) receives the
        failure message after the registry has been emptied.
        """
        uncleared: list[str] = []
        try:
            for name, diagnostics in self._diagnostics.items():
                self._teardowns[name] = self._teardowns.get(name, []) + diagnostics
            self._diagnostics = {}
            # Pop before running: an action may tear down (or add) other names.
            while self._teardowns:
                name = next(iter(self._teardowns))
                actions = self._teardowns.pop(name)
                if not actions:
                    continue
                uncleared.append(name)
                _run_reversed(actions)
        finally:
            self._teardowns = {}
            self._diagnostics = {}

        if uncleared:
            message = format_uncleared(uncleared)
            logger.warning(message)
            if reporter is not None:
                _report(reporter, message)
        else:
            logger.debug("verify_teardown: all teardown lists cleared")
        return uncleared

    # -- introspection --------------------------------------------------

    def pending_names(self) -> list[str]:
        """Sorted names that still have normal or diagnostic entries."""
        names = {n for n, lst in self._teardowns.items() if lst}
        names.update(n for n, lst in self._diagnostics.items() if lst)
        return sorted(names)

    def pending_count(self, name: str) -> int:
        """Number of entries (normal + diagnostic) waiting under name."""
        return len(self._teardowns.get(name, [])) + len(self._diagnostics.get(name, []))

    def clear(self) -> None:
        """Drop every entry without running it. For test isolation only."""
        self._teardowns.clear()
        self._diagnostics.clear()
