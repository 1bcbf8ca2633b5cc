"""
Diagnostic teardown conditions.

A condition is classified once, when the diagnostic teardown is registered, into one
of five variants. Its truth value is only computed by evaluate(), at teardown time.
Depends: stdlib only.
"""
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Union, runtime_checkable


@runtime_checkable
class FailureStatus(Protocol):
    """Anything that can say whether the current test has already failed."""

    def failed(self) -> bool: ...


@dataclass(frozen=True)
class Absent:
    """No condition (None): never runs."""

    def evaluate(self) -> bool:
        return False


@dataclass(frozen=True)
class Flag:
    """Literal bool, used as is."""

    value: bool

    def evaluate(self) -> bool:
        return self.value


@dataclass(frozen=True)
class StatusHandle:
    """Test-status handle; runs when the test has failed by teardown time."""

    handle: FailureStatus

    def evaluate(self) -> bool:
        return bool(self.handle.failed())


@dataclass(frozen=True)
class Predicate:
    """Zero-argument callable, called at teardown time."""

    fn: Callable[[], Any]

    def evaluate(self) -> bool:
        return bool(self.fn())


@dataclass(frozen=True)
class Other:
    """Any other non-None value. Always truthy, whatever its own bool() says."""

    value: Any

    def evaluate(self) -> bool:
        return True


Condition = Union[Absent, Flag, StatusHandle, Predicate, Other]


def classify_condition(condition: Any) -> Condition:
    """
    Map a raw condition value to its variant.

    Order matters: an object exposing a callable failed() is a status handle even if
    it is itself callable; bool is checked before the catch-all so False stays False.
    Already-classified conditions are returned unchanged.
    """
    if isinstance(condition, (Absent, Flag, StatusHandle, Predicate, Other)):
        return condition
    if condition is None:
        return Absent()
    if isinstance(condition, bool):
        return Flag(condition)
    if callable(getattr(condition, "failed", None)):
        return StatusHandle(condition)
    if callable(condition):
        return Predicate(condition)
    return Other(condition)
