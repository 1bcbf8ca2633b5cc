"""
pytest plugin: a failed-status handle for diagnostic conditions and an isolated registry.

Loaded automatically through the pytest11 entry point. Fixtures:
- teardown_status: OutcomeStatus for the running test (use as a diagnostic condition).
- teardown_registry: fresh TeardownRegistry, verified with pytest.fail when the test ends.
"""
from typing import Generator

import pytest

from namedteardown._teardown import TeardownRegistry, get_always_run_diagnostics

_reports_key = pytest.StashKey[dict]()


class OutcomeStatus:
    """failed() is True once the setup or call phase of the test item has failed."""

    def __init__(self, item: pytest.Item) -> None:
        self._item = item

    def failed(self) -> bool:
        reports = self._item.stash.get(_reports_key, {})
        return any(rep.failed for rep in reports.values())

    def __repr__(self) -> str:
        return f"OutcomeStatus({self._item.nodeid!r}, failed={self.failed()})"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo):
    outcome = yield
    rep = outcome.get_result()
    item.stash.setdefault(_reports_key, {})[rep.when] = rep


@pytest.fixture
def teardown_status(request: pytest.FixtureRequest) -> OutcomeStatus:
    """Failed-status handle for the current test."""
    return OutcomeStatus(request.node)


@pytest.fixture
def teardown_registry() -> Generator[TeardownRegistry, None, None]:
    """
    Isolated registry; anything left un-torn-down fails the test at fixture exit.
    Follows the process-wide always-run-diagnostics setting.
    """
    registry = TeardownRegistry(always_run_diagnostics=get_always_run_diagnostics())
    yield registry
    registry.verify_teardown(pytest.fail)
