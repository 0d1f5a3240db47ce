"""Implicit process-wide suite for tests registered outside an explicit suite.

The first registration creates the suite and schedules it to run as soon as the
current synchronous burst of registrations yields: as a task on the running
event loop, or at interpreter exit when no loop is running. A run cancelled by
loop shutdown before any test function started falls back to running at exit.
Registrations that arrive once the suite has started are usage errors.
"""

import asyncio
import atexit
import logging
import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TextIO

from ticktest.case import TestFn
from ticktest.config import RunnerConfig
from ticktest.errors import UsageError, usage_error
from ticktest.models.result import TestResult
from ticktest.reporter import report
from ticktest.suite import TestSuite

log = logging.getLogger(__name__)

IMPLICIT_SUITE_WARNING = """\
------------------------------------------------------------------
Warning: you called test() outside of a test suite. Your test will
be added to the global test suite.

Offending test: "%s"

To remove this warning, either:
    - Use TestSuite.new(define)
    - Pass --global to ignore this warning
------------------------------------------------------------------"""


class SuiteState(Enum):
    """Lifecycle of the ambient suite."""

    ABSENT = auto()
    COLLECTING = auto()
    RUNNING = auto()
    DONE = auto()


@dataclass(kw_only=True)
class AmbientSuite:
    """Owns the implicit suite and drives it through its lifecycle."""

    config: RunnerConfig = field(default_factory=RunnerConfig.from_argv)
    stream: TextIO | None = None
    state: SuiteState = SuiteState.ABSENT
    suite: TestSuite | None = None
    results: Sequence[TestResult] = ()
    _task: asyncio.Task[Sequence[TestResult]] | None = field(
        default=None, init=False, repr=False
    )

    def register(
        self, name: str, fn: TestFn | None = None
    ) -> TestFn | Callable[[TestFn], TestFn]:
        """Register a test, creating and scheduling the suite on first use."""
        if fn is None:

            def decorator(func: TestFn) -> TestFn:
                self.register(name, func)
                return func

            return decorator

        if self.state is SuiteState.ABSENT:
            self._start(name)

        if self.state is not SuiteState.COLLECTING or self.suite is None:
            raise usage_error(
                "Refusing to register test: %s\n\n"
                "This test was registered after the global test suite started "
                "running. This is likely because this test was registered "
                "asynchronously.",
                name,
            )

        self.suite.register(name, fn)
        return fn

    async def wait(self) -> Sequence[TestResult]:
        """Wait for the scheduled run and return its results.

        Raises:
            UsageError: If no test was ever registered

        """
        if self.state is SuiteState.ABSENT:
            raise usage_error("No tests to run")
        if self._task is None:
            return self.results
        return await self._task

    def _start(self, first_test: str) -> None:
        self.suite = TestSuite()
        self.state = SuiteState.COLLECTING
        if not self.config.allow_global:
            log.warning(IMPLICIT_SUITE_WARNING, first_test)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            log.debug("No running event loop, ambient suite will run at exit")
            atexit.register(self._run_at_exit)
        else:
            self._task = loop.create_task(self._run())
            self._task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task[Sequence[TestResult]]) -> None:
        if not task.cancelled():
            return

        self._task = None
        if self.suite is not None and self.suite.tests_started == 0:
            # the loop shut down before any test function ran
            log.debug("Ambient suite cancelled before any test ran, deferring to exit")
            self.suite = TestSuite(tests=list(self.suite.tests))
            self.state = SuiteState.COLLECTING
            atexit.register(self._run_at_exit)
            return

        raise usage_error(
            "The global test suite was cancelled before it finished running. "
            "This is likely because the event loop was closed while tests were "
            "still in progress; await get_ambient_suite().wait() before exiting."
        )

    def _run_at_exit(self) -> None:
        try:
            asyncio.run(self._run())
        except UsageError as exc:
            # exceptions raised by atexit callbacks do not change the exit status
            print(exc.message, file=sys.stderr)
            sys.stdout.flush()
            sys.stderr.flush()
            os._exit(1)

    async def _run(self) -> Sequence[TestResult]:
        if self.suite is None:  # pragma: no cover
            raise usage_error("No tests to run")

        self.state = SuiteState.RUNNING
        self.results = await self.suite.run()
        report(self.results, self.config.format, self.stream)
        self.state = SuiteState.DONE
        return self.results


_ambient: AmbientSuite | None = None


def get_ambient_suite() -> AmbientSuite:
    """Return the process-wide ambient suite, creating it on first use."""
    global _ambient
    if _ambient is None:
        _ambient = AmbientSuite()
    return _ambient


def install_ambient_suite(ambient: AmbientSuite | None) -> None:
    """Replace the process-wide ambient suite (``None`` resets it)."""
    global _ambient
    _ambient = ambient


def test(
    name: str, fn: TestFn | None = None
) -> TestFn | Callable[[TestFn], TestFn]:
    """Register a test with the ambient suite.

    Tests registered this way run automatically once registration yields. To
    group tests, or control how and when they run, use TestSuite.new().

    Example::

        @test("addition")
        def _(t):
            equals(t, 1 + 1, 2)

    """
    return get_ambient_suite().register(name, fn)


test.__test__ = False  # type: ignore[attr-defined]
