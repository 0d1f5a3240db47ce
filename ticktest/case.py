"""A named test function and the logic that turns its run into a result."""

import inspect
import logging
import traceback
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ticktest.context import TestContext
from ticktest.models.result import Outcome, TestResult
from ticktest.signals import Abort, Signal

log = logging.getLogger(__name__)

TestFn = Callable[[TestContext], Awaitable[None] | None]


def describe_exception(exc: BaseException) -> str:
    """Return the one-line string form of an exception, e.g. ``ValueError: x``."""
    return "".join(traceback.format_exception_only(exc)).strip()


@dataclass(frozen=True, kw_only=True)
class TestCase:
    """Binds a name to a test function."""

    __test__ = False

    name: str
    fn: TestFn

    async def run(self, context: TestContext) -> TestResult:
        """Run the test function against ``context`` and classify the outcome.

        A skip takes precedence over an earlier ``fail()``. An unexpected
        exception is logged into the context once and reported as a failure.
        """
        signal = await self._invoke(context)
        context.done = True

        outcome: Outcome
        if signal is Signal.ABORT_SKIPPED:
            outcome = "skip"
        elif signal is not None or context.failed:
            outcome = "fail"
        else:
            outcome = "pass"

        return TestResult(name=self.name, outcome=outcome, logs=tuple(context.logs))

    async def _invoke(self, context: TestContext) -> Signal | None:
        """Call the test function and return the signal that stopped it, if any."""
        try:
            result = self.fn(context)
            if inspect.isawaitable(result):
                await result
        except Abort as abort:
            return abort.signal
        except Exception as exc:
            context.log(describe_exception(exc))
            context.failed = True
            log.warning(
                "Test %r raised an unexpected error: %s", self.name, exc, exc_info=exc
            )
            return Signal.ABORT_UNEXPECTED
        return None
