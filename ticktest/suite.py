"""Ordered collection of test cases executed together."""

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from ticktest.case import TestCase, TestFn
from ticktest.context import TestContext
from ticktest.errors import usage_error
from ticktest.models.result import TestResult

log = logging.getLogger(__name__)

Register = Callable[..., TestFn | Callable[[TestFn], TestFn]]


@dataclass(kw_only=True)
class TestSuite:
    """Registers test cases and runs them concurrently."""

    __test__ = False

    tests: list[TestCase] = field(default_factory=list)
    tests_started: int = field(default=0, init=False)
    _started: bool = field(default=False, init=False, repr=False)

    @classmethod
    def new(cls, define: Callable[[Register], object]) -> "TestSuite":
        """Create a suite and let ``define`` register its tests.

        Example::

            suite = TestSuite.new(lambda test: test("my-test", lambda t: t.fail()))
            results = await suite.run()

        """
        suite = cls()
        define(suite.register)
        return suite

    def register(
        self, name: str, fn: TestFn | None = None
    ) -> TestFn | Callable[[TestFn], TestFn]:
        """Register a new test with the suite.

        When ``fn`` is omitted, returns a decorator registering the decorated
        function under ``name``.
        """
        if fn is None:

            def decorator(func: TestFn) -> TestFn:
                self.register(name, func)
                return func

            return decorator

        if self._started:
            raise usage_error(
                'Refusing to register test "%s": the suite is already running.',
                name,
            )
        self.tests.append(TestCase(name=name, fn=fn))
        return fn

    test = register

    async def run(self) -> Sequence[TestResult]:
        """Run all registered tests and return results in registration order.

        Raises:
            UsageError: If no tests are registered

        """
        if not self.tests:
            raise usage_error("No tests to run")

        self._started = True
        self.tests_started = 0
        log.info("Running %d test(s)...", len(self.tests))
        results = await asyncio.gather(*(self._run_case(case) for case in self.tests))
        log.info("Test execution completed")

        for result in results:
            log.info("Test completed: name=%s outcome=%s", result.name, result.outcome)

        return list(results)

    async def _run_case(self, case: TestCase) -> TestResult:
        self.tests_started += 1
        return await case.run(TestContext(name=case.name))
