"""Minimal asyncio test framework with an implicit ambient suite."""

from ticktest.ambient import AmbientSuite, SuiteState, get_ambient_suite, test
from ticktest.assertions import (
    Assert,
    contains,
    contains_equal,
    equals,
    has_key,
    identical,
)
from ticktest.case import TestCase, TestFn
from ticktest.config import RunnerConfig
from ticktest.context import TestContext
from ticktest.errors import UsageError
from ticktest.models.result import Outcome, TestResult
from ticktest.reporter import ReportFormat, render, report
from ticktest.suite import TestSuite

__all__ = [
    "AmbientSuite",
    "Assert",
    "Outcome",
    "ReportFormat",
    "RunnerConfig",
    "SuiteState",
    "TestCase",
    "TestContext",
    "TestFn",
    "TestResult",
    "TestSuite",
    "UsageError",
    "contains",
    "contains_equal",
    "equals",
    "get_ambient_suite",
    "has_key",
    "identical",
    "render",
    "report",
    "test",
]
