"""Test factories for generating test data."""

from polyfactory import Use
from polyfactory.factories import DataclassFactory

from ticktest.models.result import TestResult


class TestResultFactory(DataclassFactory[TestResult]):
    """Factory for TestResult."""

    __test__ = False
    __model__ = TestResult

    outcome = "pass"
    logs = Use(list[str])
