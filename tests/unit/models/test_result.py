"""Tests for TestResult."""

import dataclasses

import pytest

from ticktest.models.result import TestResult
from ticktest.testing.factories import TestResultFactory


def test_defaults_to_empty_logs() -> None:
    """Has no log lines unless given."""
    result = TestResult(name="x", outcome="pass")

    assert result.logs == ()


def test_is_frozen() -> None:
    """Cannot be modified after creation."""
    result = TestResultFactory.build(name="x")

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.outcome = "fail"  # type: ignore[misc]


def test_requires_keyword_arguments() -> None:
    """Rejects positional construction."""
    with pytest.raises(TypeError):
        TestResult("x", "pass")  # type: ignore[misc]
