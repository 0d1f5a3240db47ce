"""Data models for test results and serialised structures."""

from ticktest.models.base import Model
from ticktest.models.result import Outcome, TestResult

__all__ = ["Model", "Outcome", "TestResult"]
