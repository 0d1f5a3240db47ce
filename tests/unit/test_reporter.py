"""Tests for result rendering."""

import io
import json

import pytest

from ticktest.models.result import TestResult
from ticktest.reporter import render, report
from ticktest.testing.factories import TestResultFactory


def test_json_single_pass_exact() -> None:
    """Renders the exact compact JSON field names and values."""
    results = [TestResult(name="x", outcome="pass", logs=[])]

    assert render(results, "json") == '[{"name":"x","stat":"pass","logs":[]}]'


def test_pretty_single_pass_exact() -> None:
    """Renders a pass line without trailing log lines."""
    results = [TestResult(name="x", outcome="pass", logs=[])]

    assert render(results, "pretty") == "[pass] x"


def test_json_preserves_order_and_logs() -> None:
    """Keeps input order and every log line, for all outcomes."""
    results = [
        TestResultFactory.build(name="b", outcome="fail", logs=["one", "two"]),
        TestResultFactory.build(name="a", outcome="skip", logs=["why"]),
    ]

    assert json.loads(render(results, "json")) == [
        {"name": "b", "stat": "fail", "logs": ["one", "two"]},
        {"name": "a", "stat": "skip", "logs": ["why"]},
    ]


def test_json_empty_results() -> None:
    """Renders an empty array."""
    assert render([], "json") == "[]"


def test_pretty_shows_logs_for_failures_only() -> None:
    """Indents log lines under failed results and hides them otherwise."""
    results = [
        TestResultFactory.build(name="ok", outcome="pass", logs=["noise"]),
        TestResultFactory.build(
            name="broken", outcome="fail", logs=["ValueError: boom", "more"]
        ),
        TestResultFactory.build(name="later", outcome="skip", logs=["hidden"]),
    ]

    assert render(results, "pretty").splitlines() == [
        "[pass] ok",
        "[fail] broken",
        "  ValueError: boom",
        "  more",
        "[skip] later",
    ]


def test_unknown_format_raises() -> None:
    """Raises ValueError for unsupported formats."""
    with pytest.raises(ValueError, match="Unknown report format"):
        render([], "xml")  # type: ignore[arg-type]


def test_report_writes_to_stream() -> None:
    """Writes the rendered text followed by a newline."""
    stream = io.StringIO()

    report([TestResultFactory.build(name="x")], "pretty", stream)

    assert stream.getvalue() == "[pass] x\n"


def test_report_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Prints to stdout when no stream is given."""
    report([TestResultFactory.build(name="x")], "json")

    captured = capsys.readouterr()
    assert captured.out == '[{"name":"x","stat":"pass","logs":[]}]\n'
