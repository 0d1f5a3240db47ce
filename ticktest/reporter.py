"""Rendering of test results as JSON or human-readable text."""

import sys
from collections.abc import Sequence
from typing import Literal, TextIO

from pydantic import TypeAdapter

from ticktest.models.base import Model
from ticktest.models.result import Outcome, TestResult

ReportFormat = Literal["json", "pretty"]


class ReportEntry(Model):
    """Serialised form of a test result in JSON reports."""

    name: str
    stat: Outcome
    logs: list[str]


_ENTRIES = TypeAdapter(list[ReportEntry])


def render(results: Sequence[TestResult], format: ReportFormat) -> str:
    """Render results in input order.

    ``json`` yields a compact array of ``{"name", "stat", "logs"}`` objects.
    ``pretty`` yields one ``[outcome] name`` line per result, followed by the
    result's log lines indented by two spaces for failures only.
    """
    match format:
        case "json":
            entries = [
                ReportEntry(name=r.name, stat=r.outcome, logs=list(r.logs))
                for r in results
            ]
            return _ENTRIES.dump_json(entries).decode()
        case "pretty":
            lines: list[str] = []
            for result in results:
                lines.append(f"[{result.outcome}] {result.name}")
                if result.outcome == "fail":
                    lines.extend(f"  {line}" for line in result.logs)
            return "\n".join(lines)
        case _:
            raise ValueError(f"Unknown report format: {format!r}")


def report(
    results: Sequence[TestResult],
    format: ReportFormat,
    stream: TextIO | None = None,
) -> None:
    """Write rendered results to ``stream`` (stdout by default)."""
    print(render(results, format), file=stream or sys.stdout)
