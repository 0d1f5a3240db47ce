"""Runner configuration built from command-line flags."""

import argparse
import sys
from collections.abc import Sequence

from pydantic import Field

from ticktest.models.base import Model
from ticktest.reporter import ReportFormat


class RunnerConfig(Model):
    """Configuration for reporting and ambient suite behaviour."""

    format: ReportFormat = Field(
        default="pretty", description="Report format written after a run"
    )
    allow_global: bool = Field(
        default=False,
        description="Suppress the warning about implicit ambient suite usage",
    )

    @classmethod
    def from_argv(cls, argv: Sequence[str] | None = None) -> "RunnerConfig":
        """Build configuration from ``--format`` and ``--global`` flags.

        Unknown arguments are ignored, since they usually belong to the
        program that hosts the tests.
        """
        args, _ = build_parser().parse_known_args(
            sys.argv[1:] if argv is None else list(argv)
        )
        return cls(format=args.format, allow_global=args.allow_global)


def build_parser(
    parser: argparse.ArgumentParser | None = None,
) -> argparse.ArgumentParser:
    """Add the runner flags to ``parser`` (or a new one without help)."""
    if parser is None:
        parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--format",
        choices=("json", "pretty"),
        default="pretty",
        help="Report format (default: pretty)",
    )
    parser.add_argument(
        "--global",
        dest="allow_global",
        action="store_true",
        help="Do not warn when tests are registered outside a suite",
    )
    return parser
