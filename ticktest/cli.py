"""CLI entry point running the tests registered by a test file."""

import argparse
import asyncio
import logging
import runpy
import sys
from collections.abc import Sequence
from pathlib import Path

from ticktest.ambient import AmbientSuite, install_ambient_suite
from ticktest.config import RunnerConfig, build_parser
from ticktest.models.result import TestResult

OUTCOME_SYMBOLS = {
    "pass": "✓",
    "fail": "✗",
    "skip": "-",
}


def log_results_summary(log: logging.Logger, results: Sequence[TestResult]) -> None:
    """Log a one-line summary of test outcomes."""
    counts = {outcome: 0 for outcome in OUTCOME_SYMBOLS}
    for result in results:
        counts[result.outcome] += 1

    log.info(
        "%d test(s): %s",
        len(results),
        ", ".join(
            f"{OUTCOME_SYMBOLS[outcome]} {count} {outcome}"
            for outcome, count in counts.items()
        ),
    )


async def run(test_file: Path, config: RunnerConfig) -> int:
    """Run the tests registered by ``test_file`` and return the exit code."""
    log = logging.getLogger("ticktest")

    ambient = AmbientSuite(config=config)
    install_ambient_suite(ambient)
    try:
        log.info("Loading tests from %s", test_file)
        runpy.run_path(str(test_file), run_name="__main__")
        results = await ambient.wait()
    finally:
        install_ambient_suite(None)

    log_results_summary(log, results)

    return 1 if any(result.outcome == "fail" for result in results) else 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run the tests registered by a Python test file"
    )
    parser.add_argument("test_file", type=Path, help="Python file registering tests")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Log level for runner diagnostics on stderr (default: WARNING)",
    )
    build_parser(parser)

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    # running a file through the CLI is explicit use of the ambient suite
    config = RunnerConfig(format=args.format, allow_global=True)

    exit_code = asyncio.run(run(test_file=args.test_file, config=config))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
