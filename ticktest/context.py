"""Per-test handle for logging and signalling failure or skip."""

import re
from dataclasses import dataclass, field

from ticktest.errors import usage_error
from ticktest.signals import Abort, Signal

PLACEHOLDER = re.compile(r"%[-#0 +]*\d*(?:\.\d+)?[diouxXeEfFgGcrsa%]")


def format_message(message: object, *args: object) -> str:
    """Format a log message the way %-style logging calls read.

    Placeholders in ``message`` consume arguments in order; arguments left
    over are appended separated by spaces. A message without arguments is
    returned unchanged, including any literal ``%``.
    """
    text = str(message)
    if not args:
        return text

    wanted = sum(1 for match in PLACEHOLDER.finditer(text) if match[0] != "%%")
    if wanted and wanted <= len(args):
        text = text % args[:wanted]
        args = args[wanted:]
    return " ".join([text, *map(str, args)])


@dataclass(kw_only=True)
class TestContext:
    """Mutable state of one running test.

    Every operation raises a UsageError once the test has finished: a late call
    usually comes from an asynchronous operation the test started but did not
    await.
    """

    __test__ = False

    name: str
    logs: list[str] = field(default_factory=list)
    failed: bool = False
    done: bool = False

    def _ensure_running(self, method: str) -> None:
        if self.done:
            raise usage_error(
                'Attempted to call %s from test "%s" after the test had finished '
                "running. This is likely because your test initiated an "
                "asynchronous operation but did not wait for it to complete.",
                method,
                self.name,
            )

    def log(self, message: object, *args: object) -> None:
        """Record a message in the test's output log.

        ``t.log("got %d rows", 3)`` and ``t.log("got", 3, "rows")`` both work.
        """
        self._ensure_running("log")
        self.logs.append(format_message(message, *args))

    def error(self, message: object, *args: object) -> None:
        """Equivalent to log() followed by fail()."""
        self._ensure_running("error")
        self.log(message, *args)
        self.fail()

    def fatal(self, message: object, *args: object) -> None:
        """Equivalent to log() followed by fail_now()."""
        self._ensure_running("fatal")
        self.log(message, *args)
        self.fail_now()

    def fail(self) -> None:
        """Mark the test as failed but continue execution."""
        self._ensure_running("fail")
        self.failed = True

    def fail_now(self) -> None:
        """Mark the test as failed and stop execution."""
        self._ensure_running("fail_now")
        self.failed = True
        raise Abort(Signal.ABORT_FAILED)

    def skip(self) -> None:
        """Stop execution and mark the test as skipped."""
        self._ensure_running("skip")
        raise Abort(Signal.ABORT_SKIPPED)
