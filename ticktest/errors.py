"""Errors raised when the framework itself is misused."""

import logging

log = logging.getLogger(__name__)


class UsageError(SystemExit):
    """Raised on misuse of the framework API.

    Derives from SystemExit so that neither ``except Exception`` blocks in test
    code nor the event loop can contain it: the process stops with the
    diagnostic as its exit message and status 1.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def usage_error(message: str, *args: object) -> UsageError:
    """Log a usage error at critical level and return it for raising."""
    text = message % args if args else message
    log.critical(text)
    return UsageError(text)
