"""Markers used to unwind a test function and classify why it stopped."""

from enum import Enum, auto


class Signal(Enum):
    """Terminal signals of a test function."""

    ABORT_FAILED = auto()
    ABORT_SKIPPED = auto()
    ABORT_UNEXPECTED = auto()


class Abort(BaseException):
    """Unwinds a test function carrying the signal that stopped it.

    Not an ``Exception`` subclass, so ordinary ``except Exception`` handlers in
    test code let it through.
    """

    def __init__(self, signal: Signal) -> None:
        super().__init__(signal.name)
        self.signal = signal
