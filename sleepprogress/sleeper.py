"""Cancellable one-second waits."""

import logging
import time
from typing import Callable, Protocol

from sleepprogress.exit_flag import InterruptLatch

logger = logging.getLogger(__name__)


class Sleeper(Protocol):
    def sleep_one_unit(self) -> bool:
        ...


class CancellableSleeper:
    """
    Sleep for one unit at a time, returning early when the latch is set.

    The wait happens on the latch's event so the signal handler wakes it up
    immediately. An early wakeup with the latch still clear (an unrelated
    signal, or a spurious return) resumes waiting until the deadline.
    """

    def __init__(self, latch: InterruptLatch, unit: float = 1.0, clock: Callable[[], float] = time.monotonic):
        self.latch = latch
        self.unit = unit
        self.clock = clock

    def sleep_one_unit(self) -> bool:
        """
        Wait for one unit.

        Returns:
            True if the unit completed, False if the latch was set
        """
        if self.latch.is_set():
            return False

        deadline = self.clock() + self.unit
        try:
            while True:
                remaining = deadline - self.clock()
                if remaining <= 0:
                    return not self.latch.is_set()
                if self.latch.wait(remaining):
                    logger.debug("Wait cut short by interrupt")
                    return False
        except KeyboardInterrupt:
            # Only reached when the latch handler is not installed
            self.latch.set()
            return False
