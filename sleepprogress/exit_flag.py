"""Interrupt handling for the countdown loop.

This module provides a write-once latch that the countdown loop can check to
see if an interrupt (Ctrl-C) was requested. The signal handler only sets the
latch; the loop checks it before and during every one-second wait and exits
cleanly when it is set.
"""

import logging
import signal
import threading
from typing import Optional

logger = logging.getLogger(__name__)


class InterruptLatch:
    """Write-once interrupt flag that waiters can block on."""

    def __init__(self):
        # Python runs signal handlers on the main thread, possibly while that
        # thread is inside wait() holding this lock, so it must be reentrant.
        self._cond = threading.Condition(threading.RLock())
        self._flag = False
        self._installed: Optional[bool] = None

    def install(self, signum: int = signal.SIGINT) -> bool:
        """
        Install the interrupt handler. Only the first call does any work.

        Installation failure is not fatal: the error is logged and the program
        keeps running without interrupt support.

        Returns:
            True if the handler is in place, False otherwise
        """
        if self._installed is not None:
            return self._installed

        try:
            signal.signal(signum, self._handle)
        except (ValueError, OSError) as e:
            # signal.signal only works from the main thread of the main interpreter
            logger.warning(f"Could not install handler for signal {signum}: {e}")
            self._installed = False
        else:
            logger.debug(f"Installed interrupt handler for signal {signum}")
            self._installed = True
        return self._installed

    @property
    def installed(self) -> bool:
        return bool(self._installed)

    def _handle(self, signum, frame):
        self.set()

    def set(self) -> None:
        with self._cond:
            self._flag = True
            self._cond.notify_all()

    def is_set(self) -> bool:
        return self._flag

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the latch is set or the timeout expires."""
        with self._cond:
            return self._cond.wait_for(lambda: self._flag, timeout)


# Process-wide latch used by the command-line entry point
FORCE_EXIT = InterruptLatch()
