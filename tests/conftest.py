import io

import pytest
from rich.console import Console

from sleepprogress.exit_flag import InterruptLatch


class FakeSleeper:
    """Counts sleep units; optionally sets the latch during unit `interrupt_at`."""

    def __init__(self, latch, interrupt_at=None):
        self.latch = latch
        self.interrupt_at = interrupt_at
        self.calls = 0

    def sleep_one_unit(self):
        self.calls += 1
        if self.interrupt_at is not None and self.calls >= self.interrupt_at:
            self.latch.set()
            return False
        return True


class RecordingDisplay:
    def __init__(self):
        self.events = []

    def header(self, duration):
        self.events.append(("header", duration))

    def tick(self, elapsed, duration):
        self.events.append(("tick", elapsed, duration))

    def interrupted(self, elapsed, duration):
        self.events.append(("interrupted", elapsed, duration))

    def finish(self, duration):
        self.events.append(("finish", duration))

    @property
    def ticks(self):
        return [e[1] for e in self.events if e[0] == "tick"]


def make_console():
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False)


@pytest.fixture
def latch():
    return InterruptLatch()


@pytest.fixture
def display_recorder():
    return RecordingDisplay()
