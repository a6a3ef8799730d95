"""Countdown loop: one tick per second until done or interrupted."""

import logging
from dataclasses import dataclass
from enum import Enum

from sleepprogress.exit_flag import InterruptLatch
from sleepprogress.sleeper import Sleeper
from sleepprogress.timefmt import format_duration

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INTERRUPTED = 130  # 128 + SIGINT

DEFAULT_BAR_WIDTH = 20


@dataclass(frozen=True)
class CountdownConfig:
    """Rendering options for a countdown run."""

    multiline: bool = False
    quiet: bool = False
    show_bar: bool = True
    colorize: bool = True
    bar_width: int = DEFAULT_BAR_WIDTH
    show_header_times: bool = True


class CountdownState(Enum):
    RUNNING = "running"
    INTERRUPTED = "interrupted"
    DONE = "done"


@dataclass(frozen=True)
class CountdownResult:
    state: CountdownState
    elapsed: int
    duration: int

    @property
    def exit_code(self) -> int:
        if self.state is CountdownState.INTERRUPTED:
            return EXIT_INTERRUPTED
        return EXIT_OK


def run_countdown(duration: int, latch: InterruptLatch, sleeper: Sleeper, display) -> CountdownResult:
    """
    Wait for `duration` seconds, one unit at a time.

    The latch is checked before each sleep, and the sleeper returns early if it
    is set during one. A partially slept unit is never counted, so an interrupt
    arriving before unit k completes reports k - 1 elapsed seconds.

    Args:
        duration: Total seconds to wait (non-negative)
        latch: Interrupt latch checked before every unit
        sleeper: Object with sleep_one_unit() -> bool
        display: Renderer with header/tick/interrupted/finish methods

    Returns:
        CountdownResult with the terminal state and elapsed seconds
    """
    if duration < 0:
        raise ValueError(f"duration must be non-negative, got {duration}")

    logger.debug(f"Starting countdown of {format_duration(duration)}")
    display.header(duration)

    state = CountdownState.RUNNING
    elapsed = 0
    while state is CountdownState.RUNNING:
        if elapsed >= duration:
            state = CountdownState.DONE
        elif latch.is_set() or not sleeper.sleep_one_unit():
            state = CountdownState.INTERRUPTED
        else:
            elapsed += 1
            display.tick(elapsed, duration)

    logger.debug(f"Countdown {state.value} at {elapsed}/{duration}")

    if state is CountdownState.INTERRUPTED:
        display.interrupted(elapsed, duration)
    else:
        display.finish(duration)

    return CountdownResult(state=state, elapsed=elapsed, duration=duration)
