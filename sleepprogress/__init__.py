"""sleepprogress - sleep for a number of seconds while showing progress."""

__version__ = "1.0.0"

from sleepprogress.countdown import CountdownConfig, CountdownResult, CountdownState, run_countdown
from sleepprogress.display import CountdownDisplay
from sleepprogress.exit_flag import FORCE_EXIT, InterruptLatch
from sleepprogress.sleeper import CancellableSleeper

__all__ = [
    'CountdownConfig',
    'CountdownResult',
    'CountdownState',
    'run_countdown',
    'CountdownDisplay',
    'FORCE_EXIT',
    'InterruptLatch',
    'CancellableSleeper',
]
