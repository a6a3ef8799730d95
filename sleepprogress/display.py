"""Display module for countdown progress using rich."""

import math
from datetime import datetime
from typing import Callable, Optional

from rich.console import Console
from rich.segment import Segment
from rich.text import Text

from sleepprogress.countdown import CountdownConfig
from sleepprogress.timefmt import clock_time, eta, plural


class CarriageReturn:
    """Return the cursor to column 0, even when output is not a terminal."""

    def __rich_console__(self, console, options):
        yield Segment("\r")


def bar_fill(elapsed: int, duration: int, width: int) -> int:
    """Number of filled cells; a zero duration counts as complete."""
    if duration <= 0:
        return width
    return min(width, math.floor(width * elapsed / duration))


def percentage(elapsed: int, duration: int) -> int:
    """Completion percentage rounded and clamped to 0-100."""
    if duration <= 0:
        return 100
    return max(0, min(100, round(100 * elapsed / duration)))


class CountdownDisplay:
    """Render countdown progress to the terminal."""

    def __init__(
        self,
        config: CountdownConfig,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.config = config
        self.console = console or Console(highlight=False, no_color=not config.colorize)
        self.err_console = err_console or Console(stderr=True, highlight=False, no_color=not config.colorize)
        self.now = now
        # Single-line mode leaves the cursor at the end of an unterminated line
        self.line_open = False
        self.line_width = 0
        self.elapsed = 0

    def _style(self, style: str) -> str:
        return style if self.config.colorize else ""

    def progress_text(self, elapsed: int, duration: int) -> Text:
        """Build the progress line for one tick."""
        text = Text()
        if self.config.show_bar:
            width = self.config.bar_width
            filled = bar_fill(elapsed, duration, width)
            text.append("[")
            text.append("#" * filled, style=self._style("green"))
            text.append("-" * (width - filled), style=self._style("dim"))
            text.append(f"] {percentage(elapsed, duration):3d}% ")
        text.append(f"Elapsed: {elapsed} s | Remaining: {duration - elapsed} s")
        return text

    def header(self, duration: int):
        """Print the start banner before the first tick."""
        if self.config.show_header_times:
            start = self.now()
            self.console.print(
                Text(f"Started at {clock_time(start)}, ETA {clock_time(eta(start, duration))}", style=self._style("dim"))
            )

        banner = f"Sleeping for {plural(duration, 'second')}..."
        if self.config.multiline:
            self.console.print(banner)
        else:
            self.console.print(banner + " ", end="")
            self.line_open = True
            self.line_width = len(banner) + 1

    def tick(self, elapsed: int, duration: int):
        """Render progress after a completed unit."""
        self.elapsed = elapsed
        if self.config.quiet:
            return

        line = self.progress_text(elapsed, duration)
        if self.config.multiline:
            self.console.print(line, soft_wrap=True)
        else:
            # \r does not clear the line; pad over the leftovers
            if line.cell_len < self.line_width:
                line.append(" " * (self.line_width - line.cell_len))
            self.console.print(CarriageReturn(), line, sep="", end="", soft_wrap=True)
            self.line_open = True
            self.line_width = line.cell_len

    def _close_line(self):
        if self.line_open:
            self.console.print()
            self.line_open = False
            self.line_width = 0

    def interrupted(self, elapsed: int, duration: int):
        """Report an interrupted run on stderr."""
        self._close_line()
        self.err_console.print(Text(f"Interrupted at {elapsed}/{duration} seconds.", style=self._style("red")))

    def finish(self, duration: int):
        """Print the completion summary."""
        self._close_line()
        self.console.print(Text(f"Done. Slept for {plural(duration, 'second')}.", style=self._style("green")))

    def warn(self, message: str):
        self.err_console.print(Text(f"WARNING: {message}", style=self._style("yellow")))
