"""Progress reporting for the comparison sweep."""

import sys
from decimal import Decimal, ROUND_HALF_UP
from typing import TextIO

PERCENT_DECIMALS = Decimal('0.01')


def format_percent(value: float) -> str:
    """Two decimals, rounding half up from the shortest decimal form of value."""
    return str(Decimal(repr(value)).quantize(PERCENT_DECIMALS, rounding=ROUND_HALF_UP))


class ProgressReporter:
    """Percentage indicator rewritten in place on a single console line.

    Called with (visited, total) after every ordered pair the driver visits.
    """

    def __init__(self, file: TextIO | None = None):
        self.file = file or sys.stdout

    def __call__(self, visited: int, total: int) -> None:
        if total > 0:
            print(f"\r{format_percent(visited / total * 100)}%", end='', file=self.file, flush=True)

    def finish(self) -> None:
        """Separate the progress line from subsequent output with a blank line."""
        print('\n', file=self.file)


class NullProgress:
    """No-op progress reporter for silent operation."""

    def __call__(self, visited: int, total: int) -> None:
        pass

    def finish(self) -> None:
        pass
