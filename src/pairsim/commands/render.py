"""Rendering of ranked pairs as a bordered text table."""

import shlex
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple

from ..report.scored_pair import ScoredPair

DEFAULT_DIFF_TOOL = 'winmerge'

HEADER_LABELS = ("", "Jaccard", "Jaro", "LCS", "Fuzzy", "File 1", "File 2")

# Width of the Jaccard, Jaro, LCS and Fuzzy columns
SCORE_COLUMN_WIDTH = 7

SCORE_DECIMALS = Decimal('0.00001')


class TableLayout(NamedTuple):
    """Column widths of the result table.

    Attributes:
        rank_width: Digits needed for the number of ordered pairs (n²)
        path_width: Length of the longest absolute path among all discovered files
    """
    rank_width: int
    path_width: int

    @classmethod
    def for_files(cls, paths: Iterable[Path]) -> "TableLayout":
        paths = list(paths)
        return cls(
            rank_width=len(str(len(paths) ** 2)),
            path_width=max((len(str(path.absolute())) for path in paths), default=0)
        )

    @property
    def widths(self) -> tuple[int, ...]:
        return (self.rank_width,) + (SCORE_COLUMN_WIDTH,) * 4 + (self.path_width,) * 2


def format_score(value: float) -> str:
    """Five decimals, rounding half up from the shortest decimal form of value."""
    return str(Decimal(repr(value)).quantize(SCORE_DECIMALS, rounding=ROUND_HALF_UP))


def format_elapsed(seconds: float) -> str:
    return f"{seconds:,.4f} Sec"


def diff_invocation(pair: ScoredPair, diff_tool: str = DEFAULT_DIFF_TOOL) -> str:
    """Command line opening both files of the pair in an external diff tool.

    Paths are quoted for a POSIX shell. Under cmd.exe, as with the default
    winmerge, paths quoted this way must be re-quoted with double quotes.
    """
    return f"{diff_tool}   {shlex.quote(str(pair.first))}  {shlex.quote(str(pair.second))}"


def separator_line(layout: TableLayout) -> str:
    return '+' + '+'.join('-' * (width + 2) for width in layout.widths) + '+'


def _row(cells: Iterable[str], layout: TableLayout) -> str:
    return '|' + ''.join(f" {cell.ljust(width)} |" for cell, width in zip(cells, layout.widths))


def render_table(ranked: Iterable[ScoredPair], layout: TableLayout, *,
                 diff_tool: str = DEFAULT_DIFF_TOOL) -> Iterator[str]:
    """Yield the lines of the result table, one data row per pair in the given order.

    Every data row is followed by a separator and ends with the diff tool
    invocation for its two files.
    """
    separator = separator_line(layout)

    yield separator
    yield _row(HEADER_LABELS, layout)
    yield separator

    for rank, pair in enumerate(ranked, start=1):
        cells = (
            str(rank),
            format_score(pair.jaccard),
            format_score(pair.jaro_winkler),
            str(pair.lcs_length),
            str(pair.fuzzy_score),
            str(pair.first),
            str(pair.second),
        )
        yield _row(cells, layout) + ' ' + diff_invocation(pair, diff_tool)
        yield separator
