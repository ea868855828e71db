import logging
import sys
import time
from pathlib import Path
from typing import TextIO

from .commands.compare import ComparisonDriver, ComparisonOutcome
from .commands.render import DEFAULT_DIFF_TOOL, TableLayout, format_elapsed, render_table
from .utils.progress import NullProgress, ProgressReporter
from .utils.selection import FileSelection
from .utils.walker import discover_files

logger = logging.getLogger(__name__)

SUMMARY_LABEL_WIDTH = 20
SUMMARY_RULE = '=' * 100


class ScanSession:
    """One scan of a directory tree: discovery, pairwise comparison and the report.

    The session owns the output stream. Nothing is written to it past the
    progress indicator when the comparison fails, so a failed run never prints
    a partial table.

    Example:
        session = ScanSession(Path('src'), FileSelection(['py']))
        session.print_summary()
        session.run()
    """

    def __init__(self, root: str | Path, selection: FileSelection | None = None, *,
                 diff_tool: str = DEFAULT_DIFF_TOOL, show_progress: bool = True,
                 output: TextIO | None = None):
        """
        Args:
            root: Directory to scan recursively
            selection: Filename filter; None selects every file
            diff_tool: Tool named in the per-row diff invocation
            show_progress: Print the percentage indicator during the sweep
            output: Report stream (default: sys.stdout)
        """
        self.root = Path(root)
        self.selection = selection if selection is not None else FileSelection()
        self.diff_tool = diff_tool
        self.output = output or sys.stdout
        self._progress = ProgressReporter(self.output) if show_progress else NullProgress()

    def print_summary(self):
        """Print the scan parameters ahead of the run."""
        self._print("Summary:")
        self._print(f"{'Directory Path: ':>{SUMMARY_LABEL_WIDTH}}{self.root}")
        self._print(f"{'File Extension(s): ':>{SUMMARY_LABEL_WIDTH}}{self.selection.describe_extensions()}")
        self._print(f"{'File Name(s): ':>{SUMMARY_LABEL_WIDTH}}{self.selection.describe_names()}")
        self._print(SUMMARY_RULE + '\n')

    def discover(self) -> list[Path]:
        return discover_files(self.root, self.selection)

    def run(self) -> ComparisonOutcome:
        """Compare every pair of selected files and print the ranked table.

        Raises:
            ComparisonError: A file could not be read or scored.
        """
        start = time.perf_counter()

        files = self.discover()
        outcome = ComparisonDriver(files, progress=self._progress).run()
        self._progress.finish()

        layout = TableLayout.for_files(files)
        for line in render_table(outcome.pairs.ranked(), layout, diff_tool=self.diff_tool):
            self._print(line)

        self._print(format_elapsed(time.perf_counter() - start))
        return outcome

    def _print(self, line: str):
        print(line, file=self.output)
