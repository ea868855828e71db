"""Pairwise comparison sweep over a list of files."""

import logging
import time
from pathlib import Path
from typing import Callable, NamedTuple, Sequence

from ..report.scored_pair import ScoredPair
from ..report.store import PairStore
from ..utils.normalizer import normalize_file
from ..utils.similarity import Scores, score_texts

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class ComparisonError(Exception):
    """Reading or scoring one pair of files failed; the whole run is invalid.

    The underlying exception is available as __cause__.
    """

    def __init__(self, source: Path, destination: Path):
        super().__init__(f"failed to compare {source} with {destination}")
        self.source = source
        self.destination = destination


class ComparisonOutcome(NamedTuple):
    """Result of a completed sweep."""
    pairs: PairStore  # Scored pairs in insertion order
    visited: int  # Ordered pairs visited, always len(paths) ** 2
    elapsed: float  # Wall-clock seconds spent in the sweep


class ComparisonDriver:
    """Scores every unordered pair of distinct files exactly once.

    The driver visits the full ordered cross product of paths, (A, B) as well as
    (B, A) and (A, A). Each visit advances the progress counter; only the first
    visit of each unordered pair of distinct files is scored.
    """

    def __init__(self, paths: Sequence[Path],
                 normalize: Callable[[Path], str] = normalize_file,
                 *,
                 score: Callable[[str, str], Scores] = score_texts,
                 progress: ProgressCallback | None = None):
        """
        Args:
            paths: Files to compare, in traversal order
            normalize: Turns a file into the text that is scored
            score: Computes the metrics for (source text, destination text)
            progress: Called with (visited, total) after every ordered pair
        """
        self._paths = list(paths)
        self._normalize = normalize
        self._score = score
        self._progress = progress
        self._texts: dict[Path, str] = {}
        self._visited = 0

    @property
    def total(self) -> int:
        return len(self._paths) ** 2

    @property
    def visited(self) -> int:
        return self._visited

    def run(self) -> ComparisonOutcome:
        """Execute the sweep.

        Raises:
            ComparisonError: A file could not be read or a metric failed. No
                             result is produced in that case.
        """
        start = time.perf_counter()
        store = PairStore()
        self._visited = 0
        self._texts.clear()

        logger.info(f"Starting comparison of {len(self._paths)} file(s), {self.total} ordered pair(s)")

        for source in self._paths:
            for destination in self._paths:
                self._advance()

                if source == destination or store.contains(source, destination):
                    continue

                store.add(self._compare(source, destination))

        elapsed = time.perf_counter() - start
        logger.info(f"Completed comparison: {len(store)} pair(s) scored in {elapsed:.4f}s")
        return ComparisonOutcome(store, self._visited, elapsed)

    def _advance(self):
        self._visited += 1
        if self._progress is not None:
            self._progress(self._visited, self.total)

    def _compare(self, source: Path, destination: Path) -> ScoredPair:
        try:
            scores = self._score(self._text(source), self._text(destination))
        except Exception as e:
            logger.error(f"Comparison failed: {source} vs {destination}: {e}")
            raise ComparisonError(source, destination) from e

        pair = ScoredPair.from_scores(source, destination, scores)
        logger.debug(f"Scored {pair!r}")
        return pair

    def _text(self, path: Path) -> str:
        text = self._texts.get(path)
        if text is None:
            text = self._texts[path] = self._normalize(path)
        return text


def compare_files(paths: Sequence[Path],
                  normalize: Callable[[Path], str] = normalize_file,
                  *,
                  progress: ProgressCallback | None = None) -> ComparisonOutcome:
    """Score all unordered pairs of distinct files in paths."""
    return ComparisonDriver(paths, normalize, progress=progress).run()
