"""In-memory storage of the scored pairs produced by one comparison run."""

from pathlib import Path
from typing import Iterator

from .scored_pair import ScoredPair, pair_key


class PairStore:
    """Result set keyed by unordered file pair.

    Pairs are kept in insertion order. At most one ScoredPair exists per
    unordered pair of files: a pair for {A, B} blocks a later pair for {B, A}.
    """

    def __init__(self) -> None:
        self._pairs: dict[tuple[Path, Path], ScoredPair] = {}

    def contains(self, first: Path, second: Path) -> bool:
        """Check whether the unordered pair {first, second} has been scored."""
        return pair_key(first, second) in self._pairs

    def get(self, first: Path, second: Path) -> ScoredPair | None:
        return self._pairs.get(pair_key(first, second))

    def add(self, pair: ScoredPair) -> bool:
        """Insert a pair unless its unordered pair is already stored.

        The check and the insertion happen in a single step.

        Returns:
            True if the pair was inserted, False if an equal pair was already present
        """
        stored = self._pairs.setdefault(pair.key, pair)
        return stored is pair

    def ranked(self) -> list[ScoredPair]:
        """Pairs sorted by descending composite score.

        The sort is stable: pairs with equal composite scores keep their
        insertion order.
        """
        return rank(self._pairs.values())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, ScoredPair):
            return item.key in self._pairs
        if isinstance(item, tuple) and len(item) == 2:
            return self.contains(*item)
        return False

    def __iter__(self) -> Iterator[ScoredPair]:
        return iter(self._pairs.values())

    def __len__(self) -> int:
        return len(self._pairs)


def rank(pairs) -> list[ScoredPair]:
    """Sort pairs by descending composite score, keeping input order for ties."""
    return sorted(pairs, key=lambda pair: pair.composite, reverse=True)
