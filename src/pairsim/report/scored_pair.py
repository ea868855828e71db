"""ScoredPair and the canonical key used to identify an unordered pair of files."""

from pathlib import Path

from ..utils.similarity import Scores


def pair_key(first: Path, second: Path) -> tuple[Path, Path]:
    """Return the canonical key of the unordered pair {first, second}.

    The two paths are sorted so that pair_key(a, b) == pair_key(b, a).
    """
    if second < first:
        return second, first
    return first, second


class ScoredPair:
    """Similarity scores of two distinct files.

    A ScoredPair identifies an unordered pair: ScoredPair(a, b, ...) and
    ScoredPair(b, a, ...) compare equal and hash the same, whatever their scores.
    The value is immutable; it is created only once all four scores are known.

    Attributes:
        first: Source file of the comparison that produced the scores.
        second: Destination file of that comparison.
        jaccard: Character-set Jaccard index, in [0, 1].
        jaro_winkler: Jaro-Winkler similarity, in [0, 1].
        lcs_length: Length of the longest common subsequence.
        fuzzy_score: Fuzzy match score of the destination against the source.
    """

    __slots__ = ('_first', '_second', '_jaccard', '_jaro_winkler', '_lcs_length', '_fuzzy_score')

    def __init__(self, first: Path, second: Path, *, jaccard: float, jaro_winkler: float,
                 lcs_length: int, fuzzy_score: int):
        if first == second:
            raise ValueError(f"a file cannot be paired with itself: {first}")

        self._first = first
        self._second = second
        self._jaccard = jaccard
        self._jaro_winkler = jaro_winkler
        self._lcs_length = lcs_length
        self._fuzzy_score = fuzzy_score

    @classmethod
    def from_scores(cls, first: Path, second: Path, scores: Scores) -> "ScoredPair":
        return cls(
            first,
            second,
            jaccard=scores.jaccard,
            jaro_winkler=scores.jaro_winkler,
            lcs_length=scores.lcs_length,
            fuzzy_score=scores.fuzzy_score
        )

    @property
    def first(self) -> Path:
        return self._first

    @property
    def second(self) -> Path:
        return self._second

    @property
    def jaccard(self) -> float:
        return self._jaccard

    @property
    def jaro_winkler(self) -> float:
        return self._jaro_winkler

    @property
    def lcs_length(self) -> int:
        return self._lcs_length

    @property
    def fuzzy_score(self) -> int:
        return self._fuzzy_score

    @property
    def key(self) -> tuple[Path, Path]:
        return pair_key(self._first, self._second)

    @property
    def composite(self) -> float:
        """Ranking score: Jaccard plus Jaro-Winkler."""
        return self._jaccard + self._jaro_winkler

    def __eq__(self, other: object) -> bool:
        """Two pairs are equal when they cover the same two files, in any order."""
        if not isinstance(other, ScoredPair):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return (f"ScoredPair({str(self._first)!r}, {str(self._second)!r}, "
                f"jaccard={self._jaccard:.5f}, jaro_winkler={self._jaro_winkler:.5f}, "
                f"lcs_length={self._lcs_length}, fuzzy_score={self._fuzzy_score})")
