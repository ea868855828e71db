"""String similarity metrics used to score a pair of normalized files.

All functions are stateless and take two strings. Their numeric results are
part of the ranking contract, so each follows one reference definition exactly:

- jaccard: character-set Jaccard index
- jaro_winkler: Jaro similarity with the Winkler common-prefix boost
- lcs_length: length of the longest common subsequence
- fuzzy_score: in-order subsequence match score with adjacency bonus
"""
from typing import NamedTuple

from rapidfuzz.distance import LCSseq

# Winkler boost constants
WINKLER_SCALING_FACTOR = 0.1
WINKLER_BOOST_THRESHOLD = 0.7
WINKLER_PREFIX_LIMIT = 4

# Bonus awarded by fuzzy_score when a match directly follows the previous one
FUZZY_ADJACENCY_BONUS = 2


class Scores(NamedTuple):
    """All four metric values for one pair of strings."""
    jaccard: float
    jaro_winkler: float
    lcs_length: int
    fuzzy_score: int


def jaccard(left: str, right: str) -> float:
    """Jaccard index of the distinct characters of both strings.

    Two empty strings are considered identical (1.0). A single empty string
    shares nothing with the other one (0.0).
    """
    if not left and not right:
        return 1.0
    if not left or not right:
        return 0.0

    left_set = set(left)
    right_set = set(right)
    union_size = len(left_set | right_set)
    intersection_size = len(left_set) + len(right_set) - union_size
    return 1.0 * intersection_size / union_size


def _jaro_matches(left: str, right: str) -> tuple[int, int, int]:
    """Count matching characters, half-transpositions and common prefix length.

    The shorter string drives the search; each of its characters claims the
    first unclaimed equal character of the longer string inside the matching
    window.
    """
    if len(left) > len(right):
        longer, shorter = left, right
    else:
        longer, shorter = right, left

    window = max(len(longer) // 2 - 1, 0)
    claimed = [False] * len(longer)
    matched_in_shorter: list[str] = []

    for index, char in enumerate(shorter):
        start = max(index - window, 0)
        stop = min(index + window + 1, len(longer))
        for candidate in range(start, stop):
            if not claimed[candidate] and longer[candidate] == char:
                claimed[candidate] = True
                matched_in_shorter.append(char)
                break

    matched_in_longer = [char for char, flag in zip(longer, claimed) if flag]
    half_transpositions = sum(1 for a, b in zip(matched_in_shorter, matched_in_longer) if a != b)

    prefix = 0
    for a, b in zip(left[:min(WINKLER_PREFIX_LIMIT, len(shorter))], right):
        if a != b:
            break
        prefix += 1

    return len(matched_in_shorter), half_transpositions, prefix


def jaro_winkler(left: str, right: str) -> float:
    """Jaro-Winkler similarity in the range [0, 1].

    Equal strings, including two empty strings, score 1.0. Strings without any
    matching character score 0.0. The prefix boost is applied only when the
    plain Jaro similarity reaches 0.7.
    """
    if left == right:
        return 1.0

    matches, half_transpositions, prefix = _jaro_matches(left, right)
    if matches == 0:
        return 0.0

    m = float(matches)
    jaro = (m / len(left) + m / len(right) + (m - half_transpositions / 2) / m) / 3
    if jaro < WINKLER_BOOST_THRESHOLD:
        return jaro
    return jaro + WINKLER_SCALING_FACTOR * prefix * (1.0 - jaro)


def lcs_length(left: str, right: str) -> int:
    """Length of the longest (not necessarily contiguous) common subsequence."""
    return LCSseq.similarity(left, right)


def fuzzy_score(term: str, query: str) -> int:
    """Score how well ``query`` matches ``term`` as an in-order subsequence.

    Matching is case-insensitive. The term is scanned once from left to right:
    every query character found earns one point, and two more when it sits
    right after the previously matched term character.
    """
    term = term.lower()
    query = query.lower()

    score = 0
    term_index = 0
    previous_match = None

    for query_char in query:
        while term_index < len(term):
            term_char = term[term_index]
            term_index += 1
            if query_char == term_char:
                score += 1
                if previous_match is not None and previous_match + 1 == term_index - 1:
                    score += FUZZY_ADJACENCY_BONUS
                previous_match = term_index - 1
                break

    return score


def score_texts(left: str, right: str) -> Scores:
    """Compute every metric for two normalized texts."""
    return Scores(
        jaccard=jaccard(left, right),
        jaro_winkler=jaro_winkler(left, right),
        lcs_length=lcs_length(left, right),
        fuzzy_score=fuzzy_score(left, right),
    )
