import unittest

from pairsim.utils.similarity import (
    Scores,
    fuzzy_score,
    jaccard,
    jaro_winkler,
    lcs_length,
    score_texts,
)


class JaccardTest(unittest.TestCase):
    def test_identical_strings(self):
        self.assertEqual(1.0, jaccard("hello world", "hello world"))

    def test_uses_distinct_characters(self):
        """Repeated characters do not change the character sets."""
        self.assertEqual(1.0, jaccard("aab", "ab"))

    def test_partial_overlap(self):
        # {a, b, c} vs {a, b, d}: 2 shared out of 4
        self.assertEqual(0.5, jaccard("abc", "abd"))

    def test_disjoint(self):
        self.assertEqual(0.0, jaccard("abc", "xyz"))

    def test_both_empty_is_one(self):
        self.assertEqual(1.0, jaccard("", ""))

    def test_one_empty_is_zero(self):
        self.assertEqual(0.0, jaccard("abc", ""))
        self.assertEqual(0.0, jaccard("", "abc"))

    def test_bounds(self):
        samples = ["", "a", "abc", "hello world", "goodbye", "zzzz", "The quick brown fox"]
        for left in samples:
            for right in samples:
                value = jaccard(left, right)
                self.assertGreaterEqual(value, 0.0)
                self.assertLessEqual(value, 1.0)
                self.assertEqual(value, jaccard(right, left))


class JaroWinklerTest(unittest.TestCase):
    def test_identity(self):
        for text in ["a", "hello world", "MARTHA"]:
            self.assertEqual(1.0, jaro_winkler(text, text))

    def test_both_empty_is_one(self):
        self.assertEqual(1.0, jaro_winkler("", ""))

    def test_one_empty_is_zero(self):
        self.assertEqual(0.0, jaro_winkler("abc", ""))
        self.assertEqual(0.0, jaro_winkler("", "abc"))

    def test_no_common_characters(self):
        self.assertEqual(0.0, jaro_winkler("abc", "xyz"))

    def test_martha_marhta(self):
        """Jaro 0.944444 with a 3 character prefix boost."""
        self.assertAlmostEqual(0.961111, jaro_winkler("MARTHA", "MARHTA"), places=6)

    def test_dixon_dicksonx(self):
        """Jaro 0.766667 with a 2 character prefix boost."""
        self.assertAlmostEqual(0.813333, jaro_winkler("DIXON", "DICKSONX"), places=6)

    def test_odd_transposition_count_is_halved_exactly(self):
        """Three mismatched positions count as 1.5 transpositions, not 1."""
        self.assertAlmostEqual(2.75 / 3, jaro_winkler("abcxyz", "bcaxyz"), places=12)

    def test_no_boost_below_threshold(self):
        """A Jaro value of 0.5 is returned as is despite the common prefix."""
        self.assertAlmostEqual(0.5, jaro_winkler("abcdefgh", "abxxxxxx"), places=12)

    def test_bounds(self):
        samples = ["a", "ab", "abc", "hello world", "goodbye", "world hello", "xyz"]
        for left in samples:
            for right in samples:
                value = jaro_winkler(left, right)
                self.assertGreaterEqual(value, 0.0)
                self.assertLessEqual(value, 1.0)


class LcsLengthTest(unittest.TestCase):
    def test_classic_example(self):
        self.assertEqual(4, lcs_length("ABCBDAB", "BDCABA"))

    def test_identity(self):
        for text in ["", "a", "hello world"]:
            self.assertEqual(len(text), lcs_length(text, text))

    def test_empty(self):
        self.assertEqual(0, lcs_length("abc", ""))
        self.assertEqual(0, lcs_length("", ""))

    def test_bounded_by_shorter_string(self):
        samples = ["", "a", "abc", "hello world", "goodbye", "yellow wood"]
        for left in samples:
            for right in samples:
                self.assertLessEqual(lcs_length(left, right), min(len(left), len(right)))


class FuzzyScoreTest(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(0, fuzzy_score("", ""))
        self.assertEqual(0, fuzzy_score("Workshop", ""))

    def test_no_match(self):
        self.assertEqual(0, fuzzy_score("Workshop", "b"))

    def test_single_match(self):
        self.assertEqual(1, fuzzy_score("Room", "o"))
        self.assertEqual(1, fuzzy_score("Workshop", "w"))

    def test_non_adjacent_matches(self):
        self.assertEqual(2, fuzzy_score("Workshop", "ws"))

    def test_adjacent_matches_earn_bonus(self):
        self.assertEqual(4, fuzzy_score("Workshop", "wo"))

    def test_acronym(self):
        self.assertEqual(3, fuzzy_score("Apache Software Foundation", "asf"))

    def test_case_insensitive(self):
        # 1 point for each of the 5 characters, 2 bonus points for 4 adjacencies
        self.assertEqual(13, fuzzy_score("HELLO", "hello"))

    def test_term_is_scanned_only_once(self):
        """Once the term is exhausted, later query characters score nothing."""
        self.assertEqual(1, fuzzy_score("ab", "ba"))

    def test_not_symmetric(self):
        self.assertEqual(2, fuzzy_score("abc", "ac"))
        self.assertEqual(1, fuzzy_score("ac", "abc"))


class ScoreTextsTest(unittest.TestCase):
    def test_identical_texts(self):
        scores = score_texts("hello world", "hello world")

        self.assertIsInstance(scores, Scores)
        self.assertEqual(1.0, scores.jaccard)
        self.assertEqual(1.0, scores.jaro_winkler)
        self.assertEqual(11, scores.lcs_length)
        self.assertEqual(31, scores.fuzzy_score)

    def test_fuzzy_score_uses_left_as_term(self):
        scores = score_texts("Workshop", "wo")
        self.assertEqual(fuzzy_score("Workshop", "wo"), scores.fuzzy_score)


if __name__ == '__main__':
    unittest.main()
