import unittest

from pairsim.utils.selection import FileSelection


class FileSelectionTest(unittest.TestCase):
    def test_default_accepts_any_name_with_extension(self):
        selection = FileSelection()

        self.assertTrue(selection("notes.txt"))
        self.assertTrue(selection("archive.tar.gz"))

    def test_name_without_dot_is_never_selected(self):
        self.assertFalse(FileSelection()("Makefile"))

    def test_extension_filter(self):
        selection = FileSelection(['py', 'txt'])

        self.assertTrue(selection("walker.py"))
        self.assertTrue(selection("notes.txt"))
        self.assertFalse(selection("walker.pyc"))
        self.assertFalse(selection("notes.md"))

    def test_name_filter_matches_prefix_then_word_characters(self):
        selection = FileSelection(['py'], ['test_'])

        self.assertTrue(selection("test_walker.py"))
        self.assertTrue(selection("test_.py"))
        self.assertFalse(selection("walker_test.py"))

    def test_name_fragment_must_be_followed_by_word_characters(self):
        selection = FileSelection([], ['test'])

        self.assertTrue(selection("test_cli.py"))
        self.assertFalse(selection("test-cli.py"))

    def test_fragments_are_literal(self):
        selection = FileSelection(['c++'])

        self.assertTrue(selection("main.c++"))
        self.assertFalse(selection("main.cc"))

    def test_from_input_splits_on_whitespace(self):
        selection = FileSelection.from_input("  py \t txt ", "")

        self.assertEqual(['py', 'txt'], selection.extensions)
        self.assertEqual([], selection.names)

    def test_describe(self):
        selection = FileSelection(['py', 'txt'])

        self.assertEqual("py|txt", selection.describe_extensions())
        self.assertEqual(".*", selection.describe_names())


if __name__ == '__main__':
    unittest.main()
