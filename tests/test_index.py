import unittest

from letterboxed.core.models import Puzzle
from letterboxed.engine.index import build_index
from letterboxed.engine.validator import is_valid_word


class BigramIndexTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = Puzzle("abcdefghijkl")
        self.dictionary = ["face", "lake", "keg", "gab", "lid", "ladle", "zeal", "ah"]

    def test_has_bucket_for_every_letter_pair(self) -> None:
        index = build_index(self.dictionary, self.puzzle)
        self.assertEqual(len(index), 144)
        self.assertIn(("a", "a"), index)
        self.assertEqual(index[("a", "a")], ())

    def test_invalid_words_are_excluded(self) -> None:
        index = build_index(self.dictionary, self.puzzle)
        indexed = {word for _, words in index.items() for word in words}
        self.assertNotIn("gab", indexed)
        self.assertNotIn("face", indexed)
        self.assertNotIn("zeal", indexed)

    def test_valid_words_bucketed_by_ends(self) -> None:
        index = build_index(self.dictionary, self.puzzle)
        self.assertEqual(index.get(("l", "e")), ("lake", "ladle"))
        self.assertEqual(index.get(("k", "g")), ("keg",))
        self.assertEqual(index.get(("l", "d")), ("lid",))

    def test_each_valid_word_lands_in_exactly_one_bucket(self) -> None:
        index = build_index(self.dictionary, self.puzzle)
        for word in self.dictionary:
            hits = [key for key, words in index.items() if word in words]
            if len(word) >= 3 and is_valid_word(word, self.puzzle):
                self.assertEqual(hits, [(word[0], word[-1])])
            else:
                self.assertEqual(hits, [])

    def test_short_words_skipped(self) -> None:
        index = build_index(["ah"], self.puzzle)
        self.assertEqual(index.get(("a", "h")), ())
        relaxed = build_index(["ah"], self.puzzle, min_word_length=2)
        self.assertEqual(relaxed.get(("a", "h")), ("ah",))

    def test_bucket_keeps_dictionary_order(self) -> None:
        index = build_index(["lie", "lake", "lke", "lhe"], self.puzzle)
        self.assertEqual(index.get(("l", "e")), ("lie", "lake", "lhe"))

    def test_rebuild_is_identical(self) -> None:
        self.assertEqual(
            build_index(self.dictionary, self.puzzle),
            build_index(self.dictionary, self.puzzle),
        )

    def test_empty_dictionary_gives_empty_buckets(self) -> None:
        index = build_index([], self.puzzle)
        self.assertEqual(index.word_count(), 0)
        self.assertEqual(index.non_empty_keys(), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
