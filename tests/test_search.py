import itertools
import random
import unittest
from unittest.mock import patch

from letterboxed.core.exceptions import SearchAborted
from letterboxed.core.models import Puzzle
from letterboxed.engine.index import build_index
from letterboxed.engine.search import ChainSearch, SearchConfig, covers, generate_chains, search
from letterboxed.engine.validator import is_valid_word

PUZZLE = Puzzle("abcdefghijkl")
TWO_WORD = ("adgjbe", "ehkcfil")
ALT_TWO_WORD = ("lifckhe", "ebjgda")
THREE_WORD = ("adgj", "jbeh", "hkcfil")
FOUR_WORD = ("adg", "gjb", "beh", "hkcfil")


class GenerateChainsTests(unittest.TestCase):
    def test_full_product_in_shuffled_order(self) -> None:
        letters = PUZZLE.letters
        chains = generate_chains(letters, 3, random.Random(1))
        self.assertEqual(len(chains), 12 ** 3)
        self.assertEqual(set(chains), set(itertools.product(letters, repeat=3)))
        self.assertNotEqual(chains, list(itertools.product(letters, repeat=3)))

    def test_covers_needs_every_letter(self) -> None:
        self.assertTrue(covers(TWO_WORD, PUZZLE.alphabet))
        self.assertFalse(covers(THREE_WORD[:2], PUZZLE.alphabet))


class ChainSearchTests(unittest.TestCase):
    def assertValidSolution(self, words) -> None:
        for word in words:
            self.assertTrue(is_valid_word(word, PUZZLE), word)
        for prev, nxt in zip(words, words[1:]):
            self.assertEqual(prev[-1], nxt[0])
        self.assertEqual(set("".join(words)), set(PUZZLE.text))

    def test_finds_two_word_solution(self) -> None:
        index = build_index(list(TWO_WORD), PUZZLE)
        solution = search(index, PUZZLE, SearchConfig(seed=3))
        self.assertIsNotNone(solution)
        assert solution is not None
        self.assertEqual(solution.words, TWO_WORD)
        self.assertValidSolution(solution.words)

    def test_prefers_fewer_words(self) -> None:
        index = build_index(list(THREE_WORD + TWO_WORD), PUZZLE)
        for seed in range(5):
            solution = search(index, config=SearchConfig(seed=seed))
            assert solution is not None
            self.assertEqual(solution.words, TWO_WORD)

    def test_falls_through_to_three_words(self) -> None:
        index = build_index(list(THREE_WORD), PUZZLE)
        solution = search(index, config=SearchConfig(seed=0))
        assert solution is not None
        self.assertEqual(solution.words, THREE_WORD)
        self.assertTrue(solution.is_chained())

    def test_finds_four_word_solution(self) -> None:
        index = build_index(list(FOUR_WORD), PUZZLE)
        solution = search(index, config=SearchConfig(seed=0))
        assert solution is not None
        self.assertEqual(solution.words, FOUR_WORD)

    def test_depth_limit_is_respected(self) -> None:
        index = build_index(list(FOUR_WORD), PUZZLE)
        self.assertIsNone(search(index, config=SearchConfig(max_words=3, seed=0)))

    def test_exhausted_search_returns_none(self) -> None:
        index = build_index(["adgj", "jbeh"], PUZZLE)
        search_run = ChainSearch(index, SearchConfig(seed=0))
        self.assertIsNone(search_run.run())
        self.assertEqual(search_run.chains_explored, 12 ** 3 + 12 ** 4 + 12 ** 5)

    def test_same_seed_same_solution(self) -> None:
        index = build_index(list(TWO_WORD + ALT_TWO_WORD), PUZZLE)
        first = search(index, config=SearchConfig(seed=11))
        second = search(index, config=SearchConfig(seed=11))
        self.assertEqual(first, second)

    def test_search_order_varies_between_runs(self) -> None:
        index = build_index(list(TWO_WORD + ALT_TWO_WORD), PUZZLE)
        found = set()
        for seed in range(40):
            solution = search(index, config=SearchConfig(seed=seed))
            assert solution is not None
            self.assertValidSolution(solution.words)
            found.add(solution.words)
        self.assertEqual(found, {TWO_WORD, ALT_TWO_WORD})

    def test_rejects_mismatched_puzzle(self) -> None:
        index = build_index(list(TWO_WORD), PUZZLE)
        with self.assertRaises(ValueError):
            search(index, Puzzle("mnopqrstuvwx"))


class SearchLimitTests(unittest.TestCase):
    def setUp(self) -> None:
        self.index = build_index(["adgj", "jbeh"], PUZZLE)

    def test_chain_cap_aborts(self) -> None:
        with self.assertRaises(SearchAborted) as ctx:
            search(self.index, config=SearchConfig(max_chains=100, seed=0))
        self.assertEqual(ctx.exception.chains_explored, 100)
        self.assertEqual(ctx.exception.reason, "chain limit reached")

    def test_cancel_hook_aborts(self) -> None:
        calls = []

        def should_cancel() -> bool:
            calls.append(1)
            return len(calls) > 10

        with self.assertRaises(SearchAborted) as ctx:
            search(self.index, config=SearchConfig(should_cancel=should_cancel, seed=0))
        self.assertEqual(ctx.exception.reason, "cancelled")
        self.assertEqual(ctx.exception.chains_explored, 10)

    def test_timeout_aborts(self) -> None:
        clock = itertools.chain([0.0], itertools.repeat(100.0))
        with patch("letterboxed.engine.search.time.monotonic", side_effect=clock):
            with self.assertRaises(SearchAborted) as ctx:
                search(self.index, config=SearchConfig(timeout_seconds=5.0, seed=0))
        self.assertEqual(ctx.exception.reason, "timeout")


class SearchConfigTests(unittest.TestCase):
    def test_single_word_solutions_not_allowed(self) -> None:
        with self.assertRaises(ValueError):
            SearchConfig(min_words=1)

    def test_max_below_min_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SearchConfig(min_words=3, max_words=2)

    def test_non_positive_timeout_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SearchConfig(timeout_seconds=0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
