"""Bucket legal words by their entry and exit letters."""

from __future__ import annotations

from itertools import product
from typing import Dict, Iterable, Iterator, List, Tuple

from ..core.constants import MIN_WORD_LENGTH
from ..core.models import BigramKey, Puzzle
from ..utils.logger import get_logger
from .validator import WordValidator

LOGGER = get_logger(__name__)


class BigramIndex:
    """Read-only mapping from ``(first, last)`` to the legal words for it.

    Every ordered pair of puzzle letters has a bucket, possibly empty.
    """

    def __init__(self, puzzle: Puzzle, buckets: Dict[BigramKey, Tuple[str, ...]]) -> None:
        self.puzzle = puzzle
        self._buckets = buckets

    def get(self, key: BigramKey) -> Tuple[str, ...]:
        return self._buckets.get(key, ())

    def __getitem__(self, key: BigramKey) -> Tuple[str, ...]:
        return self._buckets[key]

    def __contains__(self, key: object) -> bool:
        return key in self._buckets

    def __iter__(self) -> Iterator[BigramKey]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def items(self) -> Iterable[Tuple[BigramKey, Tuple[str, ...]]]:
        return self._buckets.items()

    def non_empty_keys(self) -> List[BigramKey]:
        return [key for key, words in self._buckets.items() if words]

    def word_count(self) -> int:
        return sum(len(words) for words in self._buckets.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigramIndex):
            return NotImplemented
        return self.puzzle == other.puzzle and self._buckets == other._buckets


def build_index(
    dictionary: Iterable[str],
    puzzle: Puzzle,
    min_word_length: int = MIN_WORD_LENGTH,
) -> BigramIndex:
    """Scan ``dictionary`` once and bucket each legal word by its ends.

    Words keep their dictionary order inside a bucket. Words shorter than
    ``min_word_length`` are skipped.
    """

    validator = WordValidator(puzzle)
    collected: Dict[BigramKey, List[str]] = {
        key: [] for key in product(puzzle.letters, repeat=2)
    }
    scanned = 0
    for word in dictionary:
        scanned += 1
        if len(word) < min_word_length or not validator.is_valid(word):
            continue
        collected[(word[0], word[-1])].append(word)

    buckets = {key: tuple(words) for key, words in collected.items()}
    index = BigramIndex(puzzle, buckets)
    LOGGER.debug(
        "Indexed %d/%d words for %s into %d non-empty buckets",
        index.word_count(),
        scanned,
        puzzle,
        len(index.non_empty_keys()),
    )
    return index


__all__ = ["BigramIndex", "build_index"]
