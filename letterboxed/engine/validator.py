"""Per-word legality checks for a puzzle."""

from __future__ import annotations

from ..core.models import Puzzle


class WordValidator:
    """Decides whether a word may appear in any solution for ``puzzle``.

    A word is legal when every character is a puzzle letter and no two
    consecutive characters share a side.
    """

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        self._alphabet = puzzle.alphabet
        self._forbidden = puzzle.forbidden_pairs

    def uses_puzzle_letters(self, word: str) -> bool:
        return bool(word) and all(char in self._alphabet for char in word)

    def has_forbidden_pair(self, word: str) -> bool:
        return any(word[i : i + 2] in self._forbidden for i in range(len(word) - 1))

    def is_valid(self, word: str) -> bool:
        return self.uses_puzzle_letters(word) and not self.has_forbidden_pair(word)

    __call__ = is_valid


def is_valid_word(word: str, puzzle: Puzzle) -> bool:
    """Return ``True`` when ``word`` is legal for ``puzzle``."""

    return WordValidator(puzzle).is_valid(word)


__all__ = ["WordValidator", "is_valid_word"]
