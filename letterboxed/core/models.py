"""Data models for puzzles and solutions."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import product
from typing import FrozenSet, Iterator, Tuple

from ..data.normalization import normalize_puzzle
from .constants import PUZZLE_LENGTH, SIDE_SLICES
from .exceptions import InvalidPuzzleLength

BigramKey = Tuple[str, str]


@dataclass(frozen=True)
class Puzzle:
    """Twelve letters split into four sides of three.

    Letters on the same side may never touch inside a word, which includes a
    letter followed by itself.
    """

    text: str
    sides: Tuple[str, ...] = field(init=False, repr=False, compare=False)
    letters: Tuple[str, ...] = field(init=False, repr=False, compare=False)
    alphabet: FrozenSet[str] = field(init=False, repr=False, compare=False)
    forbidden_pairs: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", self.text.lower())
        if len(self.text) != PUZZLE_LENGTH:
            raise InvalidPuzzleLength(self.text, PUZZLE_LENGTH)
        sides = tuple(self.text[s] for s in SIDE_SLICES)
        forbidden = frozenset(
            a + b for side in sides for a, b in product(side, repeat=2)
        )
        # frozen dataclass: derived fields are written through object.__setattr__
        object.__setattr__(self, "sides", sides)
        object.__setattr__(self, "letters", tuple(dict.fromkeys(self.text)))
        object.__setattr__(self, "alphabet", frozenset(self.text))
        object.__setattr__(self, "forbidden_pairs", forbidden)

    @classmethod
    def from_string(cls, text: str) -> "Puzzle":
        """Normalize ``text`` and build a puzzle, rejecting wrong lengths."""
        return cls(normalize_puzzle(text))

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Solution:
    """An ordered chain of words covering every puzzle letter."""

    words: Tuple[str, ...]

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)

    @property
    def letters_used(self) -> FrozenSet[str]:
        return frozenset("".join(self.words))

    def is_chained(self) -> bool:
        """True when each word starts with the previous word's last letter."""
        return all(
            prev[-1] == nxt[0] for prev, nxt in zip(self.words, self.words[1:])
        )
