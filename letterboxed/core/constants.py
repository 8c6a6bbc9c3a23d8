"""Shared constants for the Letter Boxed solver."""

from __future__ import annotations

from typing import Tuple

SIDE_COUNT = 4
SIDE_LENGTH = 3
PUZZLE_LENGTH = SIDE_COUNT * SIDE_LENGTH

# Word-count bounds for a solution; a chain holds one more letter than words.
MIN_WORDS = 2
MAX_WORDS = 4

MIN_WORD_LENGTH = 3

SIDE_SLICES: Tuple[slice, ...] = tuple(
    slice(i * SIDE_LENGTH, (i + 1) * SIDE_LENGTH) for i in range(SIDE_COUNT)
)
