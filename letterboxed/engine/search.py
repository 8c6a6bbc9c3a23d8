"""Randomized chain search over the bigram index.

A chain is a sequence of boundary letters: ``("a", "e", "l")`` asks for one
word from ``a`` to ``e`` followed by one word from ``e`` to ``l``. Chains of a
given length are explored in shuffled order, and shorter solutions are always
tried before longer ones.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from itertools import product
from typing import Callable, List, Optional, Sequence, Tuple

from ..core.constants import MAX_WORDS, MIN_WORDS
from ..core.exceptions import SearchAborted
from ..core.models import Puzzle, Solution
from ..utils.logger import get_logger
from .index import BigramIndex

LOGGER = get_logger(__name__)

Chain = Tuple[str, ...]

# Limits are re-checked this often while walking one chain's word combinations.
_INNER_CHECK_INTERVAL = 4096


@dataclass
class SearchConfig:
    """Search depth and the optional limits a caller can impose."""

    min_words: int = MIN_WORDS
    max_words: int = MAX_WORDS
    seed: Optional[int] = None
    timeout_seconds: Optional[float] = None
    max_chains: Optional[int] = None
    should_cancel: Optional[Callable[[], bool]] = None

    def __post_init__(self) -> None:
        if self.min_words < MIN_WORDS:
            raise ValueError(f"min_words must be at least {MIN_WORDS}, got {self.min_words}")
        if self.max_words < self.min_words:
            raise ValueError(
                f"max_words ({self.max_words}) must not be below min_words ({self.min_words})"
            )
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if self.max_chains is not None and self.max_chains < 0:
            raise ValueError("max_chains must not be negative")

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


def generate_chains(letters: Sequence[str], length: int, rng: random.Random) -> List[Chain]:
    """Every ``length``-letter chain over ``letters``, in random order."""

    chains = list(product(letters, repeat=length))
    rng.shuffle(chains)
    return chains


def covers(words: Sequence[str], alphabet: frozenset) -> bool:
    return set("".join(words)) == alphabet


class ChainSearch:
    """Explores chains of increasing length until one yields a solution."""

    def __init__(
        self,
        index: BigramIndex,
        config: Optional[SearchConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.index = index
        self.puzzle = index.puzzle
        self.config = config or SearchConfig()
        self.rng = rng or self.config.make_rng()
        self.chains_explored = 0
        self._started = 0.0

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def run(self) -> Optional[Solution]:
        self.chains_explored = 0
        self._started = time.monotonic()
        for word_count in range(self.config.min_words, self.config.max_words + 1):
            chains = generate_chains(self.puzzle.letters, word_count + 1, self.rng)
            LOGGER.debug(
                "Searching %d-word solutions across %d chains", word_count, len(chains)
            )
            for chain in chains:
                self._check_limits()
                self.chains_explored += 1
                words = self.solve_chain(chain)
                if words is not None:
                    LOGGER.info(
                        "Found %d-word solution for %s after %d chains",
                        word_count,
                        self.puzzle,
                        self.chains_explored,
                    )
                    return Solution(words)
        LOGGER.info(
            "No solution for %s after %d chains", self.puzzle, self.chains_explored
        )
        return None

    def solve_chain(self, chain: Chain) -> Optional[Tuple[str, ...]]:
        """First word tuple along ``chain`` covering the puzzle, if any."""

        buckets = []
        for key in zip(chain, chain[1:]):
            bucket = self.index.get(key)
            if not bucket:
                return None
            buckets.append(bucket)

        alphabet = self.puzzle.alphabet
        for checked, words in enumerate(product(*buckets), start=1):
            if covers(words, alphabet):
                return words
            if checked % _INNER_CHECK_INTERVAL == 0:
                self._check_limits()
        return None

    # ------------------------------------------------------------------
    # Limits
    # ------------------------------------------------------------------
    def _check_limits(self) -> None:
        config = self.config
        if config.max_chains is not None and self.chains_explored >= config.max_chains:
            self._abort("chain limit reached")
        if (
            config.timeout_seconds is not None
            and time.monotonic() - self._started >= config.timeout_seconds
        ):
            self._abort("timeout")
        if config.should_cancel is not None and config.should_cancel():
            self._abort("cancelled")

    def _abort(self, reason: str) -> None:
        LOGGER.warning(
            "Aborting search for %s: %s (%d chains explored)",
            self.puzzle,
            reason,
            self.chains_explored,
        )
        raise SearchAborted(reason, self.chains_explored)


def search(
    index: BigramIndex,
    puzzle: Optional[Puzzle] = None,
    config: Optional[SearchConfig] = None,
    rng: Optional[random.Random] = None,
) -> Optional[Solution]:
    """Return the first solution found at the smallest word count, or ``None``."""

    if puzzle is not None and puzzle != index.puzzle:
        raise ValueError(f"Index was built for {index.puzzle}, not {puzzle}")
    return ChainSearch(index, config=config, rng=rng).run()


__all__ = ["Chain", "ChainSearch", "SearchConfig", "covers", "generate_chains", "search"]
