"""Top-level solve orchestration: index once, then search."""

from __future__ import annotations

import random
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, Optional, Sequence, Union

from ..core.constants import MIN_WORD_LENGTH
from ..core.exceptions import NoSolutionFound
from ..core.models import Puzzle, Solution
from ..utils.logger import get_logger
from .index import build_index
from .search import ChainSearch, SearchConfig

LOGGER = get_logger(__name__)

PuzzleLike = Union[Puzzle, str]


def _as_puzzle(puzzle: PuzzleLike) -> Puzzle:
    if isinstance(puzzle, Puzzle):
        return puzzle
    return Puzzle.from_string(puzzle)


class LetterBoxedSolver:
    """Solves puzzles against one read-only word list.

    No state is kept between ``solve`` calls apart from the RNG, so a single
    instance can be reused across puzzles.
    """

    def __init__(
        self,
        dictionary: Iterable[str],
        config: Optional[SearchConfig] = None,
        min_word_length: int = MIN_WORD_LENGTH,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.dictionary: Sequence[str] = (
            dictionary if isinstance(dictionary, (list, tuple)) else list(dictionary)
        )
        self.config = config or SearchConfig()
        self.min_word_length = min_word_length
        self.rng = rng or self.config.make_rng()

    def solve(self, puzzle: PuzzleLike) -> Solution:
        puzzle = _as_puzzle(puzzle)
        LOGGER.info("Solving %s (sides %s)", puzzle, " ".join(puzzle.sides))
        index = build_index(self.dictionary, puzzle, self.min_word_length)
        solution = ChainSearch(index, config=self.config, rng=self.rng).run()
        if solution is None:
            raise NoSolutionFound(puzzle.text, self.config.min_words, self.config.max_words)
        return solution


def solve(
    dictionary: Iterable[str],
    puzzle: PuzzleLike,
    config: Optional[SearchConfig] = None,
    min_word_length: int = MIN_WORD_LENGTH,
) -> Solution:
    """Solve one puzzle, raising :class:`NoSolutionFound` on exhaustion."""

    return LetterBoxedSolver(dictionary, config=config, min_word_length=min_word_length).solve(
        puzzle
    )


def solve_many(
    dictionary: Iterable[str],
    puzzles: Iterable[PuzzleLike],
    config: Optional[SearchConfig] = None,
    max_workers: Optional[int] = None,
    min_word_length: int = MIN_WORD_LENGTH,
) -> Dict[str, Optional[Solution]]:
    """Solve independent puzzles concurrently against a shared word list.

    Results are keyed by normalized puzzle text, so inputs that normalize to
    the same letters are solved once. Unsolvable puzzles map to ``None``; any
    other error propagates.
    """

    words = list(dictionary)
    config = config or SearchConfig()
    parsed = list({p.text: p for p in map(_as_puzzle, puzzles)}.values())
    seeder = config.make_rng()
    results: Dict[str, Optional[Solution]] = {}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(
                LetterBoxedSolver(
                    words,
                    config=config,
                    min_word_length=min_word_length,
                    rng=random.Random(seeder.randrange(2**32)),
                ).solve,
                puzzle,
            ): puzzle
            for puzzle in parsed
        }
        for future in as_completed(futures):
            puzzle = futures[future]
            try:
                results[puzzle.text] = future.result()
            except NoSolutionFound as exc:
                LOGGER.info("%s", exc)
                results[puzzle.text] = None
    return results


__all__ = ["LetterBoxedSolver", "solve", "solve_many"]
