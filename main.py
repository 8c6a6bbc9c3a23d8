"""CLI entrypoint for the Letter Boxed solver."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

from letterboxed.core.constants import MAX_WORDS, MIN_WORDS, PUZZLE_LENGTH
from letterboxed.core.exceptions import (DictionaryLoadError, InvalidPuzzleLength,
                                         LetterBoxedError, NoSolutionFound)
from letterboxed.core.models import Puzzle, Solution
from letterboxed.data.dictionary import DictionaryConfig, WordDictionary
from letterboxed.engine.search import SearchConfig
from letterboxed.engine.solver import LetterBoxedSolver
from letterboxed.utils.logger import configure_logging
from letterboxed.utils.pretty import print_result

DICTIONARY_ENV = "LETTERBOXED_DICTIONARY"
DEFAULT_DICTIONARY = Path("/usr/share/dict/words")

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve Letter Boxed puzzles (12 letters, 4 sides of 3)",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=Path(os.environ.get(DICTIONARY_ENV, DEFAULT_DICTIONARY)),
        help=f"Word list, one word per line (default: ${DICTIONARY_ENV} or {DEFAULT_DICTIONARY})",
    )
    parser.add_argument(
        "--dictionary-url",
        type=str,
        default=None,
        help="Download the word list from this URL instead of reading --dictionary",
    )
    parser.add_argument(
        "--puzzle",
        nargs="+",
        metavar="LETTERS",
        help="Puzzle letters, sides in order (e.g. abcdefghijkl). Prompts when omitted.",
    )
    parser.add_argument("--min-words", type=int, default=MIN_WORDS, help="Fewest words to try")
    parser.add_argument("--max-words", type=int, default=MAX_WORDS, help="Most words to try")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Give up on a puzzle after this many seconds",
    )
    parser.add_argument("--board", action="store_true", help="Print the board before the solution")
    parser.add_argument("--json", action="store_true", help="Emit one JSON object per puzzle")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def to_payload(puzzle: Puzzle, solution: Optional[Solution]) -> Dict[str, Any]:
    return {
        "puzzle": puzzle.text,
        "sides": list(puzzle.sides),
        "solution": list(solution.words) if solution is not None else None,
    }


def prompt_puzzles(read: Optional[Callable[[str], str]] = None) -> Iterable[Puzzle]:
    """Yield puzzles typed at the prompt until a blank line or EOF."""

    read = read or input
    while True:
        try:
            text = read("Enter input: ")
        except EOFError:
            return
        if not text.strip():
            return
        try:
            yield Puzzle.from_string(text)
        except InvalidPuzzleLength:
            print("wrong length!")


def run(
    solver: LetterBoxedSolver,
    puzzles: Iterable[Puzzle],
    as_json: bool = False,
    show_board: bool = False,
) -> int:
    exit_code = EXIT_OK
    for puzzle in puzzles:
        try:
            solution: Optional[Solution] = solver.solve(puzzle)
        except NoSolutionFound:
            solution = None
            exit_code = EXIT_NO_SOLUTION
        except LetterBoxedError as exc:
            LOGGER.error("%s", exc)
            solution = None
            exit_code = EXIT_NO_SOLUTION
        if as_json:
            print(json.dumps(to_payload(puzzle, solution)))
        else:
            print_result(puzzle, solution, show_board=show_board)
    return exit_code


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    try:
        search_config = SearchConfig(
            min_words=args.min_words,
            max_words=args.max_words,
            seed=args.seed,
            timeout_seconds=args.timeout,
        )
    except ValueError as exc:
        parser.error(str(exc))

    puzzles: Iterable[Puzzle]
    if args.puzzle:
        try:
            puzzles = [Puzzle.from_string(text) for text in args.puzzle]
        except InvalidPuzzleLength as exc:
            parser.error(f"{exc} (puzzles need exactly {PUZZLE_LENGTH} letters)")
    else:
        puzzles = prompt_puzzles()

    if args.dictionary_url:
        dictionary_config = DictionaryConfig(url=args.dictionary_url)
    else:
        dictionary_config = DictionaryConfig(path=args.dictionary)
    try:
        dictionary = WordDictionary(dictionary_config)
    except DictionaryLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    solver = LetterBoxedSolver(dictionary, config=search_config)
    return run(solver, puzzles, as_json=args.json, show_board=args.board)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
