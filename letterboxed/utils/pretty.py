"""Pretty-print helpers for puzzles and solutions."""

from __future__ import annotations

import sys
from typing import Optional

from ..core.models import Puzzle, Solution


def format_board(puzzle: Puzzle) -> str:
    """Render the four sides as a square: top, left/right, bottom."""

    top, right, bottom, left = puzzle.sides
    lines = ["    " + "   ".join(top.upper())]
    lines.append("  +" + "-" * 11 + "+")
    for l_char, r_char in zip(left[::-1].upper(), right.upper()):
        lines.append(f"{l_char} |" + " " * 11 + f"| {r_char}")
    lines.append("  +" + "-" * 11 + "+")
    lines.append("    " + "   ".join(bottom[::-1].upper()))
    return "\n".join(lines)


def format_solution(solution: Optional[Solution]) -> str:
    if solution is None:
        return "No solution found"
    return " -> ".join(word.upper() for word in solution)


def print_result(
    puzzle: Puzzle,
    solution: Optional[Solution],
    *,
    show_board: bool = False,
    stream=None,
) -> None:
    """Print the solution line, optionally preceded by the board."""

    stream = stream or sys.stdout
    if show_board:
        print(format_board(puzzle), file=stream)
        print(file=stream)
    print(format_solution(solution), file=stream)
    if solution is not None:
        print(f"  {len(solution)} words, {len(solution.letters_used)} letters", file=stream)
