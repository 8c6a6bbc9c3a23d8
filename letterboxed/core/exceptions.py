"""Custom exception hierarchy for Letter Boxed solving."""


class LetterBoxedError(Exception):
    """Base exception for solver failures."""


class InvalidPuzzleLength(LetterBoxedError, ValueError):
    """Raised when a puzzle string is not exactly twelve letters."""

    def __init__(self, puzzle: str, expected: int) -> None:
        super().__init__(
            f"Puzzle {puzzle!r} has {len(puzzle)} letters, expected {expected}"
        )
        self.puzzle = puzzle
        self.expected = expected


class NoSolutionFound(LetterBoxedError):
    """Raised when every chain was explored without covering the puzzle."""

    def __init__(self, puzzle: str, min_words: int, max_words: int) -> None:
        super().__init__(
            f"No solution found for {puzzle!r} using {min_words}-{max_words} words"
        )
        self.puzzle = puzzle
        self.min_words = min_words
        self.max_words = max_words


class SearchAborted(LetterBoxedError):
    """Raised when a search hits its timeout, chain cap or cancel hook."""

    def __init__(self, reason: str, chains_explored: int) -> None:
        super().__init__(f"Search aborted ({reason}) after {chains_explored} chains")
        self.reason = reason
        self.chains_explored = chains_explored


class DictionaryLoadError(LetterBoxedError):
    """Raised when the word list cannot be read."""
