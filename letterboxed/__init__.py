"""Letter Boxed puzzle solver.

This package exposes the public API surface via:

- ``letterboxed.engine.solver.LetterBoxedSolver``: indexes a word list per
  puzzle and drives the chain search.
- ``letterboxed.engine.index.build_index``: buckets legal words by entry and
  exit letter.
- ``letterboxed.data.dictionary.WordDictionary``: loads word lists from disk
  or over HTTP.
"""

from .core.exceptions import (DictionaryLoadError, InvalidPuzzleLength, LetterBoxedError,
                              NoSolutionFound, SearchAborted)
from .core.models import Puzzle, Solution
from .data.dictionary import DictionaryConfig, WordDictionary
from .engine.index import BigramIndex, build_index
from .engine.search import ChainSearch, SearchConfig, search
from .engine.solver import LetterBoxedSolver, solve, solve_many
from .engine.validator import WordValidator, is_valid_word

__all__ = [
    "BigramIndex",
    "ChainSearch",
    "DictionaryConfig",
    "DictionaryLoadError",
    "InvalidPuzzleLength",
    "LetterBoxedError",
    "LetterBoxedSolver",
    "NoSolutionFound",
    "Puzzle",
    "SearchAborted",
    "SearchConfig",
    "Solution",
    "WordDictionary",
    "WordValidator",
    "build_index",
    "is_valid_word",
    "search",
    "solve",
    "solve_many",
]

__version__ = "0.1.0"
