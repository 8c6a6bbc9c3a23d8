"""Shared helpers for word and puzzle normalization."""

from __future__ import annotations

import re

WHITESPACE_RE = re.compile(r"\s+")


def normalize_word(text: str) -> str:
    """Return ``text`` stripped and lowercased; empty for blank input."""

    if not text:
        return ""
    return text.strip().lower()


def normalize_puzzle(text: str) -> str:
    """Lowercase a puzzle string and drop any whitespace between sides.

    ``"ABC DEF GHI JKL"`` and ``"abcdefghijkl"`` normalize to the same value.
    """

    return WHITESPACE_RE.sub("", text or "").lower()


__all__ = ["normalize_word", "normalize_puzzle"]
