"""Lightweight HTTP client for downloading plain-text word lists."""

from __future__ import annotations

import os
from typing import List

import requests

from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class WordListFetchError(RuntimeError):
    """Raised when a remote word list cannot be downloaded."""


class WordListClient:
    """Minimal GET client returning the lines of a remote word list."""

    def __init__(
        self,
        timeout_seconds: float = 30.0,
        user_agent_env: str = "LETTERBOXED_USER_AGENT",
        user_agent: str = "letterboxed-solver",
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.user_agent = os.environ.get(user_agent_env, user_agent)

    def fetch_lines(self, url: str) -> List[str]:
        """Download ``url`` and return its body split into lines."""
        LOGGER.info("Downloading word list from %s", url)
        try:
            response = requests.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise WordListFetchError(f"Word list request failed: {exc}") from exc

        lines = response.text.splitlines()
        if not lines:
            LOGGER.warning("Word list at %s is empty", url)
        return lines
