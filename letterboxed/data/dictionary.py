"""Word list loading."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set

from ..core.exceptions import DictionaryLoadError
from ..io.wordlist_client import WordListClient, WordListFetchError
from ..utils.logger import get_logger
from .normalization import normalize_word

LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Where to read the word list from and how to clean it."""

    path: Path | str | None = None
    url: Optional[str] = None
    comment_prefix: str = "#"
    encoding: str = "utf-8"
    timeout_seconds: float = 30.0


def load_words(lines: Iterable[str], comment_prefix: str = "#") -> List[str]:
    """Normalize raw lines into a de-duplicated, order-preserving word list."""

    words: List[str] = []
    seen: Set[str] = set()
    for line in lines:
        word = normalize_word(line)
        if not word or (comment_prefix and word.startswith(comment_prefix)):
            continue
        if word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


class WordDictionary:
    """A read-only, lowercase word list loaded once from a file or URL."""

    def __init__(
        self,
        config: DictionaryConfig,
        client: Optional[WordListClient] = None,
    ) -> None:
        self.config = config
        self._client = client
        self._words: List[str] = []
        self._lookup: Set[str] = set()
        self._load()

    def _load(self) -> None:
        if self.config.path is not None:
            lines = self._read_file(Path(self.config.path))
            source = str(self.config.path)
        elif self.config.url:
            lines = self._fetch(self.config.url)
            source = self.config.url
        else:
            raise DictionaryLoadError("No dictionary path or URL configured")

        self._words = load_words(lines, self.config.comment_prefix)
        self._lookup = set(self._words)
        LOGGER.info("Loaded %d words from %s", len(self._words), source)

    def _read_file(self, source: Path) -> List[str]:
        if not source.exists():
            raise DictionaryLoadError(f"Missing dictionary file: {source}")
        try:
            return source.read_text(encoding=self.config.encoding).splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"Cannot read dictionary {source}: {exc}") from exc

    def _fetch(self, url: str) -> List[str]:
        client = self._client or WordListClient(timeout_seconds=self.config.timeout_seconds)
        try:
            return client.fetch_lines(url)
        except WordListFetchError as exc:
            raise DictionaryLoadError(str(exc)) from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def words(self) -> List[str]:
        return list(self._words)

    def contains(self, word: str) -> bool:
        return normalize_word(word) in self._lookup

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)
