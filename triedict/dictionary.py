"""Word list loaded into a trie."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from triedict.constants import DICTIONARY_SEARCH_PATHS
from triedict.trie import Trie

log = logging.getLogger("triedict")

# Used when no word list file can be found.
MINIMAL_WORDS = (
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "her",
    "was", "one", "our", "out", "day", "had", "has", "his", "how", "its",
    "cat", "car", "card", "care", "cart", "dog", "door", "doom", "doll",
    "hell", "hello", "help", "helm", "heaven", "heavy", "heap", "hear",
    "word", "world", "work", "worm", "tree", "trie", "true", "try",
    "apple", "apply", "app", "banana", "band", "bandit", "orange", "grape",
)


class Dictionary:
    """Word list with trie-backed lookup, completion and suggestions."""

    def __init__(
        self,
        dict_path: str | None = None,
        *,
        lowercase: bool = True,
        min_length: int = 1,
    ):
        self.trie = Trie()
        self.lowercase = lowercase
        self.min_length = min_length
        self.source: str | None = None
        self._load(dict_path)

    def _load(self, dict_path: str | None) -> None:
        search_paths: list[str] = []
        if dict_path:
            if not os.path.exists(dict_path):
                log.warning("Word list %s not found", dict_path)
            search_paths.append(dict_path)
        search_paths.extend(DICTIONARY_SEARCH_PATHS)

        for path in search_paths:
            if not os.path.exists(path):
                continue
            with open(path, "r", encoding="utf-8") as f:
                added = self.load_words(f)
            if added:
                self.source = path
                log.info("Loaded %s words from %s", f"{added:,}", path)
                return
            log.debug("No usable words in %s", path)

        log.warning("No word list found -- using built-in minimal word list.")
        self.load_words(MINIMAL_WORDS)

    def normalize(self, raw: str) -> str | None:
        """Cleaned word, or None if the line should be skipped."""
        word = raw.strip()
        if self.lowercase:
            word = word.lower()
        if len(word) < self.min_length or not word.isalpha():
            return None
        return word

    def load_words(self, words: Iterable[str]) -> int:
        """Insert ``words`` and return how many were new."""
        added = 0
        for raw in words:
            word = self.normalize(raw)
            if word is not None and self.trie.insert(word):
                added += 1
        return added

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return (word.lower() if self.lowercase else word) in self.trie

    def __len__(self) -> int:
        return len(self.trie)
