"""Prefix trie with autocompletion and spelling suggestions."""

from __future__ import annotations

import logging
from typing import Iterator

from triedict.constants import (
    BRANCH,
    LAST_BRANCH,
    MAX_SUGGESTION_DISTANCE,
    PIPE_INDENT,
    ROOT_CHARACTER,
    SPACE_INDENT,
)
from triedict.distance import levenshtein

log = logging.getLogger("triedict")


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("character", "children", "is_terminal")

    def __init__(self, character: str = ROOT_CHARACTER):
        self.character = character
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def has_child(self, ch: str) -> bool:
        return ch in self.children

    def __repr__(self) -> str:
        mark = "*" if self.is_terminal else ""
        return f"TrieNode({self.character!r}{mark}, children={len(self.children)})"


def _check_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")


class Trie:
    """Prefix trie holding a set of words.

    Lookups that miss return ``False`` or an empty list; only a spelling
    query without a first character is rejected (``ValueError``).
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    # core operations

    def search(self, word: str) -> bool:
        """True if ``word`` was inserted as a complete word."""
        _check_str(word, "word")
        node = self._walk(word)
        return node is not None and node.is_terminal

    def insert(self, word: str) -> bool:
        """Add ``word``. Returns False if it was already present."""
        _check_str(word, "word")
        node = self.root
        for ch in word:
            if not node.has_child(ch):
                node.children[ch] = TrieNode(ch)
            node = node.children[ch]
        if node.is_terminal:
            return False
        node.is_terminal = True
        self._size += 1
        log.debug("Inserted %r", word)
        return True

    def delete(self, word: str) -> bool:
        """Remove ``word`` and prune the nodes only it was using.

        Returns:
            bool: True if the word was present and removed,
                  False if it was not stored (nothing changes).
        """
        _check_str(word, "word")

        # (parent, ch) for every edge on the way down
        path: list[tuple[TrieNode, str]] = []
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child

        if not node.is_terminal:
            return False
        node.is_terminal = False
        self._size -= 1

        # Drop the childless, non-terminal tail; the root is never popped.
        while path and not node.children and not node.is_terminal:
            parent, ch = path.pop()
            del parent.children[ch]
            log.debug("Pruned node %r at depth %d", ch, len(path) + 1)
            node = parent

        log.debug("Deleted %r", word)
        return True

    def is_prefix(self, prefix: str) -> bool:
        """True if some stored path starts with ``prefix``."""
        _check_str(prefix, "prefix")
        return self._walk(prefix) is not None

    # enumeration

    def auto_suggest(self, prefix: str) -> list[str]:
        """All stored words beginning with ``prefix`` (empty if none)."""
        _check_str(prefix, "prefix")
        node = self._walk(prefix)
        if node is None:
            return []
        return self._collect(node, prefix)

    def get_all_words(self) -> list[str]:
        return self.auto_suggest("")

    def get_spelling_suggestions(self, word: str) -> list[str]:
        """Stored words within ``MAX_SUGGESTION_DISTANCE`` edits of ``word``.

        Only words sharing the first character of ``word`` are considered,
        so "cello" is never offered for "hello".

        Raises:
            ValueError: if ``word`` is empty.
        """
        _check_str(word, "word")
        if not word:
            raise ValueError("spelling suggestions need a non-empty word")

        first = word[0]
        bucket = self.root.children.get(first)
        if bucket is None:
            return []

        return [
            candidate
            for candidate in self._collect(bucket, first)
            if levenshtein(word, candidate) <= MAX_SUGGESTION_DISTANCE
        ]

    # diagnostics

    def format_structure(self) -> str:
        """Render the tree as indented text, one node per line."""
        lines = ["root"]
        stack: list[tuple[TrieNode, str, bool]] = []
        self._push_children(stack, self.root, " ")

        while stack:
            node, indent, is_last = stack.pop()
            if is_last:
                lines.append(f"{indent}{LAST_BRANCH}{node.character}")
                indent += SPACE_INDENT
            else:
                lines.append(f"{indent}{BRANCH}{node.character}")
                indent += PIPE_INDENT
            self._push_children(stack, node, indent)

        return "\n".join(lines)

    def print_structure(self) -> None:
        print()
        print(self.format_structure())

    # helpers

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _collect(node: TrieNode, prefix: str) -> list[str]:
        """Depth-first word collection, children in ascending order."""
        words: list[str] = []
        stack = [(node, prefix)]
        while stack:
            n, text = stack.pop()
            if n.is_terminal:
                words.append(text)
            # reversed so the smallest character is popped first
            for ch, child in sorted(n.children.items(), reverse=True):
                stack.append((child, text + ch))
        return words

    @staticmethod
    def _push_children(
        stack: list[tuple[TrieNode, str, bool]], node: TrieNode, indent: str
    ) -> None:
        children = sorted(node.children.items())
        for i in range(len(children) - 1, -1, -1):
            stack.append((children[i][1], indent, i == len(children) - 1))

    # python protocol

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_all_words())

    def __len__(self) -> int:
        return self._size
