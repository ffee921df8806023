"""Trie Dictionary -- prefix-tree word store."""

from triedict.constants import MAX_SUGGESTION_DISTANCE
from triedict.distance import levenshtein
from triedict.trie import Trie, TrieNode
from triedict.dictionary import Dictionary

__all__ = [
    "MAX_SUGGESTION_DISTANCE",
    "Dictionary",
    "Trie",
    "TrieNode",
    "levenshtein",
]
