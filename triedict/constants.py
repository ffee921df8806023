"""Shared constants for the trie dictionary."""

from __future__ import annotations

import os

# Placeholder character carried by the root node (it represents the empty prefix).
ROOT_CHARACTER = " "

# Words within this many edits of the query are offered as spelling suggestions.
MAX_SUGGESTION_DISTANCE = 2

# Word lists tried in order when no explicit path is given.
DICTIONARY_SEARCH_PATHS: list[str] = [
    "dictionary.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
]

# ── Tree drawing ────────────────────────────────────────────────────────
BRANCH = "├─"
LAST_BRANCH = "└─"
PIPE_INDENT = "│ "
SPACE_INDENT = "  "
