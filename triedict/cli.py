"""CLI / terminal mode for the trie dictionary."""

from __future__ import annotations

import logging

from triedict.dictionary import Dictionary
from triedict.trie import Trie

log = logging.getLogger("triedict.cli")

HELP = "\n".join([
    "Commands:",
    "  add WORD...          -- insert one or more words",
    "  del WORD...          -- delete one or more words",
    "  find WORD            -- check whether a word is stored",
    "  complete PREFIX      -- list words starting with PREFIX",
    "  suggest WORD         -- did-you-mean suggestions for WORD",
    "  words                -- list every stored word",
    "  tree                 -- print the trie structure",
    "  count                -- number of stored words",
    "  help                 -- show this message",
    "  quit                 -- leave",
])


def _format_words(words: list[str]) -> str:
    if not words:
        return "  (none)"
    return "\n".join(f"  {w}" for w in words)


def execute(trie: Trie, line: str) -> str | None:
    """Run one command against ``trie`` and return the text to show."""
    parts = line.split()
    if not parts:
        return None

    cmd, args = parts[0].lower(), parts[1:]
    log.debug("Command %s %s", cmd, args)

    try:
        if cmd == "help":
            return HELP
        if cmd == "words":
            return _format_words(trie.get_all_words())
        if cmd == "tree":
            return trie.format_structure()
        if cmd == "count":
            return f"  {len(trie)} words"

        if cmd in ("add", "del") and args:
            out: list[str] = []
            for word in args:
                if cmd == "add":
                    ok = trie.insert(word)
                    out.append(f"  Added '{word}'" if ok else f"  '{word}' already present")
                else:
                    ok = trie.delete(word)
                    out.append(f"  Deleted '{word}'" if ok else f"  '{word}' not found")
            return "\n".join(out)

        if cmd == "find" and len(args) == 1:
            word = args[0]
            return f"  '{word}' found" if trie.search(word) else f"  '{word}' not found"
        if cmd == "complete" and len(args) == 1:
            return _format_words(trie.auto_suggest(args[0]))
        if cmd == "suggest" and len(args) == 1:
            return _format_words(trie.get_spelling_suggestions(args[0]))
    except ValueError as exc:
        return f"  Error: {exc}"

    return "  Invalid.  Type 'help' for the list of commands."


def run_cli(dictionary: Dictionary) -> None:
    """Run the interactive prompt until quit / EOF."""
    print("\n" + "=" * 60)
    print("  TRIE DICTIONARY")
    print("=" * 60)
    print(f"  {len(dictionary):,} words loaded from {dictionary.source or 'built-in list'}")
    print()
    print(HELP)
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if inp.lower() in ("quit", "exit"):
            break

        result = execute(dictionary.trie, inp)
        if result is not None:
            print(result)
