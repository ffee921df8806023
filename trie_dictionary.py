#!/usr/bin/env python3
"""
Trie Dictionary

Loads a word list into a prefix trie and answers lookups,
completions and did-you-mean queries, either interactively
or as a single command.

Requires: pip install numpy
"""

from __future__ import annotations

import argparse
import logging

from triedict.cli import execute, run_cli
from triedict.dictionary import Dictionary


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("triedict")


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Trie Dictionary -- word lookup, completion and spelling suggestions",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--min-length", type=int, default=1,
                        help="Skip words shorter than this")
    parser.add_argument("--keep-case", action="store_true",
                        help="Do not lowercase words from the word list")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    parser.add_argument("command", nargs="*",
                        help="Run one command (e.g. 'complete he') instead of the prompt")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dictionary = Dictionary(
        args.dict,
        lowercase=not args.keep_case,
        min_length=args.min_length,
    )

    if args.command:
        result = execute(dictionary.trie, " ".join(args.command))
        if result is not None:
            print(result)
    else:
        run_cli(dictionary)


if __name__ == "__main__":
    main()
