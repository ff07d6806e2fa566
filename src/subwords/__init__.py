"""Subwords word-game solver.

Lists every dictionary word that can be spelled from a subset of the letters on each input
line, each letter used at most once.  Words are matched through their canonical (sorted
letter) keys against every subset of the line's letters.
"""

import sys

from .solver import solver

USAGE = "Usage: python -m subwords <words_file> < strings_file > output_file"


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the subwords solver."""
    argv = sys.argv if argv is None else argv
    # Expect a single argument: path to the word list file
    if len(argv) != 2:
        print(USAGE, file=sys.stderr)
        sys.exit(1)
    words_path = argv[1]

    try:
        solver.run(words_path, sys.stdin, sys.stdout)
    except (FileNotFoundError, PermissionError):
        print(f"Error: failed to open {words_path}", file=sys.stderr)
        sys.exit(1)
