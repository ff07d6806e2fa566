"""Main entry point for `python -m subwords`."""

from subwords import main

main()
