"""Utility functions for the subwords solver."""

import re
from functools import lru_cache

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"

NON_LETTER_PATTERN = re.compile(r"[^A-Za-z]+")
"""Regex pattern matching runs of characters that are not basic (ASCII) letters."""


class InputTooLongError(ValueError):
    """Raised when a normalized line has more letters than the subset enumerator accepts."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"{length} letters exceeds the limit of {limit}.")
        self.length = length
        """Number of letters in the rejected line."""
        self.limit = limit
        """The letter limit that was in effect."""

    def __reduce__(self):
        # Keep the exception pickleable for worker processes
        return (type(self), (self.length, self.limit))


@lru_cache(maxsize=300_000)
def canonical_key(word: str) -> str:
    """Return the canonical (anagram) key of a word: its lower-cased letters in sorted order.

    Two words are anagrams of each other iff their canonical keys are equal.
    """
    return "".join(sorted(word.lower()))


def normalize_line(raw: str) -> str:
    """Strip everything except letters from a raw input line and lower-case the rest.

    The order of the remaining letters is preserved; a line without letters gives "".
    """
    return NON_LETTER_PATTERN.sub("", raw).lower()


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"
