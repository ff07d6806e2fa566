"""Power-set enumeration of the letters of an input line."""

from collections.abc import Set
from itertools import compress

from bitarray.util import int2ba
from sortedcontainers import SortedSet

from subwords.solver.config import MAX_LETTERS_LIMIT
from subwords.solver.config import config as solver_config
from subwords.solver.utils import InputTooLongError, canonical_key


def check_length(letters: str, max_letters: int | None = None) -> None:
    """Raise InputTooLongError if `letters` is longer than the enumeration bound.

    Args:
        letters (str): The normalized letters of a line.
        max_letters (int | None): The bound to apply.  If None, uses the configured bound.
            Never more than 64, the width of the enumeration counter.
    """
    limit = solver_config.max_letters if max_letters is None else max_letters
    limit = min(limit, MAX_LETTERS_LIMIT)
    if len(letters) > limit:
        raise InputTooLongError(len(letters), limit)


def enumerate_subsets(
    letters: str,
    *,
    max_letters: int | None = None,
    deterministic: bool | None = None,
) -> Set[str]:
    """Enumerate the canonical keys of every subset of the letters.

    Each value `v` of an N-bit counter (0 to 2^N - 1) selects the letters at the positions of
    its set bits.  The selected letters are canonicalized before insertion, so bit patterns that
    pick the same multiset of letters (e.g. either of two equal letters) give a single key.  The
    empty key and the key of the whole line are always included.

    Args:
        letters (str): The letters to enumerate subsets of, normally from `normalize_line`.
        max_letters (int | None): Reject inputs longer than this.  If None, uses the configured
            bound.
        deterministic (bool | None): Whether to return a SortedSet (fixed iteration order).  If
            None, uses the configured setting.

    Returns:
        The set of distinct subset keys.

    Raises:
        InputTooLongError: If `letters` has more letters than allowed.  Nothing is enumerated.
    """
    check_length(letters, max_letters)
    if deterministic is None:
        deterministic = solver_config.deterministic

    n = len(letters)
    keys: set[str] = {""}
    if n > 0:
        # Bit j of the mask (little-endian) selects letters[j]
        for v in range(1, 1 << n):
            mask = int2ba(v, length=n, endian="little")
            keys.add(canonical_key("".join(compress(letters, mask))))

    return SortedSet(keys) if deterministic else keys
