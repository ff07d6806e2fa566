"""Module for word list management in subwords."""

from collections import defaultdict
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from subwords.solver.utils import canonical_key


def load_word_list(
    path: str | PathLike, *, min_len: int = 1, max_len: int | None = None
) -> list[str]:
    """Load a word list file.

    The file holds whitespace-separated tokens (any number per line).  Each token is lower-cased
    and kept in file order; duplicate tokens are kept.

    Args:
        path: Path to the word list file.
        min_len: Minimum word length to include (defaults to 1).
        max_len: Optional maximum word length to include.

    Returns:
        The list of words.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    words: list[str] = []
    # Undecodable bytes become lone surrogates; such tokens never match a clean line
    with word_list_path.open("r", encoding="utf-8", errors="surrogateescape") as f:
        for line in f:
            for token in line.split():
                word = token.lower()
                if len(word) < min_len:
                    continue
                if max_len is not None and len(word) > max_len:
                    continue
                words.append(word)
    return words


class DictionaryIndex:
    """Read-only mapping from canonical key to the dictionary words sharing that key.

    Words within a bucket keep the order in which they appeared in the source list.
    Pickleable, so that it can be handed to worker processes.
    """

    def __init__(self, buckets: dict[str, tuple[str, ...]]) -> None:
        self._buckets = buckets
        self._n_words = sum(len(bucket) for bucket in buckets.values())

    def lookup(self, key: str) -> tuple[str, ...]:
        """Return the words whose canonical key is `key` (empty if there are none)."""
        return self._buckets.get(key, ())

    def keys(self) -> Iterator[str]:
        """Iterate over the canonical keys present in the index."""
        return iter(self._buckets)

    @property
    def n_keys(self) -> int:
        """Number of distinct canonical keys (anagram classes)."""
        return len(self._buckets)

    def __contains__(self, key: object) -> bool:
        return key in self._buckets

    def __len__(self) -> int:
        """Number of words indexed, duplicates included."""
        return self._n_words

    def __repr__(self) -> str:
        return f"DictionaryIndex(words={self._n_words}, keys={self.n_keys})"


def build_dictionary(words: Iterable[str]) -> DictionaryIndex:
    """Build a dictionary index from a sequence of words.

    Each word is appended to the bucket of its canonical key, so every word appears in exactly
    one bucket and anagrams share a bucket.
    """
    buckets: defaultdict[str, list[str]] = defaultdict(list)

    for word in words:
        buckets[canonical_key(word)].append(word)

    # Freeze the buckets: the index is never modified after construction
    return DictionaryIndex({key: tuple(bucket) for key, bucket in buckets.items()})
