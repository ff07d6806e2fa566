"""Matching subset keys against the dictionary, and the per-line query result."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from sortedcontainers import SortedDict, SortedList

from subwords.wordlist import DictionaryIndex


@dataclass
class QueryResult:
    """The outcome of solving one input line."""

    letters: str
    """The normalized letters of the line."""

    words: list[str] = field(default_factory=list)
    """Every matching dictionary word, sorted lexicographically."""

    length_buckets: SortedDict = field(default_factory=SortedDict)
    """Mapping of word length to the sorted words of that length, in ascending length order."""

    shortest: list[str] = field(default_factory=list)
    """All matching words of the minimum length present, sorted."""

    longest: list[str] = field(default_factory=list)
    """All matching words of the maximum length present, sorted."""

    @property
    def count(self) -> int:
        """Number of matching words."""
        return len(self.words)

    @property
    def found(self) -> bool:
        """Whether any word matched."""
        return bool(self.words)

    @property
    def shortest_length(self) -> int:
        """Length of the shortest matching words (0 if nothing matched)."""
        return len(self.shortest[0]) if self.shortest else 0

    @property
    def longest_length(self) -> int:
        """Length of the longest matching words (0 if nothing matched)."""
        return len(self.longest[0]) if self.longest else 0


def match_subsets(subset_keys: Iterable[str], index: DictionaryIndex) -> list[str]:
    """Collect the dictionary words for every subset key.

    Words are appended in the iteration order of `subset_keys`, and in bucket order within a
    key.  Keys without dictionary words contribute nothing.
    """
    matches: list[str] = []
    for key in subset_keys:
        matches.extend(index.lookup(key))
    return matches


def aggregate(letters: str, words: Iterable[str]) -> QueryResult:
    """Compute the summary statistics of a set of matched words.

    Args:
        letters (str): The normalized letters the words were matched against.
        words (Iterable[str]): The matched words, in any order.

    Returns:
        A QueryResult.  If there are no words, its buckets and groups are empty.
    """
    sorted_words = SortedList(words)

    length_buckets: SortedDict = SortedDict()
    for word in sorted_words:
        bucket = length_buckets.get(len(word))
        if bucket is None:
            bucket = length_buckets[len(word)] = SortedList()
        bucket.add(word)

    shortest: list[str] = []
    longest: list[str] = []
    if length_buckets:
        shortest = list(length_buckets.peekitem(0)[1])
        longest = list(length_buckets.peekitem(-1)[1])

    return QueryResult(
        letters=letters,
        words=list(sorted_words),
        length_buckets=length_buckets,
        shortest=shortest,
        longest=longest,
    )
