"""Solving a single input line against a dictionary index."""

from dataclasses import dataclass
from typing import Literal

from subwords.solver.results import QueryResult, aggregate, match_subsets
from subwords.solver.subsets import enumerate_subsets
from subwords.solver.utils import InputTooLongError, normalize_line
from subwords.wordlist import DictionaryIndex


def solve_line(
    raw: str,
    index: DictionaryIndex,
    *,
    max_letters: int | None = None,
    deterministic: bool | None = None,
) -> QueryResult:
    """Find every dictionary word that can be spelled from a subset of a line's letters.

    Args:
        raw (str): The raw input line.  Anything that is not a letter is ignored.
        index (DictionaryIndex): The dictionary to match against.
        max_letters (int | None): Maximum number of letters allowed.  If None, uses the
            configured bound.
        deterministic (bool | None): Whether to enumerate subsets in sorted order.  If None,
            uses the configured setting.

    Returns:
        The QueryResult for the line.

    Raises:
        InputTooLongError: If the line has too many letters.
    """
    letters = normalize_line(raw)
    subset_keys = enumerate_subsets(
        letters, max_letters=max_letters, deterministic=deterministic
    )
    return aggregate(letters, match_subsets(subset_keys, index))


@dataclass
class LineOutcome:
    """Wrapper for the result of solving one numbered input line.

    Pickleable, so that it can be returned from worker processes.
    """

    line_no: int
    """1-based position of the line in the input."""
    letters: str
    """The normalized letters of the line."""
    status: Literal["ok", "too_long"]
    result: QueryResult | None = None
    err_msg: str | None = None


def solve_outcome(
    line_no: int,
    raw: str,
    index: DictionaryIndex,
    *,
    max_letters: int | None = None,
    deterministic: bool | None = None,
) -> LineOutcome:
    """Solve a line, reporting a too-long line as an outcome instead of raising."""
    try:
        result = solve_line(raw, index, max_letters=max_letters, deterministic=deterministic)
    except InputTooLongError as e:
        return LineOutcome(
            line_no=line_no,
            letters=normalize_line(raw),
            status="too_long",
            err_msg=str(e),
        )
    return LineOutcome(line_no=line_no, letters=result.letters, status="ok", result=result)
