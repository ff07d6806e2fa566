"""Formatting of per-line reports."""

from typing import Literal, TextIO

from subwords.solver.query import LineOutcome
from subwords.solver.results import QueryResult

Presentation = Literal["buckets", "extremes"]


def _word_line(words: list[str], label: str) -> str:
    return f"\t{len(words)} {label}: {' '.join(words)}"


def format_result(result: QueryResult, *, presentation: Presentation = "buckets") -> list[str]:
    """Format a query result as report lines.

    Args:
        result (QueryResult): The result to format.
        presentation: "buckets" lists the words grouped by length; "extremes" lists only the
            shortest and longest words.

    Returns:
        The report lines, without trailing newlines.
    """
    if presentation not in ("buckets", "extremes"):
        raise ValueError(f"Invalid presentation: {presentation}")

    lines = [f"Original {len(result.letters)} letters: {result.letters}"]

    if not result.found:
        lines.append("No possible words found.")
        if presentation == "extremes":
            lines.append("No shortest words found.")
            lines.append("No longest words found.")
        return lines

    lines.append(_word_line(result.words, "possible words"))
    if presentation == "buckets":
        for length, words in result.length_buckets.items():
            lines.append(_word_line(list(words), f"words of length {length}"))
    else:
        lines.append(
            _word_line(result.shortest, f"shortest words of length {result.shortest_length}")
        )
        lines.append(
            _word_line(result.longest, f"longest words of length {result.longest_length}")
        )
    return lines


def format_outcome(outcome: LineOutcome, *, presentation: Presentation = "buckets") -> list[str]:
    """Format the outcome of one input line, including lines that were rejected."""
    if outcome.status == "too_long":
        return [
            f"Original {len(outcome.letters)} letters: {outcome.letters}",
            f"\tSkipped: {outcome.err_msg}",
        ]
    if outcome.result is None:
        raise ValueError(f"Line {outcome.line_no} has status '{outcome.status}' but no result.")
    return format_result(outcome.result, presentation=presentation)


def write_outcome(
    outcome: LineOutcome, out: TextIO, *, presentation: Presentation = "buckets"
) -> None:
    """Write the report for one input line to `out`."""
    for line in format_outcome(outcome, presentation=presentation):
        print(line, file=out)
