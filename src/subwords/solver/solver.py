"""Main solver module: builds the dictionary index and solves every input line."""

import os
import sys
from collections.abc import Iterable, Iterator
from concurrent.futures import ProcessPoolExecutor
from contextlib import nullcontext
from dataclasses import dataclass
from datetime import datetime
from itertools import islice
from os import PathLike
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from subwords.report import write_outcome
from subwords.solver.config import config as solver_config
from subwords.solver.query import LineOutcome, solve_outcome
from subwords.solver.utils import TIMESTAMP_FMT, int_comma, time_str
from subwords.solver.worker import init_worker_globals, worker_task
from subwords.wordlist import DictionaryIndex, build_dictionary, load_word_list


@dataclass
class RunSummary:
    """Counters collected over one run of the solver."""

    lines: int = 0
    """Number of input lines processed."""
    lines_matched: int = 0
    """Number of lines with at least one matching word."""
    lines_skipped: int = 0
    """Number of lines rejected as too long."""
    words_found: int = 0
    """Total number of matching words over all lines."""


def get_executor(
    *,
    n_workers: int,
    index: DictionaryIndex,
    max_letters: int,
    deterministic: bool,
) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor whose workers each hold a copy of the dictionary index.

    Args:
        n_workers (int): Number of worker processes to create.
        index (DictionaryIndex): The dictionary index to pass to workers.
        max_letters (int): Maximum number of letters in a line.
        deterministic (bool): Whether workers enumerate subsets in sorted order.

    Returns:
        A ProcessPoolExecutor instance for worker processes.
    """
    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers > cpus:
        raise ValueError(
            f"Requested number of workers ({n_workers}) exceeds CPU count ({cpus})",
        )
    return ProcessPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(index, max_letters, deterministic),
    )


def solve_lines(
    lines: Iterable[str],
    index: DictionaryIndex,
    *,
    max_workers: int | None = None,
    chunksize: int | None = None,
) -> Iterator[LineOutcome]:
    """Solve each input line, yielding the outcomes in input order.

    Args:
        lines (Iterable[str]): The raw input lines.
        index (DictionaryIndex): The dictionary to match against.
        max_workers (int | None): Number of worker processes.  1 solves in-process.  If None,
            uses the configured value.
        chunksize (int | None): Lines per worker task.  If None, uses the configured value.

    With worker processes, at most `chunksize * max_workers` lines are read ahead of the
    outcomes already yielded, so reports keep streaming on long inputs.
    """
    if max_workers is None:
        max_workers = solver_config.max_workers
    if chunksize is None:
        chunksize = solver_config.chunksize
    max_letters = solver_config.max_letters
    deterministic = solver_config.deterministic

    numbered = enumerate(lines, start=1)
    if max_workers <= 1:
        for line_no, raw in numbered:
            yield solve_outcome(
                line_no, raw, index, max_letters=max_letters, deterministic=deterministic
            )
        return

    with get_executor(
        n_workers=max_workers,
        index=index,
        max_letters=max_letters,
        deterministic=deterministic,
    ) as executor:
        try:
            # `map` returns results in submission order; each batch is drained before the next
            batch_size = chunksize * max_workers
            while batch := list(islice(numbered, batch_size)):
                yield from executor.map(worker_task, batch, chunksize=chunksize)
        except BaseException:
            executor.shutdown(wait=False, cancel_futures=True)
            raise


def solve_all(
    words_path: str | PathLike,
    lines: Iterable[str],
    out: TextIO,
    *,
    logf: TextIO,
) -> RunSummary:
    """Load the word list, then solve and report every input line.

    Args:
        words_path: Path to the word list file.
        lines (Iterable[str]): The raw input lines.
        out (TextIO): Stream to write the reports to.
        logf (TextIO): Stream to write the run log to.

    Returns:
        A RunSummary of the run.
    """
    start_time = time()
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)
    print(
        f"Start time: {datetime.fromtimestamp(start_time).astimezone().strftime(TIMESTAMP_FMT)}",
        file=logf,
        flush=True,
    )

    words = load_word_list(
        words_path,
        min_len=solver_config.min_word_length,
        max_len=solver_config.max_word_length,
    )
    print(f"Loaded {int_comma(len(words))} words from {words_path}", file=logf, flush=True)
    index = build_dictionary(words)
    print(f"Built index with {int_comma(index.n_keys)} distinct keys", file=logf, flush=True)

    summary = RunSummary()
    for outcome in solve_lines(lines, index):
        summary.lines += 1
        if outcome.status == "too_long":
            summary.lines_skipped += 1
            print(f"Line {outcome.line_no} skipped: {outcome.err_msg}", file=logf, flush=True)
        elif outcome.result is not None and outcome.result.found:
            summary.lines_matched += 1
            summary.words_found += outcome.result.count
        write_outcome(outcome, out, presentation=solver_config.presentation)

    out.flush()
    print(
        f"Processed {int_comma(summary.lines)} lines "
        f"({int_comma(summary.lines_matched)} with matches, "
        f"{int_comma(summary.lines_skipped)} skipped), "
        f"{int_comma(summary.words_found)} words found",
        file=logf,
        flush=True,
    )
    print(f"Time taken: {time_str(time() - start_time)}", file=logf, flush=True)
    return summary


def run(words_path: str | PathLike, lines: Iterable[str], out: TextIO) -> RunSummary:
    """Run the solver, writing the run log to the configured log file (or stderr).

    Args:
        words_path: Path to the word list file.
        lines (Iterable[str]): The raw input lines.
        out (TextIO): Stream to write the reports to.
    """
    if solver_config.log_path is None:
        log_ctx = nullcontext(sys.stderr)
    else:
        logfile = Path(solver_config.log_path)
        logfile.parent.mkdir(parents=True, exist_ok=True)
        log_ctx = open(logfile, "w", encoding="utf-8")

    with log_ctx as logf:
        try:
            return solve_all(words_path, lines, out, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            sys.exit(1)
