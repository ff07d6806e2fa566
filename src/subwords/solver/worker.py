"""Worker process state and tasks for the parallel line solver."""

from dataclasses import dataclass

from subwords.solver.query import LineOutcome, solve_outcome
from subwords.wordlist import DictionaryIndex


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    index: DictionaryIndex
    """The dictionary index, shared read-only by every task in the worker."""

    max_letters: int
    """Maximum number of letters in a line."""

    deterministic: bool
    """Whether to enumerate subsets in sorted order."""

    n_lines_solved: int = 0
    """Number of lines solved by this worker."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


def init_worker_globals(index: DictionaryIndex, max_letters: int, deterministic: bool) -> None:
    """Initialize global variables for worker processes.

    Args:
        index (DictionaryIndex): The dictionary index built by the parent process.
        max_letters (int): Maximum number of letters in a line.
        deterministic (bool): Whether to enumerate subsets in sorted order.
    """
    global worker_state  # noqa: PLW0603
    worker_state = WorkerState(index=index, max_letters=max_letters, deterministic=deterministic)


def worker_task(numbered_line: tuple[int, str]) -> LineOutcome:
    """Solve one numbered input line using the worker's dictionary index.

    Args:
        numbered_line (tuple[int, str]): The 1-based line number and the raw line.

    Returns:
        The LineOutcome for the line.
    """
    if not worker_state:
        raise RuntimeError("Worker state not initialized. Call init_worker_globals first.")

    line_no, raw = numbered_line
    outcome = solve_outcome(
        line_no,
        raw,
        worker_state.index,
        max_letters=worker_state.max_letters,
        deterministic=worker_state.deterministic,
    )
    worker_state.n_lines_solved += 1
    return outcome
