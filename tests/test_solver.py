import io
import os

import pytest

from subwords.solver import solver
from subwords.solver.config import config as solver_config

LINES = ["cat\n", "dog\n", "x" * 70 + "\n", "C-a.t!\n"]


def test_solve_lines_in_process_keeps_order(sample_index):
    outcomes = list(solver.solve_lines(LINES, sample_index, max_workers=1))
    assert [o.line_no for o in outcomes] == [1, 2, 3, 4]
    assert [o.status for o in outcomes] == ["ok", "ok", "too_long", "ok"]
    assert outcomes[0].result.count == 5
    assert not outcomes[1].result.found
    assert outcomes[3].letters == "cat"


@pytest.mark.skipif((os.cpu_count() or 1) < 2, reason="needs at least two CPUs")
def test_solve_lines_with_worker_processes_keeps_order(sample_index):
    lines = LINES * 5
    serial = list(solver.solve_lines(lines, sample_index, max_workers=1))
    parallel = list(solver.solve_lines(lines, sample_index, max_workers=2, chunksize=3))
    assert [o.line_no for o in parallel] == list(range(1, len(lines) + 1))
    assert [o.status for o in parallel] == [o.status for o in serial]
    assert [o.result.words for o in parallel if o.result] == [
        o.result.words for o in serial if o.result
    ]


def test_get_executor_rejects_too_many_workers(sample_index):
    with pytest.raises(ValueError, match="exceeds CPU count"):
        solver.get_executor(
            n_workers=(os.cpu_count() or 1) + 1,
            index=sample_index,
            max_letters=64,
            deterministic=True,
        )


def test_solve_all(words_file):
    out = io.StringIO()
    logf = io.StringIO()
    summary = solver.solve_all(words_file, LINES, out, logf=logf)

    assert summary == solver.RunSummary(lines=4, lines_matched=3, lines_skipped=1, words_found=11)
    report = out.getvalue().splitlines()
    assert report[0] == "Original 3 letters: cat"
    assert report[1] == "\t5 possible words: a act at cat tac"
    assert "Original 3 letters: dog" in report
    assert "\t1 possible words: dog" in report
    assert "\tSkipped: 70 letters exceeds the limit of 64." in report

    log = logf.getvalue()
    assert "Loaded 6 words from" in log
    assert "Built index with 4 distinct keys" in log
    assert "Line 3 skipped" in log
    assert "Processed 4 lines (3 with matches, 1 skipped), 11 words found" in log


def test_solve_all_applies_word_length_filter(words_file, monkeypatch):
    monkeypatch.setattr(solver_config, "min_word_length", 2)
    out = io.StringIO()
    summary = solver.solve_all(words_file, ["cat"], out, logf=io.StringIO())
    assert summary.words_found == 4
    assert "\t4 possible words: act at cat tac" in out.getvalue()


def test_run_writes_log_file(words_file, tmp_path, monkeypatch):
    log_path = tmp_path / "logs" / "run.log"
    monkeypatch.setattr(solver_config, "log_path", str(log_path))
    monkeypatch.setattr(solver_config, "presentation", "extremes")
    out = io.StringIO()

    summary = solver.run(words_file, ["tac"], out)

    assert summary.lines == 1
    assert "\t3 longest words of length 3: act cat tac" in out.getvalue()
    log = log_path.read_text(encoding="utf-8")
    assert "Solver config:" in log
    assert "Processed 1 lines (1 with matches, 0 skipped), 5 words found" in log


@pytest.mark.skipif((os.cpu_count() or 1) < 2, reason="needs at least two CPUs")
def test_solve_lines_with_worker_processes_reads_ahead_a_bounded_batch(sample_index):
    consumed = []

    def lines():
        for n in range(50):
            consumed.append(n)
            yield "cat\n"

    outcomes = solver.solve_lines(lines(), sample_index, max_workers=2, chunksize=1)
    first = next(outcomes)
    assert first.line_no == 1
    assert len(consumed) == 2
    outcomes.close()
