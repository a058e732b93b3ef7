import io
import logging

from bitword.cases import DEFAULT_CASES, TestCase
from bitword.runner import SelfTestRunner


def run(cases):
    out = io.StringIO()
    summary = SelfTestRunner(cases, out=out).run()
    return summary, out.getvalue().splitlines()


def test_builtin_table_passes():
    summary, lines = run(DEFAULT_CASES)
    assert summary.ok
    assert summary.total == len(DEFAULT_CASES) * 6
    assert summary.passed == summary.total
    assert summary.failed == 0
    assert len(lines) == len(DEFAULT_CASES) * 7
    assert not any(line.startswith("FAIL") for line in lines)


def test_report_layout():
    _, lines = run(DEFAULT_CASES[:1])
    assert lines == [
        "=== bitSet=0b0, index=0 ===",
        "    PASS: add(0b0, 0)=0b1, want 1",
        "    PASS: remove(0b0, 0)=0b0, want 0",
        "    PASS: contains(0b0, 0)=false, want false",
        "    PASS: size(0b0)=0, want 0",
        "    PASS: isEmpty(0b0)=true, want true",
        "    PASS: clear(0b0)=0b0, want 0",
    ]


def test_mismatches_are_reported_and_run_continues():
    wrong = TestCase(0b0001, 0, 0b0011, 0b0000, True, 2, False, 0)
    summary, lines = run([wrong, DEFAULT_CASES[0]])
    assert not summary.ok
    assert summary.total == 12
    assert summary.failed == 2
    assert "FAIL: add(0b1, 0)=0b1, want 11" in lines
    assert "FAIL: size(0b1)=1, want 2" in lines
    # The second case still ran.
    assert lines[7] == "=== bitSet=0b0, index=0 ==="
    assert [m.operation for m in summary.mismatches] == ["add", "size"]
    assert summary.mismatches[0].actual == 0b0001
    assert summary.mismatches[0].expected == 0b0011


def test_mismatch_logged(caplog):
    wrong = TestCase(0b0110, 1, 0b0110, 0b0100, False, 2, False, 0)
    with caplog.at_level(logging.WARNING, logger="bitword"):
        summary, _ = run([wrong])
    assert summary.failed == 1
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "contains mismatch" in warnings[0].getMessage()


def test_check_case_writes_nothing():
    out = io.StringIO()
    runner = SelfTestRunner(DEFAULT_CASES, out=out)
    results = runner.check_case(DEFAULT_CASES[6])
    assert out.getvalue() == ""
    assert [r.operation.name for r in results] == ["add", "remove", "contains", "size", "isEmpty", "clear"]
    assert all(r.passed for r in results)
    assert results[1].actual == 0b1011


def test_default_output_is_stdout(capsys):
    SelfTestRunner(DEFAULT_CASES[:2]).run()
    captured = capsys.readouterr()
    assert captured.out.count("===") == 4
    assert "    PASS: add(0b0, 1)=0b10, want 10" in captured.out


def test_empty_sequence():
    summary, lines = run([])
    assert summary.ok
    assert summary.total == 0
    assert lines == []
