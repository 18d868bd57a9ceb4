from io import StringIO

import pytest
from rich.console import Console

from matlab_style_linter.domain.entities import AggregateReport, FileReport, MatchSet, merge_reports
from matlab_style_linter.infrastructure.reporters import TerminalStyleReporter


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def reporter(output: StringIO) -> TerminalStyleReporter:
    return TerminalStyleReporter(Console(file=output, width=200, color_system=None))


def _file(name: str, errors: int, fixes: int, score: int = 0, advisories: tuple[str, ...] = ()) -> FileReport:
    return FileReport(
        name=name,
        per_rule_reason=("r",),
        per_rule_error_count=(errors,),
        per_rule_fix_count=(fixes,),
        complexity_score=score,
        advisories=advisories,
    )


def test_violation_line(reporter: TerminalStyleReporter, output: StringIO) -> None:
    reporter.report_violation(3, "foo(a,b,c)", MatchSet((6, 8)), "Commas should be followed by whitespace.", False)
    assert output.getvalue() == "L 3 (C [6 8]): Commas should be followed by whitespace.\n"


def test_verbose_violation_shows_markers(reporter: TerminalStyleReporter, output: StringIO) -> None:
    reporter.report_violation(1, "x=1", MatchSet((2,)), "Comparisons should begin with whitespace.", True)
    assert output.getvalue().splitlines() == [
        "L 1 (C [2]): Comparisons should begin with whitespace.",
        "x=1",
        "-^",
    ]


def test_verbose_violation_truncates_to_line_length(reporter: TerminalStyleReporter, output: StringIO) -> None:
    line = "y = " + "b" * 96
    reporter.report_violation(1, line, MatchSet((80,)), "Lines should not exceed 80 characters.", True)
    shown = output.getvalue().splitlines()
    assert shown[1] == line[:80]
    assert shown[2] == "-" * 79 + "^"


def test_file_tally(reporter: TerminalStyleReporter, output: StringIO) -> None:
    reporter.report_file(_file("a.m", 4, 1), fix=False)
    reporter.report_file(_file("b.m", 4, 1), fix=True)
    assert output.getvalue().splitlines() == [
        "File: a.m  Errors found: 4",
        "File: b.m  Errors found: 4  Fixes applied: 1",
    ]


def test_file_advisories_only_when_verbose(reporter: TerminalStyleReporter, output: StringIO) -> None:
    report = _file("a.m", 0, 0, advisories=("L 1 (C 1): Something.",))
    reporter.report_file(report, fix=False)
    assert "Something" not in output.getvalue()
    reporter.report_file(report, fix=False, verbose=True)
    assert "  L 1 (C 1): Something." in output.getvalue().splitlines()


def test_summary_totals(reporter: TerminalStyleReporter, output: StringIO) -> None:
    aggregate = merge_reports(merge_reports(AggregateReport(name="src"), _file("a.m", 3, 2, 4)), _file("b.m", 5, 0, 11))
    reporter.report_summary(aggregate, fix=True)
    text = output.getvalue()
    assert "[MSTYLE] Style Check Results" in text
    assert "a.m" in text and "b.m" in text
    assert "Files analyzed: 2" in text
    assert "Total errors: 8" in text
    assert "Total fixes: 2" in text
    assert "Average complexity score: 7.50" in text


def test_summary_without_fix_or_files(reporter: TerminalStyleReporter, output: StringIO) -> None:
    reporter.report_summary(AggregateReport(name="empty"), fix=False)
    lines = output.getvalue().splitlines()
    assert "Files analyzed: 0" in lines
    assert "Average complexity score: 0.00" in lines
    assert not any(line.startswith("Total fixes") for line in lines)
    assert "Style Check Results" not in output.getvalue()
