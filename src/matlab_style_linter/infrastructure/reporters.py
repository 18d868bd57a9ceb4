"""Terminal reporter implementation - line-oriented console output via rich."""

from typing import Optional, Union

from rich.console import Console
from rich.table import Table
from rich.text import Text

from matlab_style_linter.domain.constants import MAX_LINE_LENGTH
from matlab_style_linter.domain.entities import AggregateReport, FileReport, MatchSet
from matlab_style_linter.domain.protocols import StyleReporterProtocol


class TerminalStyleReporter(StyleReporterProtocol):
    """Prints violations, per-file tallies and the run summary."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)

    def _line(self, text: str = "", style: Optional[str] = None) -> None:
        # Report text contains brackets; never interpret it as markup.
        self.console.print(text, markup=False, highlight=False, soft_wrap=True, style=style)

    def report_violation(
        self,
        line_number: int,
        line: str,
        match_set: MatchSet,
        reason: str,
        verbose: bool,
    ) -> None:
        """L <n> (C [<cols>]): <reason>, plus the caret diagram when verbose."""
        self._line(f"L {line_number} (C {match_set.describe()}): {reason}")
        if verbose:
            self._line(line[:MAX_LINE_LENGTH])
            self._line(match_set.markers()[:MAX_LINE_LENGTH], style="bold red")

    def report_file(self, report: FileReport, fix: bool, verbose: bool = False) -> None:
        """File: <name>  Errors found: <n> [Fixes applied: <n>]."""
        tally = f"File: {report.name}  Errors found: {report.total_errors}"
        if fix:
            tally += f"  Fixes applied: {report.total_fixes}"
        self._line(tally, style="bold")
        if verbose and report.advisories:
            self._line("Code checker advisories:")
            for advisory in report.advisories:
                self._line(f"  {advisory}")

    def report_summary(self, report: AggregateReport, fix: bool) -> None:
        """Per-file table followed by the run totals."""
        files = list(report.iter_files())
        if files:
            table = Table(title=Text("[MSTYLE] Style Check Results"), header_style="bold cyan")
            table.add_column("File", style="white")
            table.add_column("Errors", justify="right", style="bold red")
            if fix:
                table.add_column("Fixes", justify="right", style="bold green")
            table.add_column("Complexity", justify="right")
            for file_report in files:
                row: list[Union[str, Text]] = [Text(file_report.name), str(file_report.total_errors)]
                if fix:
                    row.append(str(file_report.total_fixes))
                row.append(str(file_report.complexity_score))
                table.add_row(*row)
            self.console.print(table)

        self._line("")
        self._line(f"Files analyzed: {report.files_analyzed}")
        self._line(f"Total errors: {report.total_errors}")
        if fix:
            self._line(f"Total fixes: {report.total_fixes}")
        self._line(f"Average complexity score: {report.average_complexity:.2f}")
