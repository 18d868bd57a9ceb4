"""Use Case: Run a style check on a file or directory target."""

from typing import Optional, Sequence

from matlab_style_linter.domain.constants import SOURCE_EXTENSION
from matlab_style_linter.domain.entities import AggregateReport, Rule, StyleCheckOptions
from matlab_style_linter.domain.protocols import (
    FileSystemProtocol,
    StyleReporterProtocol,
    TelemetryPort,
)
from matlab_style_linter.domain.rules import build_rules
from matlab_style_linter.use_cases.walk_directory import WalkDirectoryUseCase


class RunStyleCheckUseCase:
    """Dispatch a target to the walker and report the run summary."""

    def __init__(
        self,
        walker: WalkDirectoryUseCase,
        filesystem: FileSystemProtocol,
        reporter: StyleReporterProtocol,
        telemetry: TelemetryPort,
    ) -> None:
        self.walker = walker
        self.filesystem = filesystem
        self.reporter = reporter
        self.telemetry = telemetry

    def execute(
        self,
        target: str,
        options: Optional[StyleCheckOptions] = None,
        rules: Optional[Sequence[Rule]] = None,
    ) -> AggregateReport:
        """
        Check ``target`` and return the finished aggregate.

        A target that is neither a directory nor a source file is skipped with
        a notice and yields an empty aggregate.
        """
        options = options or StyleCheckOptions()
        rules = build_rules() if rules is None else rules

        is_dir = self.filesystem.is_directory(target)
        is_source = (
            self.filesystem.is_file(target)
            and self.filesystem.suffix(target) == SOURCE_EXTENSION
        )
        if not (is_dir or is_source):
            self.telemetry.warning(f"Skipping {target}: not a directory or a {SOURCE_EXTENSION} file.")
            return AggregateReport(name=target)

        self.telemetry.step(f"Starting style check for: {target}")
        report = self.walker.execute(target, rules, options)
        self.reporter.report_summary(report, fix=options.fix)
        return report
