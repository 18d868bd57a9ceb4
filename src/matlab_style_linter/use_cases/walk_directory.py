"""Use Case: Walk a file or directory tree and aggregate per-file reports."""

import logging
from typing import Optional, Sequence

from matlab_style_linter.domain.constants import SOURCE_EXTENSION
from matlab_style_linter.domain.entities import (
    AggregateReport,
    Rule,
    StyleCheckOptions,
    merge_reports,
)
from matlab_style_linter.domain.errors import ReplaceFailedError
from matlab_style_linter.domain.protocols import FileSystemProtocol, TelemetryPort
from matlab_style_linter.use_cases.scan_file import ScanFileUseCase

logger = logging.getLogger(__name__)


class WalkDirectoryUseCase:
    """
    Enumerate a directory in listing order, scanning source files and
    descending into subdirectories when recursion is enabled.

    Failures stay local to the file that caused them: they are reported
    through telemetry and the walk continues with the siblings.
    """

    def __init__(
        self,
        scan_file: ScanFileUseCase,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
    ) -> None:
        self.scan_file = scan_file
        self.filesystem = filesystem
        self.telemetry = telemetry

    def execute(
        self,
        path: str,
        rules: Sequence[Rule],
        options: StyleCheckOptions,
        root: Optional[str] = None,
    ) -> AggregateReport:
        """Return the aggregate for ``path`` (a source file or a directory)."""
        root = root if root is not None else path
        name = self.filesystem.get_name(path, root)
        report = AggregateReport(name=name)
        if self.filesystem.is_directory(path):
            return self._walk(path, rules, options, root, visited=set())
        if self.filesystem.suffix(path) != SOURCE_EXTENSION:
            self.telemetry.warning(f"Skipping non-MATLAB file: {name}")
            return report
        return self._merge_file(report, path, rules, options, root)

    def _walk(
        self,
        path: str,
        rules: Sequence[Rule],
        options: StyleCheckOptions,
        root: str,
        visited: set[tuple[int, int]],
    ) -> AggregateReport:
        # Symlinked directories can point back up the tree.
        visited.add(self.filesystem.identity(path))
        report = AggregateReport(name=self.filesystem.get_name(path, root))
        for entry in self.filesystem.list_entries(path):
            if self.filesystem.is_directory(entry):
                if not options.recursive:
                    logger.debug("Skipping subdirectory (recursion disabled): %s", entry)
                    continue
                if self.filesystem.identity(entry) in visited:
                    self.telemetry.warning(
                        f"Skipping already visited directory: {self.filesystem.get_name(entry, root)}"
                    )
                    continue
                report = merge_reports(report, self._walk(entry, rules, options, root, visited))
            elif self.filesystem.suffix(entry) == SOURCE_EXTENSION:
                report = self._merge_file(report, entry, rules, options, root)
            else:
                self.telemetry.warning(f"Skipping non-MATLAB file: {self.filesystem.get_name(entry, root)}")
        return report

    def _merge_file(
        self,
        report: AggregateReport,
        path: str,
        rules: Sequence[Rule],
        options: StyleCheckOptions,
        root: str,
    ) -> AggregateReport:
        name = self.filesystem.get_name(path, root)
        self.telemetry.step(f"Evaluating: {name}")
        try:
            file_report = self.scan_file.execute(path, rules, options, display_name=name)
        except ReplaceFailedError as exc:
            self.telemetry.error(f"{exc}. Original file left unchanged.")
            return merge_reports(report, exc.report.without_fixes())
        except (OSError, UnicodeDecodeError) as exc:
            self.telemetry.error(f"Could not read {name}: {exc}")
            return report
        return merge_reports(report, file_report)
