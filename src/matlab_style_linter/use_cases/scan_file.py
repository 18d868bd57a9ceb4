"""Use Case: Scan one source file line by line, optionally rewriting it in place."""

import logging
from typing import Iterable, Optional, Sequence, TextIO

from matlab_style_linter.domain.constants import BYTE_ORDER_MARK, DEFAULT_ENCODING, SOURCE_EXTENSION
from matlab_style_linter.domain.entities import (
    FileReport,
    PatternRule,
    Rule,
    StyleCheckOptions,
)
from matlab_style_linter.domain.errors import ReplaceFailedError, UnsupportedExtensionError
from matlab_style_linter.domain.protocols import (
    ComplexityCheckerProtocol,
    FileSystemProtocol,
    StyleReporterProtocol,
)
from matlab_style_linter.use_cases.apply_fixes import FixTranslator
from matlab_style_linter.use_cases.evaluate_line import LineEvaluator, is_comment_line

logger = logging.getLogger(__name__)


def split_line_ending(raw: str) -> tuple[str, str]:
    """Split a raw line into its text and its terminator ("" on the last line)."""
    for ending in ("\r\n", "\n", "\r"):
        if raw.endswith(ending):
            return (raw[: -len(ending)], ending)
    return (raw, "")


class ScanFileUseCase:
    """Drive line evaluation over one file and tally per-rule errors and fixes."""

    def __init__(
        self,
        filesystem: FileSystemProtocol,
        checker: ComplexityCheckerProtocol,
        reporter: StyleReporterProtocol,
        evaluator: Optional[LineEvaluator] = None,
        fix_translator: Optional[FixTranslator] = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self.filesystem = filesystem
        self.checker = checker
        self.reporter = reporter
        self.evaluator = evaluator or LineEvaluator()
        self.fix_translator = fix_translator or FixTranslator()
        self.encoding = encoding

    def execute(
        self,
        path: str,
        rules: Sequence[Rule],
        options: StyleCheckOptions,
        display_name: Optional[str] = None,
    ) -> FileReport:
        """
        Scan ``path`` and return its FileReport.

        Raises UnsupportedExtensionError for non-source files and
        ReplaceFailedError when a fixed file cannot be swapped in. Read
        failures propagate as OSError. Violations are never raised.
        """
        extension = self.filesystem.suffix(path)
        if extension != SOURCE_EXTENSION:
            raise UnsupportedExtensionError(path, extension)

        name = display_name or self.filesystem.get_name(path)
        checked = self.checker.check(path)
        errors = [0] * len(rules)
        fixes = [0] * len(rules)

        if options.fix:
            with self.filesystem.open_lines(path, self.encoding) as lines, \
                    self.filesystem.temp_sibling(path, self.encoding) as (out, temp_path):
                self._scan_lines(lines, rules, options, errors, fixes, out)
        else:
            with self.filesystem.open_lines(path, self.encoding) as lines:
                self._scan_lines(lines, rules, options, errors, fixes, None)

        report = FileReport(
            name=name,
            per_rule_reason=tuple(rule.reason for rule in rules),
            per_rule_error_count=tuple(errors),
            per_rule_fix_count=tuple(fixes),
            complexity_score=checked.score,
            advisories=checked.advisories,
        )

        if options.fix:
            try:
                self.filesystem.replace(temp_path, path)
            except OSError as exc:
                self.filesystem.discard(temp_path)
                self.reporter.report_file(report.without_fixes(), fix=True, verbose=options.verbose)
                raise ReplaceFailedError(path, report, str(exc)) from exc
            logger.debug("Rewrote %s (%d fixes)", path, report.total_fixes)

        self.reporter.report_file(report, fix=options.fix, verbose=options.verbose)
        return report

    def _scan_lines(
        self,
        lines: Iterable[str],
        rules: Sequence[Rule],
        options: StyleCheckOptions,
        errors: list[int],
        fixes: list[int],
        out: Optional[TextIO],
    ) -> None:
        for line_number, raw in enumerate(lines, start=1):
            text, ending = split_line_ending(raw)
            bom = ""
            if line_number == 1 and text.startswith(BYTE_ORDER_MARK):
                bom, text = BYTE_ORDER_MARK, text[len(BYTE_ORDER_MARK):]
            if text and not is_comment_line(text):
                text = self._check_line(line_number, text, rules, options, errors, fixes)
            if out is not None:
                out.write(bom + text + ending)

    def _check_line(
        self,
        line_number: int,
        line: str,
        rules: Sequence[Rule],
        options: StyleCheckOptions,
        errors: list[int],
        fixes: list[int],
    ) -> str:
        """Tally one line and return it, rewritten when fixes were accepted."""
        matches = self.evaluator.evaluate(line, rules)
        current = line
        for index, rule in enumerate(rules):
            match_set = matches[index]
            if not match_set:
                continue
            errors[index] += len(match_set)
            self.reporter.report_violation(line_number, line, match_set, rule.reason, options.verbose)
            if not (options.fix and isinstance(rule, PatternRule)):
                continue
            # Earlier rules may already have rewritten the line.
            current, fixed = self.fix_translator.apply_fix(
                current,
                rule,
                self.evaluator.match(current, rule),
                interactive=options.interactive,
                line_number=line_number,
            )
            if fixed:
                fixes[index] += len(match_set)
        return current
