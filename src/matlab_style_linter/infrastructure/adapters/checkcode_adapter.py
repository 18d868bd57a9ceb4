"""Adapter for the MATLAB code checker (mlint / checkcode)."""

import logging
import re
import subprocess
from typing import List, Optional, Sequence

from matlab_style_linter.domain.constants import CHECKER_TIMEOUT_SECONDS, DEFAULT_CHECKER_COMMAND
from matlab_style_linter.domain.entities import CheckerResult
from matlab_style_linter.domain.protocols import ComplexityCheckerProtocol, TelemetryPort

logger = logging.getLogger(__name__)


class CheckcodeAdapter(ComplexityCheckerProtocol):
    """
    Run the MATLAB code checker on one file and derive a complexity score.

    The checker is a black box: its advisory messages are collected as-is and
    the score is the sum of every "McCabe complexity of ... is N" value. With
    ``legacy_digit_sum`` the score is instead the sum of every number found in
    any advisory message.
    """

    # Pattern: L 12 (C 5-9): [ID: ]message
    _LINE_PATTERN = re.compile(r"^L\s+(\d+)\s+\(C\s+([\d-]+)\):\s*(?:(\w+):\s+)?(.*)$")
    _MCCABE_PATTERN = re.compile(r"McCabe (?:cyclomatic )?complexity of .*? is (\d+)")
    _NUMBER_PATTERN = re.compile(r"\d+")

    def __init__(
        self,
        command: Optional[Sequence[str]] = None,
        telemetry: Optional[TelemetryPort] = None,
        legacy_digit_sum: bool = False,
        timeout: int = CHECKER_TIMEOUT_SECONDS,
    ) -> None:
        self.command = list(command) if command else list(DEFAULT_CHECKER_COMMAND)
        self.telemetry = telemetry
        self.legacy_digit_sum = legacy_digit_sum
        self.timeout = timeout
        self._missing_reported = False

    def check(self, file_path: str) -> CheckerResult:
        """Run the checker on file_path. Failures yield an empty result and a warning."""
        try:
            result = subprocess.run(
                [*self.command, file_path],
                capture_output=True,
                text=True,
                check=False,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            if not self._missing_reported:
                self._warn(
                    f"Code checker '{self.command[0]}' not found; complexity scores will be 0. "
                    "Install MATLAB or set checker_command in [tool.matlab-style]."
                )
                self._missing_reported = True
            return CheckerResult()
        except subprocess.TimeoutExpired:
            self._warn(f"Code checker timed out after {self.timeout}s on {file_path}")
            return CheckerResult()
        except OSError as e:
            self._warn(f"Code checker failed on {file_path}: {e}")
            return CheckerResult()

        # mlint reports on stderr; some wrappers use stdout.
        output = "\n".join(part for part in (result.stdout, result.stderr) if part)
        logger.debug("Raw checker output for %s:\n%s", file_path, output)
        advisories = self._parse_output(output)
        return CheckerResult(score=self.score(advisories), advisories=tuple(advisories))

    def _parse_output(self, output: str) -> List[str]:
        advisories = []
        for line in output.splitlines():
            match = self._LINE_PATTERN.match(line.strip())
            if match:
                line_num, column, _msg_id, message = match.groups()
                advisories.append(f"L {line_num} (C {column}): {message}")
        return advisories

    def score(self, advisories: Sequence[str]) -> int:
        """Complexity score for a file's advisory messages."""
        total = 0
        for advisory in advisories:
            message = advisory.split(": ", 1)[-1]
            if self.legacy_digit_sum:
                total += sum(int(n) for n in self._NUMBER_PATTERN.findall(message))
                continue
            match = self._MCCABE_PATTERN.search(message)
            if match:
                total += int(match.group(1))
        return total

    def _warn(self, message: str) -> None:
        if self.telemetry:
            self.telemetry.warning(message)
        else:
            logger.warning(message)


class NullComplexityChecker(ComplexityCheckerProtocol):
    """Used when the external checker is disabled: every file scores 0."""

    def check(self, file_path: str) -> CheckerResult:
        return CheckerResult()
