"""Shared fixtures for the MATLAB style linter tests.

Run pytest from the project root; pyproject.toml puts src/ on the path.
"""

from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock

import pytest

from matlab_style_linter.domain.entities import CheckerResult, Rule
from matlab_style_linter.domain.rules import build_rules
from matlab_style_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from matlab_style_linter.use_cases.apply_fixes import FixTranslator
from matlab_style_linter.use_cases.scan_file import ScanFileUseCase
from matlab_style_linter.use_cases.walk_directory import WalkDirectoryUseCase


class FakeChecker:
    """Complexity checker returning a fixed score per file name."""

    def __init__(self, scores: dict[str, int] | None = None) -> None:
        self.scores = scores or {}
        self.calls: list[str] = []

    def check(self, file_path: str) -> CheckerResult:
        self.calls.append(file_path)
        return CheckerResult(score=self.scores.get(Path(file_path).name, 0))


@pytest.fixture
def rules() -> tuple[Rule, ...]:
    return build_rules()


@pytest.fixture
def fake_checker() -> FakeChecker:
    return FakeChecker()


@pytest.fixture
def reporter() -> MagicMock:
    return MagicMock()


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()


@pytest.fixture
def make_scanner(fake_checker: FakeChecker, reporter: MagicMock) -> Callable[..., ScanFileUseCase]:
    """Build a ScanFileUseCase over the real filesystem; pass confirm= for interactive runs."""

    def _make(confirm: Callable[..., bool] | None = None, checker: object = None) -> ScanFileUseCase:
        return ScanFileUseCase(
            filesystem=FileSystemGateway(),
            checker=checker or fake_checker,
            reporter=reporter,
            fix_translator=FixTranslator(confirm=confirm),
        )

    return _make


@pytest.fixture
def make_walker(make_scanner: Callable[..., ScanFileUseCase], telemetry: MagicMock) -> Callable[..., WalkDirectoryUseCase]:
    def _make(**kwargs: object) -> WalkDirectoryUseCase:
        return WalkDirectoryUseCase(make_scanner(**kwargs), FileSystemGateway(), telemetry)

    return _make
