"""CLI entry points for the MATLAB style linter - Thin Controller using Typer."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from matlab_style_linter.domain.config import ConfigurationLoader
from matlab_style_linter.domain.constants import MSTYLE_BANNER, UNCHECKED_GUIDELINES
from matlab_style_linter.domain.entities import RuleKind
from matlab_style_linter.domain.errors import StyleCheckError
from matlab_style_linter.domain.protocols import (
    ComplexityCheckerProtocol,
    ConfirmPort,
    FileSystemProtocol,
    StyleReporterProtocol,
    TelemetryPort,
)
from matlab_style_linter.domain.rules import build_rules
from matlab_style_linter.use_cases.apply_fixes import FixTranslator
from matlab_style_linter.use_cases.run_style_check import RunStyleCheckUseCase
from matlab_style_linter.use_cases.scan_file import ScanFileUseCase
from matlab_style_linter.use_cases.walk_directory import WalkDirectoryUseCase

EXIT_CLEAN = 0
EXIT_VIOLATIONS = 1
EXIT_FAILURE = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    checker: ComplexityCheckerProtocol
    reporter: StyleReporterProtocol
    confirm: ConfirmPort


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def build_use_case(deps: CLIDependencies) -> RunStyleCheckUseCase:
        """Wire the scanner, walker and runner from the injected dependencies."""
        scan_file = ScanFileUseCase(
            filesystem=deps.filesystem,
            checker=deps.checker,
            reporter=deps.reporter,
            fix_translator=FixTranslator(confirm=deps.confirm),
            encoding=deps.config_loader.encoding,
        )
        walker = WalkDirectoryUseCase(scan_file, deps.filesystem, deps.telemetry)
        return RunStyleCheckUseCase(walker, deps.filesystem, deps.reporter, deps.telemetry)

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="matlab-style",
            help=f"{MSTYLE_BANNER}\nStyle checks and fixes for MATLAB source files.",
            add_completion=False,
        )

        @app.command()
        def check(
            target: Path = typer.Argument(..., help="A .m file or a directory to check"),  # noqa: B008
            recursive: Optional[bool] = typer.Option(
                None, "--recursive/--no-recursive", "-r/-R", help="Descend into subdirectories"),
            verbose: Optional[bool] = typer.Option(
                None, "--verbose/--quiet", "-v/-q",
                help="Print caret diagrams; with --fix, confirm every fix with a keystroke"),
            fix: Optional[bool] = typer.Option(
                None, "--fix/--no-fix", help="Rewrite offending lines in place"),
            debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
        ) -> None:
            """Check MATLAB sources against the style rules."""
            if debug:
                logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
            deps.telemetry.handshake()
            options = deps.config_loader.to_options(recursive=recursive, verbose=verbose, fix=fix)
            use_case = CLIAppFactory.build_use_case(deps)
            try:
                report = use_case.execute(str(target), options)
            except StyleCheckError as e:
                deps.telemetry.error(str(e))
                sys.exit(EXIT_FAILURE)
            if report.total_errors > report.total_fixes:
                sys.exit(EXIT_VIOLATIONS)
            sys.exit(EXIT_CLEAN)

        @app.command(name="rules")
        def list_rules() -> None:
            """List the active style rules in report order."""
            for index, rule in enumerate(build_rules(), start=1):
                fixable = "auto-fix" if rule.kind is RuleKind.PATTERN else "report-only"
                typer.echo(f"{index}. [{rule.kind.value}, {fixable}] {rule.reason}")

        @app.command()
        def unchecked() -> None:
            """List style guidelines this linter does not check."""
            typer.echo("Things not checked:")
            for item in UNCHECKED_GUIDELINES:
                typer.echo(f"\t> {item}")

        return app
