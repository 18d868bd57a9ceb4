from typing import TYPE_CHECKING, ContextManager, Iterator, Optional, Protocol, TextIO

if TYPE_CHECKING:
    from matlab_style_linter.domain.entities import (
        AggregateReport,
        CheckerResult,
        FileReport,
        FixPrompt,
        MatchSet,
    )


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class ConfirmPort(Protocol):
    """Blocking, one-shot operator decision for a single fix."""

    def __call__(self, prompt: "FixPrompt") -> bool: ...


class ComplexityCheckerProtocol(Protocol):
    """Protocol for the external code checker run once per file."""

    def check(self, file_path: str) -> "CheckerResult":
        """Run the checker on one file. Never raises for checker failures."""
        ...


class StyleReporterProtocol(Protocol):
    """Protocol for the line-oriented console report."""

    def report_violation(
        self,
        line_number: int,
        line: str,
        match_set: "MatchSet",
        reason: str,
        verbose: bool,
    ) -> None:
        """Report one rule firing on one line."""
        ...

    def report_file(self, report: "FileReport", fix: bool, verbose: bool = False) -> None:
        """Report the tally for a finished file."""
        ...

    def report_summary(self, report: "AggregateReport", fix: bool) -> None:
        """Report the totals for a whole run."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        ...

    def is_file(self, path: str) -> bool:
        """Check if path is a regular file."""
        ...

    def suffix(self, path: str) -> str:
        """Return the path's final extension, including the dot."""
        ...

    def list_entries(self, path: str) -> list[str]:
        """Return the directory's entries in directory-listing order."""
        ...

    def identity(self, path: str) -> tuple[int, int]:
        """Return (device, inode) of the directory or file path resolves to."""
        ...

    def open_lines(self, path: str, encoding: str = "utf-8") -> ContextManager[Iterator[str]]:
        """Open a file for line-based reading. Lines keep their terminators."""
        ...

    def temp_sibling(self, path: str, encoding: str = "utf-8") -> ContextManager[tuple[TextIO, str]]:
        """Yield (handle, temp_path) for a temporary file beside path. Removed if the body raises."""
        ...

    def replace(self, source: str, destination: str) -> None:
        """Atomically move source over destination."""
        ...

    def discard(self, path: str) -> None:
        """Remove path if it exists."""
        ...

    def get_name(self, path: str, root: Optional[str] = None) -> str:
        """Return a display name for path, relative to root when possible."""
        ...
