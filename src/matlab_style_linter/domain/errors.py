"""Domain errors raised by the scanner and fix translator."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matlab_style_linter.domain.entities import FileReport


class StyleCheckError(Exception):
    """Base class for all style-check failures."""


class UnsupportedExtensionError(StyleCheckError):
    """A file was dispatched to the scanner without the recognized source extension."""

    def __init__(self, path: str, extension: str) -> None:
        super().__init__(f"Unsupported file extension '{extension}': {path}")
        self.path = path
        self.extension = extension


class ReplaceFailedError(StyleCheckError):
    """The rewritten file could not replace the original. The original is left intact."""

    def __init__(self, path: str, report: "FileReport", reason: str) -> None:
        super().__init__(f"Could not replace {path}: {reason}")
        self.path = path
        self.report = report


class UnfixableRuleError(StyleCheckError):
    """A fix was requested for a rule that has no replacement (predicate rules)."""
