from dataclasses import dataclass, field, replace
from enum import Enum
from re import Pattern
from typing import Callable, Iterator, Union

from matlab_style_linter.domain.constants import MAX_LINE_LENGTH


class RuleKind(Enum):
    """The two shapes a style rule can take."""
    PATTERN = "pattern"
    PREDICATE = "predicate"


@dataclass(frozen=True)
class PatternRule:
    """
    A textual match-and-replace rule.

    Every non-overlapping match of ``pattern`` in a line is one violation.
    ``replacement`` is an ``re.sub`` template and may reference the pattern's
    named groups.
    """
    pattern: Pattern[str]
    replacement: str
    reason: str

    @property
    def kind(self) -> RuleKind:
        return RuleKind.PATTERN


@dataclass(frozen=True)
class PredicateRule:
    """
    A whole-line boolean test with no automatic fix.

    When ``test`` is true the rule reports a single violation at ``fixed_offset``.
    """
    test: Callable[[str], bool]
    reason: str
    fixed_offset: int = MAX_LINE_LENGTH

    @property
    def kind(self) -> RuleKind:
        return RuleKind.PREDICATE


Rule = Union[PatternRule, PredicateRule]


@dataclass(frozen=True)
class MatchSet:
    """1-based column offsets where one rule fired on one line, ascending."""
    columns: tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.columns)

    def __bool__(self) -> bool:
        return bool(self.columns)

    def __iter__(self) -> Iterator[int]:
        return iter(self.columns)

    def describe(self) -> str:
        """Render the columns the way the console report shows them, e.g. ``[4 7]``."""
        return "[" + " ".join(str(c) for c in self.columns) + "]"

    def markers(self) -> str:
        """A marker line with ``^`` under every column and ``-`` before them."""
        if not self.columns:
            return ""
        markers = ["-"] * max(self.columns)
        for column in self.columns:
            markers[column - 1] = "^"
        return "".join(markers)


@dataclass(frozen=True)
class FileReport:
    """Per-file tally of violations, fixes and the checker's complexity score."""
    name: str
    per_rule_reason: tuple[str, ...]
    per_rule_error_count: tuple[int, ...]
    per_rule_fix_count: tuple[int, ...]
    complexity_score: int = 0
    advisories: tuple[str, ...] = ()

    @property
    def total_errors(self) -> int:
        return sum(self.per_rule_error_count)

    @property
    def total_fixes(self) -> int:
        return sum(self.per_rule_fix_count)

    def without_fixes(self) -> "FileReport":
        """
        Return a copy that reports no applied fixes.
        Used when a rewrite could not be persisted.
        """
        return replace(
            self, per_rule_fix_count=tuple(0 for _ in self.per_rule_fix_count)
        )

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for reporters."""
        return {
            "name": self.name,
            "errors": self.total_errors,
            "fixes": self.total_fixes,
            "complexity": self.complexity_score,
        }


@dataclass(frozen=True)
class AggregateReport:
    """
    Recursive merge of FileReports across a directory tree.

    ``file_reports`` keeps the tree shape (a child may itself be an
    AggregateReport). The three per-file sequences are flattened across the
    whole subtree, in traversal order.
    """
    name: str = ""
    file_reports: tuple[Union[FileReport, "AggregateReport"], ...] = ()
    complexity_scores: tuple[int, ...] = ()
    total_errors_per_file: tuple[int, ...] = ()
    total_fixes_per_file: tuple[int, ...] = ()

    @property
    def files_analyzed(self) -> int:
        return len(self.total_errors_per_file)

    @property
    def total_errors(self) -> int:
        return sum(self.total_errors_per_file)

    @property
    def total_fixes(self) -> int:
        return sum(self.total_fixes_per_file)

    @property
    def average_complexity(self) -> float:
        if not self.complexity_scores:
            return 0.0
        return sum(self.complexity_scores) / len(self.complexity_scores)

    def iter_files(self) -> Iterator[FileReport]:
        """Yield every FileReport in the subtree, depth first, in traversal order."""
        for child in self.file_reports:
            if isinstance(child, AggregateReport):
                yield from child.iter_files()
            else:
                yield child

    @classmethod
    def of_file(cls, report: FileReport) -> "AggregateReport":
        """Wrap a single FileReport as a singleton aggregate."""
        return merge_reports(cls(name=report.name), report)


def merge_reports(
    parent: AggregateReport, child: Union[FileReport, AggregateReport]
) -> AggregateReport:
    """
    Append ``child`` to ``parent`` and return the new aggregate.

    Pure: neither argument is modified. A FileReport adds one file entry; an
    AggregateReport is nested as a single entry while its flattened per-file
    sequences are concatenated, so totals are associative.
    """
    if isinstance(child, AggregateReport):
        scores = child.complexity_scores
        errors = child.total_errors_per_file
        fixes = child.total_fixes_per_file
    else:
        scores = (child.complexity_score,)
        errors = (child.total_errors,)
        fixes = (child.total_fixes,)
    return AggregateReport(
        name=parent.name,
        file_reports=parent.file_reports + (child,),
        complexity_scores=parent.complexity_scores + scores,
        total_errors_per_file=parent.total_errors_per_file + errors,
        total_fixes_per_file=parent.total_fixes_per_file + fixes,
    )


@dataclass(frozen=True)
class StyleCheckOptions:
    """Options recognized by a style-check run."""
    recursive: bool = False
    verbose: bool = False
    fix: bool = False

    @property
    def interactive(self) -> bool:
        """Fixes need operator confirmation when running verbose."""
        return self.verbose and self.fix


@dataclass(frozen=True)
class FixPrompt:
    """What the operator sees before accepting one fix."""
    line_number: int
    original: str
    markers: str
    candidate: str
    reason: str

    def render(self) -> str:
        return "\n".join([
            f"L {self.line_number}: {self.reason}",
            f"  {self.original}",
            f"  {self.markers}",
            f"  {self.candidate}",
        ])


@dataclass(frozen=True)
class CheckerResult:
    """Output of the external code checker for one file."""
    score: int = 0
    advisories: tuple[str, ...] = field(default_factory=tuple)
