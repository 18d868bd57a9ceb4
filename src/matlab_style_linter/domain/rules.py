"""The style rule table, built fresh on every call."""

import re

from matlab_style_linter.domain.constants import MAX_LINE_LENGTH
from matlab_style_linter.domain.entities import PatternRule, PredicateRule, Rule


def _exceeds_line_length(line: str) -> bool:
    return len(line.rstrip("\r\n")) > MAX_LINE_LENGTH


def build_rules() -> tuple[Rule, ...]:
    """
    Return the ordered, immutable rule table.

    Order only decides report order. New checks are appended here; nothing
    else in the linter branches on which rule is which.
    """
    return (
        PredicateRule(
            test=_exceeds_line_length,
            reason=f"Lines should not exceed {MAX_LINE_LENGTH} characters.",
            fixed_offset=MAX_LINE_LENGTH,
        ),
        # Whitespace around comparisons (=, >=, ~=, ...) and logical operators.
        PatternRule(
            pattern=re.compile(r"(?<=[\w\]])(?P<ls>[~&|<>=]+)"),
            replacement=r" \g<ls>",
            reason="Comparisons should begin with whitespace.",
        ),
        PatternRule(
            pattern=re.compile(r"(?P<rs>[&|<>=]+)(?=[\w\[\]])"),
            replacement=r"\g<rs> ",
            reason="Comparisons should end with whitespace.",
        ),
        PatternRule(
            pattern=re.compile(r"(?P<rs>,)(?=[\w\[\]])"),
            replacement=r"\g<rs> ",
            reason="Commas should be followed by whitespace.",
        ),
        # 2+ spaces between tokens, unless an inline comment follows
        PatternRule(
            pattern=re.compile(r"(?<=[\w=])\s{2,}(?=[\w.][^%])"),
            replacement=" ",
            reason="Avoid 2+ spaces (excluding indents & inline comments).",
        ),
    )
