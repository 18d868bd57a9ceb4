"""Use Case: Evaluate one source line against the rule table."""

from typing import Sequence, cast

from matlab_style_linter.domain.constants import COMMENT_MARKER
from matlab_style_linter.domain.entities import MatchSet, PatternRule, PredicateRule, Rule, RuleKind


def is_comment_line(line: str) -> bool:
    """True when the first non-blank character is the comment marker."""
    return line.lstrip().startswith(COMMENT_MARKER)


class LineEvaluator:
    """Apply every rule to a single line and collect match positions. Prints nothing."""

    def evaluate(self, line: str, rules: Sequence[Rule]) -> dict[int, MatchSet]:
        """
        Map each rule index to the MatchSet it produced on ``line``.

        Rules are visited in registry order. Columns within a MatchSet are
        1-based and ascending. Callers skip empty and comment lines before
        calling this.
        """
        return {index: self.match(line, rule) for index, rule in enumerate(rules)}

    def match(self, line: str, rule: Rule) -> MatchSet:
        """Apply one rule to one line."""
        if rule.kind is RuleKind.PATTERN:
            pattern_rule = cast(PatternRule, rule)
            return MatchSet(tuple(m.start() + 1 for m in pattern_rule.pattern.finditer(line)))
        if rule.kind is RuleKind.PREDICATE:
            predicate_rule = cast(PredicateRule, rule)
            if predicate_rule.test(line):
                return MatchSet((predicate_rule.fixed_offset,))
            return MatchSet()
        raise TypeError(f"Unknown rule kind: {rule.kind!r}")
