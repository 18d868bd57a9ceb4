"""Use Case: Translate a rule match into a rewritten line, with optional confirmation."""

from typing import Optional

from matlab_style_linter.domain.entities import FixPrompt, MatchSet, PatternRule, Rule
from matlab_style_linter.domain.errors import UnfixableRuleError
from matlab_style_linter.domain.protocols import ConfirmPort


class FixTranslator:
    """
    Compute the fixed form of a line for one pattern rule.

    With ``interactive`` set, each (line, rule) decision goes to the injected
    ``confirm`` capability exactly once; anything but an explicit yes keeps
    the original line.
    """

    def __init__(self, confirm: Optional[ConfirmPort] = None) -> None:
        self.confirm = confirm

    def apply_fix(
        self,
        line: str,
        rule: Rule,
        match_set: MatchSet,
        interactive: bool = False,
        line_number: int = 0,
    ) -> tuple[str, bool]:
        """Return ``(new_line, fixed)``. Predicate rules cannot be fixed."""
        if not isinstance(rule, PatternRule):
            raise UnfixableRuleError(f"Rule has no replacement: {rule.reason}")
        if not match_set:
            return (line, False)

        candidate = rule.pattern.sub(rule.replacement, line)
        if candidate == line:
            return (line, False)
        if not interactive:
            return (candidate, True)

        if self.confirm is None:
            raise ValueError("Interactive fixing requires a confirm capability")
        prompt = FixPrompt(
            line_number=line_number,
            original=line,
            markers=match_set.markers(),
            candidate=candidate,
            reason=rule.reason,
        )
        if self.confirm(prompt):
            return (candidate, True)
        return (line, False)
