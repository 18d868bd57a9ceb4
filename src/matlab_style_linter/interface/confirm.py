"""Interactive, single-keystroke fix confirmation."""

from typing import Any, Callable

import click

from matlab_style_linter.domain.entities import FixPrompt


class KeystrokeConfirm:
    """
    Show the original line, the caret markers and the candidate, then block
    for one keystroke. Only 'y' or 'Y' accepts the fix.
    """

    def __init__(
        self,
        getchar: Callable[[], str] = click.getchar,
        echo: Callable[..., Any] = click.echo,
    ) -> None:
        self._getchar = getchar
        self._echo = echo

    def __call__(self, prompt: FixPrompt) -> bool:
        self._echo(prompt.render())
        self._echo("Apply fix? [y/N] ", nl=False)
        key = self._getchar()
        self._echo(key)
        return key in ("y", "Y")
