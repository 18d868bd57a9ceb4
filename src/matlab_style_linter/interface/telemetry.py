"""
MATLAB Style Linter: operator telemetry
Status messages go to stderr through rich and are mirrored into logging.
"""

import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.text import Text

from matlab_style_linter.domain.constants import MSTYLE_BANNER
from matlab_style_linter.domain.protocols import TelemetryPort

logger = logging.getLogger("matlab_style_linter")


class ProjectTelemetry(TelemetryPort):
    """Handles visual telemetry and system announcements."""

    def __init__(self, name: str, color: str, tagline: str, console: Optional[Console] = None) -> None:
        self.name = name
        self.color = color
        self.tagline = tagline
        self.console = console or Console(stderr=True, highlight=False)

    def _emit(self, prefix: str, message: str, style: Optional[str]) -> None:
        self.console.print(f"{prefix} {message}", markup=False, highlight=False, soft_wrap=True, style=style)

    def step(self, message: str) -> None:
        logger.info(message)
        self._emit(f"[{self.name}]", message, self.color)

    def warning(self, message: str) -> None:
        logger.warning(message)
        self._emit(f"[{self.name}] WARNING:", message, "yellow")

    def error(self, message: str) -> None:
        logger.error(message)
        self._emit(f"[{self.name}] ERROR:", message, "bold red")

    def handshake(self) -> None:
        """
        Announce the run.
        - Banner: interactive TTY with color enabled.
        - Plain tagline: otherwise (CI, NO_COLOR, pipes).
        """
        use_color = not os.getenv("NO_COLOR")
        if sys.stderr.isatty() and use_color:
            self.console.print(Text.from_ansi(MSTYLE_BANNER))
        else:
            self._emit(f"[{self.name}]", self.tagline, None)
