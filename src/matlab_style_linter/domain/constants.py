"""
MATLAB Style Linter: shared constants
"""

_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_MSTYLE_ART: str = r"""
   __  ___  _____ __        __
  /  |/  / / ___// /___  __/ /__
 / /|_/ /  \__ \/ __/ / / / / _ \   Style Check
/ /  / /  ___/ / /_/ /_/ / /  __/   for MATLAB sources
/_/  /_/  /____/\__/\__, /_/\___/
                   /____/
"""
MSTYLE_BANNER = _CYAN + _MSTYLE_ART + _RESET

SOURCE_EXTENSION: str = ".m"
COMMENT_MARKER: str = "%"
# Kept on rewrite but never linted.
BYTE_ORDER_MARK: str = "\ufeff"

# Predicate rules report at this column; it is also where the caret diagram truncates.
MAX_LINE_LENGTH: int = 80

CONFIG_SECTION: str = "matlab-style"
DEFAULT_CHECKER_COMMAND: list[str] = ["mlint", "-cyc", "-id"]
DEFAULT_ENCODING: str = "utf-8"
CHECKER_TIMEOUT_SECONDS: int = 120

# Guidelines from "MATLAB Style Guidelines 2.0" this tool does not check.
UNCHECKED_GUIDELINES: tuple[str, ...] = (
    "Anything in a comment is ignored.",
    "Header comments to be read with help <filename>.",
    "Variable names should be legible.",
    "Reduce 3 or more blank lines to 2 blank lines (use cells).",
    "Proofread indentation (hit ctrl-a ctrl-i).",
    "Source control (svn, git, hg, etc.).",
    "Left hand zeros on decimal literals.",
    "i/j used as loop variables (suggest ii, jj).",
)
