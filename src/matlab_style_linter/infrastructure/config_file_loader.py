"""Load [tool.matlab-style] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

from matlab_style_linter.domain.constants import CONFIG_SECTION

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Finds the nearest pyproject.toml walking up from a start directory."""

    @staticmethod
    def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
        """Return the first pyproject.toml at or above start (default: cwd)."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if config_file.is_file():
                return config_file
        return None

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Return the [tool.matlab-style] table, or {} when there is none."""
        config_file = ConfigFileLoader.find_config_file(start)
        if config_file is None:
            return {}
        try:
            with config_file.open("rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logging.warning("Configuration Warning: could not parse %s: %s", config_file, e)
            return {}
        tool_section = data.get("tool", {}) or {}
        section = tool_section.get(CONFIG_SECTION, {}) or {}
        if not isinstance(section, dict):
            logging.warning("Configuration Warning: [tool.%s] must be a table.", CONFIG_SECTION)
            return {}
        logger.debug("Loaded [tool.%s] from %s", CONFIG_SECTION, config_file)
        return section
