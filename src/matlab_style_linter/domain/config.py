"""Configuration loader for linter settings."""

import logging
from typing import Optional

from matlab_style_linter.domain.constants import DEFAULT_CHECKER_COMMAND, DEFAULT_ENCODING
from matlab_style_linter.domain.entities import StyleCheckOptions

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Typed view over the [tool.matlab-style] section of pyproject.toml.

    The raw dict comes from ConfigFileLoader (infrastructure). Values of the
    wrong type are ignored with a warning and the default is used instead.
    """

    _BOOL_KEYS: tuple[str, ...] = ("recursive", "verbose", "fix", "checker_enabled")

    def __init__(self, config: Optional[dict[str, object]] = None) -> None:
        self._config: dict[str, object] = dict(config or {})
        self.validate_config(self._config)

    @property
    def config(self) -> dict[str, object]:
        return dict(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Drop values of the wrong type, warning about each one."""
        for key in self._BOOL_KEYS:
            if key in config and not isinstance(config[key], bool):
                logging.warning(
                    "Configuration Warning: '%s' must be a boolean, got %r. Using default.",
                    key, config[key],
                )
                del config[key]

        command = config.get("checker_command")
        if command is not None and not (
            isinstance(command, list) and command and all(isinstance(c, str) for c in command)
        ):
            logging.warning(
                "Configuration Warning: 'checker_command' must be a non-empty list of strings. "
                "Using default %s.", DEFAULT_CHECKER_COMMAND,
            )
            del config["checker_command"]

        encoding = config.get("encoding")
        if encoding is not None and not isinstance(encoding, str):
            logging.warning("Configuration Warning: 'encoding' must be a string. Using default.")
            del config["encoding"]

    def _get_bool(self, key: str, default: bool = False) -> bool:
        value = self._config.get(key, default)
        return value if isinstance(value, bool) else default

    @property
    def recursive(self) -> bool:
        return self._get_bool("recursive")

    @property
    def verbose(self) -> bool:
        return self._get_bool("verbose")

    @property
    def fix(self) -> bool:
        return self._get_bool("fix")

    @property
    def checker_enabled(self) -> bool:
        return self._get_bool("checker_enabled", True)

    @property
    def checker_command(self) -> list[str]:
        command = self._config.get("checker_command")
        if isinstance(command, list):
            return [str(c) for c in command]
        return list(DEFAULT_CHECKER_COMMAND)

    @property
    def encoding(self) -> str:
        value = self._config.get("encoding", DEFAULT_ENCODING)
        return value if isinstance(value, str) else DEFAULT_ENCODING

    def to_options(
        self,
        recursive: Optional[bool] = None,
        verbose: Optional[bool] = None,
        fix: Optional[bool] = None,
    ) -> StyleCheckOptions:
        """Build run options; explicit arguments win over configured values."""
        options = StyleCheckOptions(
            recursive=self.recursive if recursive is None else recursive,
            verbose=self.verbose if verbose is None else verbose,
            fix=self.fix if fix is None else fix,
        )
        logger.debug("Resolved options: %s", options)
        return options
