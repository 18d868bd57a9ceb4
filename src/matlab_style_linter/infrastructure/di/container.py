from typing import TYPE_CHECKING, Any, Optional, cast

from matlab_style_linter.domain.config import ConfigurationLoader
from matlab_style_linter.infrastructure.adapters.checkcode_adapter import (
    CheckcodeAdapter,
    NullComplexityChecker,
)
from matlab_style_linter.infrastructure.config_file_loader import ConfigFileLoader
from matlab_style_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from matlab_style_linter.infrastructure.reporters import TerminalStyleReporter
from matlab_style_linter.interface.confirm import KeystrokeConfirm
from matlab_style_linter.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from matlab_style_linter.domain.protocols import (
        ComplexityCheckerProtocol,
        ConfirmPort,
        FileSystemProtocol,
        StyleReporterProtocol,
        TelemetryPort,
    )


class StyleCheckContainer:
    """Dependency Injection Container for the MATLAB style linter."""

    _instance: Optional["StyleCheckContainer"] = None

    def __init__(self, config: Optional[dict[str, object]] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config)

    def _register_defaults(self, config: Optional[dict[str, object]]) -> None:
        """Register default implementations for protocols."""
        config_dict = config if config is not None else ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict)
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry("MSTYLE", "cyan", "Style check online")
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("TerminalStyleReporter", TerminalStyleReporter())
        self.register_singleton("KeystrokeConfirm", KeystrokeConfirm())

        if config_loader.checker_enabled:
            checker: Any = CheckcodeAdapter(command=config_loader.checker_command, telemetry=telemetry)
        else:
            checker = NullComplexityChecker()
        self.register_singleton("ComplexityChecker", checker)

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_reporter(self) -> "StyleReporterProtocol":
        """Return the console style reporter."""
        return cast("StyleReporterProtocol", self.get("TerminalStyleReporter"))

    def get_complexity_checker(self) -> "ComplexityCheckerProtocol":
        """Return the external code checker (or the null checker when disabled)."""
        return cast("ComplexityCheckerProtocol", self.get("ComplexityChecker"))

    def get_confirm(self) -> "ConfirmPort":
        """Return the interactive fix confirmation."""
        return cast("ConfirmPort", self.get("KeystrokeConfirm"))

    @classmethod
    def get_instance(cls) -> "StyleCheckContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = StyleCheckContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
