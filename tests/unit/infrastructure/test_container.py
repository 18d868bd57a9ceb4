from unittest.mock import patch

import pytest

from matlab_style_linter.domain.config import ConfigurationLoader
from matlab_style_linter.infrastructure.adapters.checkcode_adapter import (
    CheckcodeAdapter,
    NullComplexityChecker,
)
from matlab_style_linter.infrastructure.di.container import StyleCheckContainer
from matlab_style_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from matlab_style_linter.infrastructure.reporters import TerminalStyleReporter
from matlab_style_linter.interface.confirm import KeystrokeConfirm
from matlab_style_linter.interface.telemetry import ProjectTelemetry


def test_default_registrations() -> None:
    container = StyleCheckContainer(config={"checker_command": ["checkcode", "-cyc"]})

    assert isinstance(container.get_config_loader(), ConfigurationLoader)
    assert isinstance(container.get_telemetry_port(), ProjectTelemetry)
    assert isinstance(container.get_filesystem_gateway(), FileSystemGateway)
    assert isinstance(container.get_reporter(), TerminalStyleReporter)
    assert isinstance(container.get_confirm(), KeystrokeConfirm)
    checker = container.get_complexity_checker()
    assert isinstance(checker, CheckcodeAdapter)
    assert checker.command == ["checkcode", "-cyc"]


def test_disabled_checker_uses_null_checker() -> None:
    container = StyleCheckContainer(config={"checker_enabled": False})
    assert isinstance(container.get_complexity_checker(), NullComplexityChecker)


def test_reads_pyproject_when_no_config_given() -> None:
    with patch(
        "matlab_style_linter.infrastructure.di.container.ConfigFileLoader.load_config_from_fs",
        return_value={"fix": True},
    ) as mock_load:
        container = StyleCheckContainer()
    mock_load.assert_called_once()
    assert container.get_config_loader().fix is True


def test_unknown_key_raises() -> None:
    container = StyleCheckContainer(config={})
    with pytest.raises(ValueError, match="not registered"):
        container.get("Nope")


def test_instance_is_shared_until_reset() -> None:
    StyleCheckContainer.reset()
    with patch(
        "matlab_style_linter.infrastructure.di.container.ConfigFileLoader.load_config_from_fs",
        return_value={},
    ):
        first = StyleCheckContainer.get_instance()
        assert StyleCheckContainer.get_instance() is first
        StyleCheckContainer.reset()
        assert StyleCheckContainer.get_instance() is not first
    StyleCheckContainer.reset()
