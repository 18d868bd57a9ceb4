"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from matlab_style_linter.infrastructure.di.container import StyleCheckContainer
from matlab_style_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = StyleCheckContainer.get_instance()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        checker=container.get_complexity_checker(),
        reporter=container.get_reporter(),
        confirm=container.get_confirm(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
