"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse

import uvicorn

from app.api import api_build_route_table
from app.bootstrap import bootstrap_create_application
from app.config import config_load_settings
from app.observability import observability_configure_logging


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="CI/CD POC service runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "routes"),
        help="Runtime command: `api` starts server, `routes` prints the route table",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args(argv)

    if parsed_arguments.command == "routes":
        main_print_route_table()
        return

    settings = config_load_settings()
    observability_configure_logging(level=settings.log_level, fmt=settings.resolved_log_format)
    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
    )


def main_print_route_table() -> None:
    """Print one `METHOD PATH NAME` line per registered route."""

    for route in api_build_route_table():
        print(f"{route.method} {route.path} {route.name}")


if __name__ == "__main__":
    main()
