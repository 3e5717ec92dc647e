"""
Serve command for the SchemaBind CLI.

Usage:
    schemabind serve TARGET [--host HOST] [--port PORT]
"""

import argparse
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schemabind.cli.main import CLIContext


def register(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """
    Register the serve command with the parser.

    Args:
        subparsers: Subparsers action to add command to.
    """
    parser = subparsers.add_parser(
        "serve",
        help="Run an aiohttp application",
        description=(
            "Run the aiohttp application named by TARGET (module:attribute). "
            "For an (APISpec, application) pair the documentation endpoints are "
            "mounted using the docs configuration section."
        ),
    )
    parser.add_argument(
        "target",
        metavar="TARGET",
        help="aiohttp application, (APISpec, application) pair, or a factory for either",
    )
    parser.add_argument(
        "--host",
        metavar="HOST",
        help="Host address to bind to (default: from configuration)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        metavar="PORT",
        help="Port to listen on (default: from configuration)",
    )
    parser.set_defaults(func=run_serve)


def run_serve(args: argparse.Namespace, ctx: "CLIContext") -> int:
    """
    Execute the serve command.

    Args:
        args: Parsed command-line arguments.
        ctx: CLI context.

    Returns:
        Exit code.
    """
    from schemabind.cli.main import EXIT_SUCCESS
    from schemabind.cli.targets import resolve_application
    from schemabind.server.app import run_server

    server_config = ctx.config.server
    host = args.host or server_config.host
    port = server_config.port if args.port is None else args.port

    app = resolve_application(args.target, ctx.config.docs)
    ctx.logger.debug("Serving %s", args.target)
    run_server(app, host=host, port=port)
    return EXIT_SUCCESS
