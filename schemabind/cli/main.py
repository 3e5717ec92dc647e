"""
Main entry point for the SchemaBind CLI.

Exit Codes:
    0: Success
    1: General error
    2: Configuration error
    3: Target could not be loaded
"""

import argparse
import logging
import sys
from typing import Any

from schemabind.exceptions import ConfigurationError, LoadError, SchemaBindError
from schemabind.version import __version__

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_LOAD_ERROR = 3


class CLIContext:
    """
    Context object that holds CLI state and configuration.

    Attributes:
        config_path: Path to the configuration file.
        verbose: Enable verbose output.
        quiet: Suppress non-essential output.
    """

    def __init__(
        self,
        config_path: str | None = None,
        verbose: bool = False,
        quiet: bool = False,
    ) -> None:
        self.config_path = config_path
        self.verbose = verbose
        self.quiet = quiet
        self._config: Any = None
        self._logger: logging.Logger | None = None
        self._handler: logging.Handler | None = None
        self._previous_level = logging.NOTSET

    @property
    def config(self) -> Any:
        """
        Load and return configuration.

        Returns:
            SchemaBindConfig object.

        Raises:
            ConfigurationError: If configuration cannot be loaded.
        """
        if self._config is None:
            from schemabind.config.loader import ConfigLoader

            loader = ConfigLoader()
            self._config = loader.load(self.config_path)
        return self._config

    @property
    def logger(self) -> logging.Logger:
        """Get the package logger, configured from the logging section."""
        if self._logger is None:
            logging_config = self.config.logging
            self._logger = logging.getLogger("schemabind")
            self._previous_level = self._logger.level
            level = getattr(logging, logging_config.level.upper())
            if self.verbose:
                level = logging.DEBUG
            if self.quiet:
                level = logging.ERROR
            self._logger.setLevel(level)

            if self._handler is None:
                if logging_config.output_path:
                    self._handler = logging.FileHandler(logging_config.output_path)
                else:
                    self._handler = logging.StreamHandler(sys.stderr)
                self._handler.setFormatter(logging.Formatter(logging_config.format))
                self._logger.addHandler(self._handler)

        return self._logger

    def print(self, message: str, error: bool = False) -> None:
        """
        Print a message to stdout or stderr.

        Args:
            message: The message to print.
            error: If True, print to stderr.
        """
        if self.quiet and not error:
            return
        output = sys.stderr if error else sys.stdout
        print(message, file=output)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        print(f"Error: {message}", file=sys.stderr)

    def cleanup(self) -> None:
        """Detach the handler installed by this context."""
        if self._logger is None:
            return
        if self._handler is not None:
            self._logger.removeHandler(self._handler)
            self._handler.close()
            self._handler = None
        self._logger.setLevel(self._previous_level)
        self._logger = None


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="schemabind",
        description="SchemaBind: OpenAPI 3.1 documents from your routes and types",
        epilog="Use 'schemabind <command> --help' for more information on a command.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"schemabind {__version__}",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="PATH",
        help="Path to configuration file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-essential output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        metavar="<command>",
    )

    _register_commands(subparsers)

    return parser


def _register_commands(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """
    Register all command modules with the parser.

    Args:
        subparsers: Subparsers action to add commands to.
    """
    from schemabind.cli.commands import config as config_cmd
    from schemabind.cli.commands import generate as generate_cmd
    from schemabind.cli.commands import serve as serve_cmd

    generate_cmd.register(subparsers)
    serve_cmd.register(subparsers)
    config_cmd.register(subparsers)


def run_command(
    args: argparse.Namespace,
    ctx: CLIContext,
) -> int:
    """
    Execute the selected command.

    Args:
        args: Parsed command-line arguments.
        ctx: CLI context object.

    Returns:
        Exit code.
    """
    if not hasattr(args, "func"):
        return EXIT_ERROR

    try:
        return args.func(args, ctx)
    except ConfigurationError as e:
        ctx.print_error(str(e))
        return EXIT_CONFIG_ERROR
    except LoadError as e:
        ctx.print_error(str(e))
        return EXIT_LOAD_ERROR
    except SchemaBindError as e:
        ctx.print_error(str(e))
        return EXIT_ERROR
    except KeyboardInterrupt:
        ctx.print("\nOperation cancelled.", error=True)
        return EXIT_ERROR
    except Exception as e:
        ctx.print_error(f"Unexpected error: {e}")
        if ctx.verbose:
            import traceback

            traceback.print_exc()
        return EXIT_ERROR


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_SUCCESS

    ctx = CLIContext(
        config_path=args.config,
        verbose=args.verbose,
        quiet=args.quiet,
    )

    try:
        return run_command(args, ctx)
    finally:
        ctx.cleanup()


if __name__ == "__main__":
    sys.exit(main())
