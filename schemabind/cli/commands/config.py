"""
Configuration commands for the SchemaBind CLI.

Usage:
    schemabind config show [--section SECTION] [--format json|yaml]
    schemabind config validate [PATH]
"""

import argparse
import json
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

if TYPE_CHECKING:
    from schemabind.cli.main import CLIContext


def register(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """
    Register the config command with the parser.

    Args:
        subparsers: Subparsers action to add command to.
    """
    parser = subparsers.add_parser(
        "config",
        help="Configuration management",
        description="View and validate SchemaBind configuration.",
    )

    config_subparsers = parser.add_subparsers(
        title="config commands",
        dest="config_command",
        metavar="<subcommand>",
    )

    # config show
    show_parser = config_subparsers.add_parser(
        "show",
        help="Display current configuration",
        description="Display the active configuration, including environment overrides.",
    )
    show_parser.add_argument(
        "--section",
        "-s",
        metavar="SECTION",
        help="Show only a specific section (logging, docs, server, output)",
    )
    show_parser.add_argument(
        "--format",
        "-f",
        choices=["yaml", "json"],
        default="yaml",
        help="Output format (default: yaml)",
    )
    show_parser.set_defaults(func=run_config_show)

    # config validate
    validate_parser = config_subparsers.add_parser(
        "validate",
        help="Validate configuration file",
        description="Validate a configuration file for errors.",
    )
    validate_parser.add_argument(
        "path",
        nargs="?",
        metavar="PATH",
        help="Path to configuration file (uses --config if not specified)",
    )
    validate_parser.set_defaults(func=run_config_validate)

    parser.set_defaults(func=lambda args, ctx: run_config_help(parser, args, ctx))


def run_config_help(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
    ctx: "CLIContext",
) -> int:
    """Show help when no subcommand is specified."""
    parser.print_help()
    return 0


def run_config_show(args: argparse.Namespace, ctx: "CLIContext") -> int:
    """
    Execute the config show command.

    Args:
        args: Parsed command-line arguments.
        ctx: CLI context.

    Returns:
        Exit code.
    """
    from schemabind.cli.main import EXIT_ERROR, EXIT_SUCCESS

    config_dict = ctx.config.to_dict()

    if args.section:
        section = args.section.lower()
        if section not in config_dict:
            ctx.print_error(f"Unknown section: {section}")
            ctx.print_error(f"Available sections: {', '.join(config_dict.keys())}")
            return EXIT_ERROR
        config_dict = {section: config_dict[section]}

    if args.format == "json":
        ctx.print(json.dumps(config_dict, indent=2))
    else:
        ctx.print(yaml.safe_dump(config_dict, sort_keys=False).rstrip("\n"))

    return EXIT_SUCCESS


def run_config_validate(args: argparse.Namespace, ctx: "CLIContext") -> int:
    """
    Execute the config validate command.

    Args:
        args: Parsed command-line arguments.
        ctx: CLI context.

    Returns:
        Exit code.
    """
    from schemabind.cli.main import EXIT_CONFIG_ERROR, EXIT_SUCCESS
    from schemabind.config.loader import ConfigLoader

    path = args.path or ctx.config_path
    if not path:
        ctx.print_error("No configuration file specified")
        return EXIT_CONFIG_ERROR
    if not Path(path).exists():
        ctx.print_error(f"Configuration file not found: {path}")
        return EXIT_CONFIG_ERROR

    # ConfigurationError propagates to run_command
    ConfigLoader().load(path)
    ctx.print(f"Configuration is valid: {path}")
    return EXIT_SUCCESS
