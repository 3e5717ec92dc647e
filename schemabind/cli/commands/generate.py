"""
Document generation command for the SchemaBind CLI.

Usage:
    schemabind generate TARGET [--format json|yaml] [--output PATH] [--indent N]
"""

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schemabind.cli.main import CLIContext


def register(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """
    Register the generate command with the parser.

    Args:
        subparsers: Subparsers action to add command to.
    """
    parser = subparsers.add_parser(
        "generate",
        help="Generate an OpenAPI document",
        description=(
            "Build the OpenAPI document for TARGET and write it to stdout "
            "or a file. TARGET is module:attribute."
        ),
    )
    parser.add_argument(
        "target",
        metavar="TARGET",
        help="Document, application, (spec, source) pair or factory (module:attribute)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=["json", "yaml"],
        help="Output format (default: from configuration)",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="PATH",
        help="Write to PATH instead of stdout",
    )
    parser.add_argument(
        "--indent",
        type=int,
        metavar="N",
        help="JSON indentation (default: from configuration)",
    )
    parser.set_defaults(func=run_generate)


def run_generate(args: argparse.Namespace, ctx: "CLIContext") -> int:
    """
    Execute the generate command.

    Args:
        args: Parsed command-line arguments.
        ctx: CLI context.

    Returns:
        Exit code.
    """
    from schemabind.cli.main import EXIT_SUCCESS
    from schemabind.cli.targets import resolve_document
    from schemabind.serialization import to_json, to_yaml

    output_config = ctx.config.output
    output_format = args.format or output_config.format
    indent = output_config.indent if args.indent is None else args.indent
    output_path = args.output or output_config.path

    ctx.logger.debug("Generating %s document for %s", output_format, args.target)
    document = resolve_document(args.target)

    if output_format == "yaml":
        text = to_yaml(document)
    else:
        text = to_json(document, indent=indent) + "\n"

    if output_path:
        Path(output_path).write_text(text, encoding="utf-8")
        ctx.print(f"Wrote {output_path}", error=True)
    else:
        ctx.print(text.rstrip("\n"))

    return EXIT_SUCCESS
