# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command-line entry point for policy documentation generation."""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from policydoc.config import DEFAULT_OUTPUT_NAME, DocOptions
from policydoc.errors import PolicyDocError
from policydoc.generator import DocumentationGenerator

logger = logging.getLogger(__name__)


class ValidationError(RuntimeError):
    """Represent user input validation failure."""


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="policydoc")
    subparsers = parser.add_subparsers(dest="command", required=True)
    doc_parser = subparsers.add_parser(
        "doc", help="Generate documentation from Rego policies."
    )
    doc_parser.add_argument("directory", help="Directory containing Rego policies.")
    doc_parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT_NAME,
        help="File name of the generated document, written inside the directory.",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning("Argument parsing failed (argv=%s)", argv)
        return 2
    if args.command == "doc":
        return _run_doc(args=args, stdout=stdout, stderr=stderr)

    logger.warning("Unsupported command (command=%s)", args.command)
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def _run_doc(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run doc command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    try:
        options = _build_options(directory=args.directory, output=args.output)
    except ValidationError as exc:
        logger.warning("Validation failed (error=%s)", exc)
        stderr.write(f"{exc}\n")
        return 2

    try:
        result = DocumentationGenerator().write(options)
    except PolicyDocError as exc:
        logger.warning("Documentation generation failed (error=%s)", exc)
        stderr.write(f"{exc}\n")
        return 2

    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        f"Wrote {result.record_count} policies from {result.file_count} files "
        f"to {result.output_path}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
    return 0


def _build_options(directory: str, output: str) -> DocOptions:
    """Validate CLI values and build run options.

    Raises:
        ValidationError: If the output file name is empty.
    """
    if not output.strip():
        raise ValidationError("Output file name must not be empty")
    return DocOptions(root_path=Path(directory), output_name=output)


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
