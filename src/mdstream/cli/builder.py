#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdstream/cli/builder.py
"""Argument parser construction and exit codes for the mdstream CLI."""

import argparse
import os
from dataclasses import fields

from mdstream.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, MATH_DELIMITERS
from mdstream.exceptions import DependencyError, FileError, RenderingError, ValidationError
from mdstream.options import HtmlRendererOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _option_help(field_name: str) -> str:
    """Return the help text declared in HtmlRendererOptions field metadata."""
    for option_field in fields(HtmlRendererOptions):
        if option_field.name == field_name:
            return str(option_field.metadata.get("help", ""))
    return ""


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    from mdstream import __version__

    parser = argparse.ArgumentParser(
        prog="mdstream",
        description="Render markdown to an HTML fragment.",
        epilog=f"The default log level can be set with the {ENV_LOG_LEVEL} environment variable.",
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Markdown file to render (reads stdin when omitted or '-')",
    )
    parser.add_argument("--out", "-o", dest="out", metavar="OUTPUT", help="Write HTML to this file instead of stdout")

    # Renderer options
    parser.add_argument("--ordered-lists", action="store_true", help=_option_help("ordered_lists"))
    parser.add_argument(
        "--display-math-delimiter",
        choices=list(MATH_DELIMITERS),
        default=HtmlRendererOptions().display_math_delimiter,
        help=_option_help("display_math_delimiter"),
    )

    parser.add_argument(
        "--events",
        action="store_true",
        help="Print the event stream (one event per line) instead of HTML",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper(),
        help=f"Set logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode: DEBUG logging with timestamps and logger names",
    )

    parser.add_argument("--version", "-v", action="version", version=f"mdstream {__version__}")

    return parser


def build_options(parsed_args: argparse.Namespace) -> HtmlRendererOptions:
    """Build renderer options from parsed command-line arguments."""
    return HtmlRendererOptions(
        ordered_lists=parsed_args.ordered_lists,
        display_math_delimiter=parsed_args.display_math_delimiter,
    )


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    # Check for dependency-related errors
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    # Check for validation errors
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    # Check for file I/O errors
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    # Check for rendering errors
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    # All other errors (unexpected errors)
    return EXIT_ERROR
