"""Command-line interface for the mdstream renderer.

Reads markdown from a file or stdin and writes the rendered HTML fragment to
stdout or a file.

Environment Variable Support
----------------------------
MDSTREAM_LOG_LEVEL sets the default for ``--log-level``. The command-line
argument always overrides it.

Examples
--------
Render a file to stdout::

    $ mdstream README.md

Render stdin to a file::

    $ cat notes.md | mdstream - -o notes.html

Inspect the event stream::

    $ mdstream README.md --events

"""

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, Union

from mdstream.cli.builder import (
    EXIT_SUCCESS,
    build_options,
    create_parser,
    get_exit_code_for_exception,
)
from mdstream.logging_utils import configure_logging
from mdstream.parsers.markdown import MarkdownEventParser
from mdstream.renderers.html import HtmlRenderer
from mdstream.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "get_exit_code_for_exception"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes precedence over --log-level
    log_level: Union[int, str] = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _resolve_input(input_arg: str | None) -> Union[Path, IO[bytes], IO[str]]:
    if input_arg is None or input_arg == "-":
        return getattr(sys.stdin, "buffer", sys.stdin)
    return Path(input_arg)


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return a process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    options = build_options(parsed_args)
    source = _resolve_input(parsed_args.input)
    logger.debug(f"Rendering from {parsed_args.input or 'stdin'} with {options}")

    try:
        events = MarkdownEventParser().parse(source)

        if parsed_args.events:
            output = "".join(f"{event!r}\n" for event in events)
        else:
            with debug_timer(logger, "Rendering (markdown -> html)"):
                output = HtmlRenderer(options).render_events(events)

        if parsed_args.out:
            HtmlRenderer.write_text_output(output, parsed_args.out)
            logger.info(f"Wrote {parsed_args.out}")
        else:
            _write_stdout(output)
    except Exception as e:
        logger.debug("Rendering failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
