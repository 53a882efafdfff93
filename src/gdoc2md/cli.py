"""Command-line interface for gdoc2md.

Converts a Google Docs API document saved as JSON into Markdown with YAML
front matter.

Examples
--------
Basic conversion to stdout:
    $ gdoc2md document.json

Write to a file and add front matter fields:
    $ gdoc2md document.json --out post.md --meta date=2025-01-31 --meta draft=true

Preview in the terminal (requires the optional rich package):
    $ gdoc2md document.json --rich

Read from stdin and emit the intermediate JSON instead of Markdown:
    $ cat document.json | gdoc2md - --json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

import yaml

from gdoc2md import __version__
from gdoc2md.api import to_markdown
from gdoc2md.constants import FRONTMATTER_DELIMITER
from gdoc2md.exceptions import (
    DependencyError,
    FileError,
    Gdoc2MdError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from gdoc2md.logging_utils import configure_logging
from gdoc2md.options import GoogleDocOptions, MarkdownRendererOptions
from gdoc2md.parsers.gdoc import GoogleDocParser
from gdoc2md.serialization import result_to_json

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def parse_meta_item(item: str) -> tuple[str, Any]:
    """Parse a ``KEY=VALUE`` front matter argument.

    The value is read as a YAML scalar, so ``draft=true`` yields a boolean
    and ``order=3`` an integer.

    Raises
    ------
    argparse.ArgumentTypeError
        If the item has no ``=`` or an empty key

    """
    key, sep, value = item.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"Metadata must be given as KEY=VALUE, got {item!r}")
    try:
        parsed = yaml.safe_load(value) if value else ""
    except yaml.YAMLError:
        parsed = value
    return key.strip(), parsed


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gdoc2md",
        description="Convert a Google Docs API document (JSON) to Markdown with YAML front matter.",
    )
    parser.add_argument("input", help="Path to the document JSON file, or '-' to read from stdin")
    parser.add_argument("--out", "-o", help="Write output to this file instead of stdout")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the intermediate {cover, content} JSON instead of Markdown",
    )
    parser.add_argument(
        "--meta",
        action="append",
        type=parse_meta_item,
        default=[],
        metavar="KEY=VALUE",
        help="Add a front matter field (repeatable)",
    )
    parser.add_argument(
        "--no-metadata",
        action="store_true",
        help="Do not collect the document title and cover into the front matter",
    )
    parser.add_argument(
        "--no-cover",
        action="store_true",
        help="Do not look for a cover image in the first-page header",
    )
    parser.add_argument(
        "--bullet-symbol",
        choices=["-", "*", "+"],
        default="-",
        help="Marker for unordered list items (default: -)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose log format with timestamps")
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Render stdout output with rich terminal formatting (automatically disabled when output is piped)",
    )
    parser.add_argument(
        "--force-rich",
        action="store_true",
        help="Use rich formatting even when stdout is not a terminal",
    )
    parser.add_argument("--version", action="version", version=f"gdoc2md {__version__}")
    return parser


def check_rich_available() -> bool:
    """Check if the Rich library is available."""
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(args: argparse.Namespace, stream: Optional[TextIO] = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when ``--rich`` is set, no ``--out`` file is given,
    and either ``--force-rich`` is set or the stream is a terminal.

    Raises
    ------
    DependencyError
        If ``--rich`` is requested but Rich is not installed

    """
    if not args.rich or args.out:
        return False

    if not check_rich_available():
        raise DependencyError(
            "Rich output",
            missing_packages=["rich"],
            install_command="pip install gdoc2md[rich]",
        )

    if args.force_rich:
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def _print_rich(text: str, as_json: bool) -> None:
    from rich.console import Console
    from rich.markdown import Markdown
    from rich.syntax import Syntax

    console = Console()
    if as_json:
        console.print(Syntax(text, "json", word_wrap=True))
        return

    # Front matter is highlighted as YAML, not parsed as Markdown
    body = text
    opening = f"{FRONTMATTER_DELIMITER}\n"
    if text.startswith(opening):
        yaml_text, sep, rest = text[len(opening) :].partition(f"\n{FRONTMATTER_DELIMITER}\n\n")
        if sep:
            console.print(Syntax(yaml_text, "yaml", word_wrap=True))
            console.rule()
            body = rest
    console.print(Markdown(body))


def _read_input(source: str) -> Any:
    if source == "-":
        return sys.stdin.buffer.read()
    path = Path(source)
    if not path.is_file():
        raise FileError(f"Input file not found: {source}", file_path=source)
    return path


def _write_output(text: str, out: Optional[str]) -> None:
    if not out:
        sys.stdout.write(text)
        return
    output_path = Path(out)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(out, original_error=e) from e
    logger.info("Wrote %s", output_path)


def main(args: Optional[list[str]] = None) -> int:
    """Run the CLI and return a process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    options = GoogleDocOptions(
        include_metadata=not parsed_args.no_metadata,
        extract_cover=not parsed_args.no_cover,
    )
    renderer_options = MarkdownRendererOptions(bullet_symbol=parsed_args.bullet_symbol)

    try:
        source = _read_input(parsed_args.input)
        if parsed_args.json:
            output = result_to_json(GoogleDocParser(options).parse(source), indent=2) + "\n"
        else:
            output = to_markdown(
                source,
                metadata=dict(parsed_args.meta),
                options=options,
                renderer_options=renderer_options,
            )
        if should_use_rich_output(parsed_args):
            _print_rich(output, as_json=parsed_args.json)
        else:
            _write_output(output, parsed_args.out)
    except DependencyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR
    except FileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ParsingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    except RenderingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDERING_ERROR
    except Gdoc2MdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS
