"""Command-line interface for richmark.

Renders a Markdown file to the terminal with rich, or dumps the rendered
block structure as JSON.

Examples
--------
Render a file::

    $ richmark README.md

Read from stdin::

    $ cat notes.md | richmark -

Inspect what the renderer emits::

    $ richmark README.md --dump

Use a specific configuration file::

    $ richmark README.md --config ./richmark.toml

Environment Variable Support
----------------------------
``RICHMARK_CONFIG`` names a configuration file used when ``--config`` is not
given and ``--no-config`` is not set.

"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

from richmark.exceptions import ConfigError, DependencyError, ParsingError, RichmarkError
from richmark.logging_utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the richmark CLI."""
    parser = argparse.ArgumentParser(
        prog="richmark",
        description="Render Markdown to the terminal through an interceptable AST renderer.",
    )
    parser.add_argument("input", help="Markdown file to render, or '-' to read stdin")
    parser.add_argument("--dump", action="store_true", help="Print the rendered block structure as JSON")
    parser.add_argument("--config", type=Path, help="Configuration file (TOML, YAML, JSON or pyproject.toml)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    console_group = parser.add_argument_group("console output")
    console_group.add_argument("--code-theme", help="Pygments theme for code blocks")
    console_group.add_argument(
        "--show-link-urls", action="store_true", default=None, help="Print link destinations after link text"
    )
    console_group.add_argument("--width", type=int, help="Console width in columns")

    parser_group = parser.add_argument_group("markdown parsing")
    parser_group.add_argument("--no-tables", action="store_true", help="Do not parse pipe tables")
    parser_group.add_argument("--no-footnotes", action="store_true", help="Do not parse footnotes")
    parser_group.add_argument(
        "--fade-out-last-paragraph", action="store_true", help="Render the final paragraph with the fade-out style"
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log output to this file")
    logging_group.add_argument("--trace", action="store_true", help="Timestamped log output with logger names")
    return parser


def _read_input(source: str) -> Union[bytes, str]:
    """Read raw input; decoding is left to the parser's encoding fallback."""
    if source == "-":
        stdin = getattr(sys.stdin, "buffer", sys.stdin)
        return stdin.read()
    return Path(source).read_bytes()


def _apply_overrides(parsed_args: argparse.Namespace, config):  # type: ignore[no-untyped-def]
    parser_options = config.parser
    if parsed_args.no_tables:
        parser_options = parser_options.create_updated(parse_tables=False)
    if parsed_args.no_footnotes:
        parser_options = parser_options.create_updated(parse_footnotes=False)
    if parsed_args.fade_out_last_paragraph:
        parser_options = parser_options.create_updated(fade_out_last_paragraph=True)

    console_options = config.console
    if parsed_args.code_theme:
        console_options = console_options.create_updated(code_theme=parsed_args.code_theme)
    if parsed_args.show_link_urls:
        console_options = console_options.create_updated(show_link_urls=True)
    return parser_options, console_options


def main(args: Optional[list[str]] = None) -> int:
    """Execute the CLI and return an exit code."""
    parsed_args = create_parser().parse_args(args)
    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    from richmark.api import parse_markdown, render_markdown
    from richmark.cli.config import resolve_config

    config_path = parsed_args.config
    if config_path is None and not parsed_args.no_config:
        env_config = os.environ.get("RICHMARK_CONFIG")
        if env_config:
            config_path = Path(env_config)

    try:
        config = resolve_config(config_path, discover=not parsed_args.no_config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    if config.source:
        logger.info("Using configuration from %s", config.source)

    parser_options, console_options = _apply_overrides(parsed_args, config)

    try:
        text = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error: could not read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        document = parse_markdown(text, parser_options)
        if parsed_args.dump:
            scope = render_markdown(document)
            print(json.dumps(scope.to_list(), indent=2, ensure_ascii=False))
            return EXIT_SUCCESS

        from richmark.scopes.console import ConsoleScope

        console_scope = ConsoleScope(console_options)
        render_markdown(document, console_scope)

        from rich.console import Console

        console_scope.print_to(Console(width=parsed_args.width))
    except DependencyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR
    except ParsingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    except RichmarkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
