"""Shared utilities for chatmarkup CLI commands."""

import logging
import sys

import click
from rich.console import Console

console = Console()

_log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _setup_logging(debug: bool = False):
    """Log to stderr; DEBUG for the chatmarkup hierarchy when requested."""
    logging.basicConfig(level=logging.WARNING, format=_log_format, stream=sys.stderr)
    if debug:
        logging.getLogger("chatmarkup").setLevel(logging.DEBUG)


def _read_input(text: str | None, file) -> str:
    """Pick the message from the TEXT argument, --file, or stdin (in that order)."""
    if text is not None and file is not None:
        raise click.UsageError("Pass either TEXT or --file, not both.")
    if text is not None:
        return text
    if file is not None:
        return _strip_final_newline(file.read())
    if sys.stdin.isatty():
        raise click.UsageError("No message given. Pass TEXT, --file, or pipe it on stdin.")
    return _strip_final_newline(sys.stdin.read())


def _strip_final_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text
