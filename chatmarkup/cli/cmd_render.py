"""Render, markdown and urls commands."""

import click

from . import cli
from .shared import _read_input, _setup_logging

from chatmarkup.config import StyleType, load_settings
from chatmarkup.formatting import apply_markdown, highlight_url
from chatmarkup.render import render_message


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", "file", type=click.File("r", encoding="utf-8"), help="Read the message from a file")
@click.option(
    "--style",
    type=click.Choice([s.value for s in StyleType]),
    default=None,
    help="Markdown style (default: CHATMARKUP_STYLE or without_chars)",
)
@click.option("--no-urls", is_flag=True, help="Do not highlight URLs")
@click.option("--no-escape", is_flag=True, help="Do not HTML-escape the message first")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def render(text, file, style, no_urls, no_escape, debug):
    """Render a message the way the chat log shows it."""
    _setup_logging(debug)
    message = _read_input(text, file)

    overrides = {}
    if style is not None:
        overrides["style"] = StyleType(style)
    if no_urls:
        overrides["highlight_urls"] = False
    if no_escape:
        overrides["escape_html"] = False

    settings = load_settings(**overrides)
    click.echo(render_message(message, settings))


@cli.command()
@click.argument("text")
@click.option("--show-symbols", is_flag=True, help="Keep the markdown delimiters in the output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def markdown(text, show_symbols, debug):
    """Apply markdown styling to TEXT."""
    _setup_logging(debug)
    click.echo(apply_markdown(text, show_symbols, code_color=load_settings().code_color))


@cli.command()
@click.argument("text")
def urls(text):
    """Wrap URLs in TEXT in links."""
    click.echo(highlight_url(text))
