"""chatmarkup — markdown styling and URL highlighting for chat messages."""

from .formatting import apply_markdown, highlight_url, is_tag_intersection
from .render import render_message

__version__ = "0.1.0"

__all__ = [
    "apply_markdown",
    "highlight_url",
    "is_tag_intersection",
    "render_message",
]
