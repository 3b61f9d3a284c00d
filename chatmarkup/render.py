"""Message rendering — full chat-log pipeline for one message.

Order:
1. HTML escape (user-typed tags become text)
2. URL highlighting
3. Markdown styling, per the configured style
"""

import html as _html
import logging
from typing import Optional

from .config import ChatMarkupSettings, StyleType, load_settings
from .formatting import apply_markdown, highlight_url

logger = logging.getLogger("chatmarkup.render")


def _escape(text: str) -> str:
    """Escape HTML special characters, leaving quotes alone."""
    return _html.escape(text, quote=False)


def render_message(text: str, settings: Optional[ChatMarkupSettings] = None) -> str:
    """Render a raw chat message to chat-log markup.

    Args:
        text: Message as typed by the user
        settings: Rendering settings. Loaded from the environment if None.

    Returns:
        Markup ready for display.
    """
    if not text:
        return text
    if settings is None:
        settings = load_settings()

    if settings.escape_html:
        text = _escape(text)

    if settings.highlight_urls:
        text = highlight_url(text)

    if settings.style != StyleType.NONE:
        text = apply_markdown(
            text,
            settings.style == StyleType.WITH_CHARS,
            code_color=settings.code_color,
        )

    logger.debug(f"Rendered message ({len(text)} chars, style={settings.style.value})")
    return text
