"""chatmarkup configuration management."""

import logging
import re
from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .formatting import DEFAULT_CODE_COLOR

logger = logging.getLogger("chatmarkup.config")

_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


class StyleType(str, Enum):
    """How markdown in a message is displayed."""

    NONE = "none"                     # markdown left as plain text
    WITH_CHARS = "with_chars"         # styled, delimiters kept
    WITHOUT_CHARS = "without_chars"   # styled, delimiters stripped


class ChatMarkupSettings(BaseSettings):
    """Settings loaded from environment variables or .env file."""

    style: StyleType = Field(default=StyleType.WITHOUT_CHARS, description="Markdown display style")
    highlight_urls: bool = Field(default=True, description="Wrap URLs in links")
    escape_html: bool = Field(default=True, description="Escape raw HTML before styling")
    code_color: str = Field(default=DEFAULT_CODE_COLOR, description="Colour of code spans (#rrggbb)")

    model_config = {"env_prefix": "CHATMARKUP_", "env_file": ".env", "extra": "ignore"}

    @field_validator("code_color")
    @classmethod
    def _check_color(cls, v: str) -> str:
        if not _COLOR_RE.match(v):
            raise ValueError(f"code_color must look like #rrggbb, got {v!r}")
        return v


def load_settings(**overrides) -> ChatMarkupSettings:
    """Load settings from environment, with keyword overrides on top."""
    settings = ChatMarkupSettings(**overrides)

    if settings.style == StyleType.NONE and not settings.highlight_urls:
        logger.warning(
            "Markdown styling and URL highlighting are both disabled — "
            "rendering will only escape the message text."
        )

    return settings
