"""Chat message markup — markdown styling and URL highlighting.

Converts lightweight inline markdown and bare URLs in chat messages to the
HTML subset the chat log renders:
  <b>bold</b>, <i>italic</i>, <u>underline</u>, <s>strikethrough</s>,
  <font color=#595959><code>code</code></font>, <a href="url">url</a>

Both pipelines scan each pattern once against a snapshot of the text and
rebuild the text from (unmatched prefix, rewritten match) segments. Pattern
order matters: every pattern sees the output of the ones before it.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional

logger = logging.getLogger("chatmarkup.formatting")

DEFAULT_CODE_COLOR = "#595959"


@dataclass(frozen=True)
class Pattern:
    """A compiled matcher paired with the template its matches are wrapped in."""

    name: str
    regex: re.Pattern
    template: str

    def wrap(self, text: str) -> str:
        return self.template.format(text)


# ============================================================
# URL HIGHLIGHTING
# ============================================================
# Path characters based on https://tools.ietf.org/html/rfc3986#section-2

_URL_PATH = r"[\w:/?#\[\]@!$&'{}*+,;.~%=-]+"

_HREF_TEMPLATE = '<a href="{0}">{0}</a>'

URL_PATTERNS: tuple[Pattern, ...] = (
    Pattern("web", re.compile(r"\b(www\.|((http[s]?)|ftp)://)" + _URL_PATH, re.ASCII), _HREF_TEMPLATE),
    # Space is part of the class, so the match runs to the next tab or newline
    Pattern("file", re.compile(r"\b(file|smb)://([\S| ]*)", re.ASCII), _HREF_TEMPLATE),
    Pattern("tox_id", re.compile(r"\btox:[a-zA-Z0-9]{76}", re.ASCII), _HREF_TEMPLATE),
    Pattern("mailto", re.compile(r"\bmailto:\S+@\S+\.\S+", re.ASCII), _HREF_TEMPLATE),
    Pattern("tox_name", re.compile(r"\btox:\S+@\S+", re.ASCII), _HREF_TEMPLATE),
)


# ============================================================
# MARKDOWN
# ============================================================
# (?<!\S) is "start of string or whitespace", (?!\S) is "end of string or
# whitespace". Inner edges of a span must not be whitespace.

def _single_sign(sign: str) -> str:
    s = re.escape(sign)
    return (
        r"(?<!\S)"
        rf"[{s}]"
        r"(?!\s)"
        rf"([^{s}\n]+?)"
        r"(?<!\s)"
        rf"[{s}]"
        r"(?!\S)"
    )


def _double_sign(sign: str) -> str:
    s = re.escape(sign)
    return (
        r"(?<!\S)"
        rf"[{s}]{{2}}"
        r"(?!\s)"
        r"([^\n]+?)"
        r"(?<!\s)"
        rf"[{s}]{{2}}"
        r"(?!\S)"
    )


_MULTILINE_CODE = (
    r"(?<!\S)"
    r"```"
    r"(?!`)"
    r"(.+?)"
    r"(?<!`)"
    r"```"
    r"(?!\S)"
)

# Braces in the colour are doubled so only the payload slot is formatted
_CODE_OPEN = "<font color="
_CODE_CLOSE = "><code>{}</code></font>"


def _build_markdown_patterns(code_color: str) -> tuple[Pattern, ...]:
    code = _CODE_OPEN + code_color.replace("{", "{{").replace("}", "}}") + _CODE_CLOSE
    return (
        Pattern("italic", re.compile(_single_sign("/")), "<i>{}</i>"),
        Pattern("bold", re.compile(_single_sign("*")), "<b>{}</b>"),
        Pattern("underline", re.compile(_single_sign("_")), "<u>{}</u>"),
        Pattern("strike", re.compile(_single_sign("~")), "<s>{}</s>"),
        Pattern("code", re.compile(_single_sign("`")), code),
        Pattern("double_bold", re.compile(_double_sign("*")), "<b>{}</b>"),
        Pattern("double_italic", re.compile(_double_sign("/")), "<i>{}</i>"),
        Pattern("double_underline", re.compile(_double_sign("_")), "<u>{}</u>"),
        Pattern("double_strike", re.compile(_double_sign("~")), "<s>{}</s>"),
        Pattern("code_block", re.compile(_MULTILINE_CODE, re.DOTALL), code),
    )


MARKDOWN_PATTERNS: tuple[Pattern, ...] = _build_markdown_patterns(DEFAULT_CODE_COLOR)


@lru_cache(maxsize=16)
def markdown_patterns(code_color: str = DEFAULT_CODE_COLOR) -> tuple[Pattern, ...]:
    """Return the markdown pattern table with code spans in ``code_color``."""
    if code_color == DEFAULT_CODE_COLOR:
        return MARKDOWN_PATTERNS
    return _build_markdown_patterns(code_color)


_TAG_RE = re.compile(r"(?<=<)/?[a-zA-Z0-9]+(?=>)")


def is_tag_intersection(text: str) -> bool:
    """Check whether ``text`` holds an unbalanced set of tags.

    Counts tag names (``<b>`` opens, ``</b>`` closes). Wrapping a span with
    mismatched counts would interleave its tags with the surrounding ones.
    """
    opening = 0
    closing = 0
    for match in _TAG_RE.finditer(text):
        if match.group(0).startswith("/"):
            closing += 1
        else:
            opening += 1
    return opening != closing


def _rewrite(text: str, pattern: Pattern, replace: Callable[[re.Match], Optional[str]]) -> str:
    """Rewrite every match of ``pattern`` found in ``text``.

    ``replace`` returns the new text for a match, or None to keep it as is.
    """
    parts = []
    last_end = 0
    for match in pattern.regex.finditer(text):
        replacement = replace(match)
        if replacement is None:
            continue
        parts.append(text[last_end:match.start()])
        parts.append(replacement)
        last_end = match.end()

    if not parts:
        return text
    parts.append(text[last_end:])
    return "".join(parts)


def highlight_url(message: str) -> str:
    """Wrap every URL in ``message`` in an ``<a href>`` link."""
    result = message
    for pattern in URL_PATTERNS:
        result = _rewrite(result, pattern, lambda m, p=pattern: p.wrap(m.group(0)))
    return result


def apply_markdown(
    message: str,
    show_formatting_symbols: bool,
    code_color: str = DEFAULT_CODE_COLOR,
) -> str:
    """Apply inline markdown styling to ``message``.

    Args:
        message: Raw message text
        show_formatting_symbols: Keep the delimiters (``*bold*`` becomes
            ``<b>*bold*</b>``) instead of stripping them
        code_color: Colour of inline code and code blocks

    Returns:
        Copy of the message with markdown applied. Spans whose content has
        unbalanced tags are left untouched.
    """
    group = 0 if show_formatting_symbols else 1
    result = message

    for pattern in markdown_patterns(code_color):
        def _wrap(match: re.Match, pattern: Pattern = pattern) -> Optional[str]:
            captured = match.group(group)
            if is_tag_intersection(captured):
                logger.debug(f"Skipping {pattern.name} span with unbalanced tags: {captured!r}")
                return None
            return pattern.wrap(captured)

        result = _rewrite(result, pattern, _wrap)

    return result
