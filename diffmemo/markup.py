from __future__ import annotations

import html
import re

from .config import DEFAULT_SETTINGS, Settings

__all__ = [
    "escape_html",
    "remove_html_spans",
    "markup_to_text",
]

_SPAN_TAG_RE = re.compile(r"</?\s*span\b[^>]*>", re.IGNORECASE)
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)


def escape_html(text: str, line_break: str = "<br>") -> str:
    """Escape ``& < > "`` (ampersand first) and turn newlines into ``line_break``."""
    escaped = html.escape(text, quote=False).replace('"', "&quot;")
    return escaped.replace("\n", line_break)


def remove_html_spans(text: str) -> str:
    """Drop ``<span ...>``/``</span>`` tags, keeping their content."""
    return _SPAN_TAG_RE.sub("", text)


def markup_to_text(markup: str, settings: Settings = DEFAULT_SETTINGS) -> str:
    """Recover the plain answer text from rendered diff markup.

    Missing placeholders are empty spans and vanish with their tags, extra
    highlights are unwrapped, line-break markers become newlines and
    entities are decoded last so escaped user text such as ``&lt;br&gt;``
    is never mistaken for markup.
    """
    text = remove_html_spans(markup)
    if settings.line_break:
        text = text.replace(settings.line_break, "\n")
    text = _BR_RE.sub("\n", text)
    return html.unescape(text)
