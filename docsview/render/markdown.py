"""Markdown-to-HTML rendering for document views.

Stateless: every call builds a fresh converter so extension state such as
the table of contents never leaks between documents.
"""

from __future__ import annotations

import re
from collections.abc import Callable

import markdown

MARKDOWN_EXTENSIONS = ("fenced_code", "tables", "toc", "sane_lists", "codehilite")
EXTENSION_CONFIGS = {
    "codehilite": {"guess_lang": False, "css_class": "codehilite"},
}

MarkdownRenderer = Callable[[str], str]

_EXTERNAL_LINK = re.compile(r'<a href="(https?://[^"]+)"')


def render_markdown(text: str) -> str:
    """Convert Markdown ``text`` to an HTML fragment.

    Fenced code blocks are highlighted with Pygments through ``codehilite``;
    absolute http(s) links open in a new tab.
    """
    html = markdown.markdown(
        text,
        extensions=list(MARKDOWN_EXTENSIONS),
        extension_configs=EXTENSION_CONFIGS,
    )
    return _EXTERNAL_LINK.sub(r'<a href="\1" target="_blank" rel="noopener noreferrer"', html)


__all__ = ["MARKDOWN_EXTENSIONS", "MarkdownRenderer", "render_markdown"]
