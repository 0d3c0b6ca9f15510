"""Rendering helpers: Markdown to HTML and terminal text for the CLI."""

from __future__ import annotations

from .markdown import MarkdownRenderer, render_markdown

__all__ = ["MarkdownRenderer", "render_markdown"]
