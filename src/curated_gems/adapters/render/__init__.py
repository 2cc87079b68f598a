"""Rendering surfaces for filtered views."""

from curated_gems.adapters.render.html_renderer import HtmlRenderer
from curated_gems.adapters.render.markdown_renderer import MarkdownRenderer

__all__ = ["HtmlRenderer", "MarkdownRenderer"]
