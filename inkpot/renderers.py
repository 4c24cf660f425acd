"""Markdown rendering for Inkpot.

This module contains the default implementation of the MarkdownConverter
protocol. Post bodies are converted with mistune; fenced code blocks that
name a language are highlighted with Pygments.

Key classes:
- MarkdownRenderer: Renders a Markdown body to an HTML string.
"""

from __future__ import annotations

from collections.abc import Sequence

import mistune
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

DEFAULT_PLUGINS = ("strikethrough", "footnotes", "table", "url")


def _escape_code(code: str) -> str:
    return code.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class _HighlightRenderer(mistune.HTMLRenderer):
    """HTML renderer with Pygments syntax highlighting for fenced code.

    Attributes:
        highlight: Whether to run Pygments over code blocks with a language.
    """

    def __init__(self, highlight: bool = True):
        """Initialize the renderer.

        Args:
            highlight: Whether to highlight code blocks that name a language.
        """
        super().__init__(escape=False)
        self.highlight = highlight

    def block_code(self, code: str, info: str | None = None) -> str:
        """Render a code block with Pygments syntax highlighting.

        Args:
            code: The code content.
            info: Language identifier (e.g., 'python', 'javascript').

        Returns:
            HTML string with highlighted code.
        """
        lang = info.split()[0] if info and info.strip() else None
        if lang and self.highlight:
            try:
                lexer = get_lexer_by_name(lang, stripall=True)
            except ClassNotFound:
                lexer = None
            if lexer is not None:
                formatter = HtmlFormatter(nowrap=False, cssclass="highlight")
                return highlight(code, lexer, formatter)
        lang_class = f' class="language-{lang}"' if lang else ""
        return f"<pre><code{lang_class}>{_escape_code(code)}</code></pre>\n"


class MarkdownRenderer:
    """Renders Markdown content to HTML.

    A fresh mistune parser is created per call, so one instance can be
    shared by any number of repositories.

    Attributes:
        plugins: mistune plugin names enabled for every render.
        highlight: Whether fenced code is highlighted with Pygments.
    """

    def __init__(
        self, plugins: Sequence[str] | None = None, highlight: bool = True
    ):
        self.plugins = list(DEFAULT_PLUGINS if plugins is None else plugins)
        self.highlight = highlight

    def render(self, content: str) -> str:
        """Render Markdown content to HTML.

        Args:
            content: Markdown source content.

        Returns:
            Rendered HTML.
        """
        markdown = mistune.create_markdown(
            renderer=_HighlightRenderer(self.highlight), plugins=self.plugins
        )
        return markdown(content)


default_markdown_renderer = MarkdownRenderer()
