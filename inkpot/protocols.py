"""Protocol definitions for Inkpot.

The posts repository depends on two collaborators with fixed contracts: a
front matter parser and a markdown converter. These protocols describe them
so either can be swapped out, for example with a fake in tests.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .extractors import Frontmatter


@runtime_checkable
class FrontmatterParser(Protocol):
    """Protocol for splitting a post file into metadata and body."""

    @abstractmethod
    def parse(self, text: str, path: Path | None = None) -> Frontmatter:
        """Split raw file text into front matter and body.

        Args:
            text: Raw file content.
            path: Source file, used for error context only.

        Returns:
            Frontmatter holding the metadata mapping and the body text.

        Raises:
            FrontmatterParseError: If the metadata block cannot be parsed.
        """
        ...


@runtime_checkable
class MarkdownConverter(Protocol):
    """Protocol for converting a markdown body to HTML."""

    @abstractmethod
    def render(self, content: str) -> str:
        """Render markdown to an HTML string.

        Args:
            content: Markdown body text.

        Returns:
            Rendered HTML.
        """
        ...
