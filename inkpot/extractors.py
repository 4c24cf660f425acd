"""Front matter extraction for Inkpot.

This module splits a post file into its YAML front matter and markdown body.
It implements the FrontmatterParser protocol.

Key classes:
- Frontmatter: Parsed metadata mapping and remaining body text.
- FrontmatterExtractor: Default FrontmatterParser backed by PyYAML.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import FrontmatterParseError

logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)
BOM = "\ufeff"


@dataclass(frozen=True)
class Frontmatter:
    """Result of splitting a post file.

    Attributes:
        data: Parsed front matter mapping (empty when the file has none).
        content: Markdown body following the front matter block.
    """

    data: dict[str, Any] = field(default_factory=dict)
    content: str = ""

    __hash__ = None  # type: ignore[assignment]


def extract_frontmatter(text: str, path: Path | None = None) -> Frontmatter:
    """Extract YAML front matter from content.

    Args:
        text: Raw file content.
        path: Source file, used for error context only.

    Returns:
        Frontmatter with the parsed mapping and the remaining body.

    Raises:
        FrontmatterParseError: If the block is not valid YAML or does not
            hold a mapping.
    """
    if text.startswith(BOM):
        text = text[len(BOM) :]
    match = FRONTMATTER_RE.match(text)
    if not match:
        return Frontmatter({}, text)
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise FrontmatterParseError(path, f"invalid YAML front matter: {exc}", exc) from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontmatterParseError(
            path, f"front matter must be a mapping, got {type(data).__name__}"
        )
    return Frontmatter({str(key): value for key, value in data.items()}, text[match.end() :])


class FrontmatterExtractor:
    """Parses YAML front matter at the beginning of a file (between --- markers)."""

    def parse(self, text: str, path: Path | None = None) -> Frontmatter:
        """Split raw file text into front matter and body.

        Args:
            text: Raw file content.
            path: Source file, used for error context only.

        Returns:
            Frontmatter for the file.
        """
        result = extract_frontmatter(text, path)
        logger.debug("Parsed %d front matter keys from %s", len(result.data), path)
        return result


default_frontmatter_parser = FrontmatterExtractor()
