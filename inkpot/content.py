"""Post loading for Inkpot.

This module reads markdown post files from the posts directory and turns
them into the values a static site generator consumes.

Key classes:
- PostSummary: Metadata-only view of a post, used for listings.
- RouteParameter: Identifier shape used to pre-build one page per post.
- RenderedPost: Metadata plus the HTML-rendered body of a single post.
- PostLoader: Enumerates and reads files in the posts directory.
- PostRepository: The listing, identifier and rendering operations.

The module-level list_posts, list_post_ids and render_post functions build a
repository for the current project and delegate to it.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .collections import PostCollection
from .config import load_config
from .errors import (
    DirectoryNotFoundError,
    PostNotFoundError,
    PostReadError,
    PostRenderError,
)
from .extractors import Frontmatter, default_frontmatter_parser
from .protocols import FrontmatterParser, MarkdownConverter
from .renderers import MarkdownRenderer, default_markdown_renderer
from .utils import post_filename, post_id_from_filename, validate_post_id

logger = logging.getLogger(__name__)

KNOWN_FIELDS = ("title", "date")


def _split_metadata(data: dict[str, Any]) -> dict[str, Any]:
    extra = {k: v for k, v in data.items() if k not in KNOWN_FIELDS}
    null_fields = frozenset(k for k in KNOWN_FIELDS if k in data and data[k] is None)
    return {
        "title": data.get("title"),
        "date": data.get("date"),
        "extra": extra,
        "null_fields": null_fields,
    }


def _merge_metadata(
    title: Any, date: Any, extra: dict[str, Any], null_fields: frozenset[str]
) -> dict[str, Any]:
    metadata: dict[str, Any] = {}
    for key, value in (("title", title), ("date", date)):
        if value is not None or key in null_fields:
            metadata[key] = value
    metadata.update(extra)
    return metadata


@dataclass(frozen=True)
class PostSummary:
    """Metadata-only view of a post.

    Attributes:
        id: File name of the post without the ``.md`` suffix.
        title: ``title`` front matter value, if any.
        date: ``date`` front matter value, if any. YAML dates arrive as
            ``date``/``datetime`` objects, quoted ones as strings.
        extra: All other front matter keys.
        null_fields: Known keys present in the front matter with a null value.
    """

    id: str
    title: Any = None
    date: Any = None
    extra: dict[str, Any] = field(default_factory=dict)
    null_fields: frozenset[str] = field(default_factory=frozenset, repr=False)

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_frontmatter(cls, post_id: str, data: dict[str, Any]) -> PostSummary:
        return cls(id=post_id, **_split_metadata(data))

    @property
    def metadata(self) -> dict[str, Any]:
        """Complete front matter mapping of the post."""
        return _merge_metadata(self.title, self.date, self.extra, self.null_fields)

    def to_dict(self) -> dict[str, Any]:
        """Flatten to ``{"id": ..., **front_matter}``.

        The file name identifier wins over an ``id`` key in the front matter.
        """
        return {"id": self.id, **{k: v for k, v in self.metadata.items() if k != "id"}}


@dataclass(frozen=True)
class RouteParameter:
    """Route parameters for one post page."""

    id: str

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {"params": {"id": self.id}}


@dataclass(frozen=True)
class RenderedPost:
    """A post with its body rendered to HTML.

    Attributes:
        id: File name of the post without the ``.md`` suffix.
        content_html: Rendered markdown body, without the front matter.
        title: ``title`` front matter value, if any.
        date: ``date`` front matter value, if any.
        extra: All other front matter keys.
        null_fields: Known keys present in the front matter with a null value.
    """

    id: str
    content_html: str
    title: Any = None
    date: Any = None
    extra: dict[str, Any] = field(default_factory=dict)
    null_fields: frozenset[str] = field(default_factory=frozenset, repr=False)

    __hash__ = None  # type: ignore[assignment]

    @property
    def metadata(self) -> dict[str, Any]:
        return _merge_metadata(self.title, self.date, self.extra, self.null_fields)

    def to_dict(self) -> dict[str, Any]:
        """Flatten to ``{"id": ..., "contentHtml": ..., **front_matter}``."""
        reserved = ("id", "contentHtml")
        metadata = {k: v for k, v in self.metadata.items() if k not in reserved}
        return {"id": self.id, "contentHtml": self.content_html, **metadata}


class PostLoader:
    """Enumerates and reads post files.

    Only entries directly inside the posts directory are considered;
    subdirectories are skipped, never traversed.

    Attributes:
        posts_dir: Directory containing the post files.
    """

    def __init__(self, posts_dir: Path):
        self.posts_dir = posts_dir

    def iter_files(self) -> list[Path]:
        """List post files in file name order.

        Returns:
            Paths of the regular files in the posts directory.

        Raises:
            DirectoryNotFoundError: If the posts directory is missing or is
                not a directory.
            PostReadError: If the directory cannot be listed.
        """
        try:
            entries = sorted(self.posts_dir.iterdir(), key=lambda p: p.name)
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise DirectoryNotFoundError(
                self.posts_dir, "posts directory not found", exc
            ) from exc
        except OSError as exc:
            raise PostReadError(
                self.posts_dir, f"cannot list posts directory: {exc}", exc
            ) from exc

        files: list[Path] = []
        for path in entries:
            if path.is_dir():
                logger.warning("Skipping subdirectory %s in posts directory", path)
                continue
            files.append(path)
        logger.debug("Found %d post files in %s", len(files), self.posts_dir)
        return files

    def read(self, path: Path) -> str:
        """Read the full UTF-8 text of a post file.

        Raises:
            PostNotFoundError: If the file does not exist.
            PostReadError: If the file cannot be read or decoded.
        """
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise PostNotFoundError(path, "post file not found", exc) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise PostReadError(path, f"cannot read post file: {exc}", exc) from exc


class PostRepository:
    """Read operations over a directory of markdown posts.

    The posts directory is fixed at construction time. Nothing is cached:
    every call reflects the files on disk at that moment.

    Attributes:
        posts_dir: Directory containing the post files.
        frontmatter_parser: Splits file text into metadata and body.
        markdown_renderer: Converts a markdown body to HTML.
    """

    def __init__(
        self,
        posts_dir: Path,
        frontmatter_parser: FrontmatterParser | None = None,
        markdown_renderer: MarkdownConverter | None = None,
    ):
        """Initialize the repository.

        Args:
            posts_dir: Path to the posts directory.
            frontmatter_parser: Optional custom front matter parser.
            markdown_renderer: Optional custom markdown converter.
        """
        self._posts_dir = Path(posts_dir)
        self._loader = PostLoader(self._posts_dir)
        self.frontmatter_parser = frontmatter_parser or default_frontmatter_parser
        self.markdown_renderer = markdown_renderer or default_markdown_renderer

    @property
    def posts_dir(self) -> Path:
        return self._posts_dir

    @classmethod
    def from_project(cls, project_root: Path | None = None) -> PostRepository:
        """Build a repository for a project using its inkpot.yaml settings.

        Args:
            project_root: Root directory of the project. Defaults to the
                current working directory.

        Returns:
            Repository reading ``<project_root>/<posts_dir>``.
        """
        root = Path.cwd() if project_root is None else Path(project_root)
        config = load_config(root)
        renderer = MarkdownRenderer(
            plugins=config["markdown_plugins"], highlight=config["highlight"]
        )
        return cls(root / config["posts_dir"], markdown_renderer=renderer)

    def _load(self, path: Path) -> Frontmatter:
        text = self._loader.read(path)
        return self.frontmatter_parser.parse(text, path)

    def list_posts(self) -> PostCollection:
        """List every post's metadata, newest first.

        Returns:
            PostCollection sorted by ``date`` descending. Ties keep file
            name order and undated posts come last.
        """
        summaries = []
        for path in self._loader.iter_files():
            parsed = self._load(path)
            summaries.append(
                PostSummary.from_frontmatter(post_id_from_filename(path.name), parsed.data)
            )
        return PostCollection(summaries).sorted()

    def list_post_ids(self) -> list[RouteParameter]:
        """List route parameters for every post, in file name order."""
        return [
            RouteParameter(id=post_id_from_filename(path.name))
            for path in self._loader.iter_files()
        ]

    def render_post(self, post_id: str) -> RenderedPost:
        """Render a single post to HTML.

        Args:
            post_id: Identifier of the post (its file name without ``.md``).

        Returns:
            RenderedPost with the HTML body and the front matter fields.

        Raises:
            InvalidIdentifierError: If ``post_id`` contains path separators.
            PostNotFoundError: If ``<post_id>.md`` does not exist.
            PostReadError: If the file cannot be read.
            FrontmatterParseError: If the front matter is invalid.
            PostRenderError: If the markdown renderer fails.
        """
        validate_post_id(post_id)
        path = self._posts_dir / post_filename(post_id)
        parsed = self._load(path)
        try:
            content_html = str(self.markdown_renderer.render(parsed.content))
        except Exception as exc:
            raise PostRenderError(path, f"markdown rendering failed: {exc}", exc) from exc
        logger.debug("Rendered post %s (%d bytes of HTML)", post_id, len(content_html))
        return RenderedPost(
            id=post_id, content_html=content_html, **_split_metadata(parsed.data)
        )

    async def render_post_async(self, post_id: str) -> RenderedPost:
        """Render a single post without blocking the event loop."""
        return await asyncio.to_thread(self.render_post, post_id)


def list_posts(project_root: Path | None = None) -> PostCollection:
    """List the posts of a project, newest first."""
    return PostRepository.from_project(project_root).list_posts()


def list_post_ids(project_root: Path | None = None) -> list[RouteParameter]:
    """List route parameters for the posts of a project."""
    return PostRepository.from_project(project_root).list_post_ids()


def render_post(post_id: str, project_root: Path | None = None) -> RenderedPost:
    """Render one post of a project to HTML."""
    return PostRepository.from_project(project_root).render_post(post_id)
