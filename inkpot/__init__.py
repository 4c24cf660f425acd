"""Inkpot markdown posts pipeline.

This package reads a directory of markdown blog posts with YAML front matter
and exposes the read operations a static site generator needs: listing posts
newest first, enumerating post identifiers for route generation, and
rendering a single post to HTML.

The main entry point is the content module, which provides PostRepository and
the list_posts, list_post_ids and render_post convenience functions.
"""

from .content import (
    PostRepository,
    PostSummary,
    RenderedPost,
    RouteParameter,
    list_post_ids,
    list_posts,
    render_post,
)

__all__ = [
    "PostRepository",
    "PostSummary",
    "RenderedPost",
    "RouteParameter",
    "__version__",
    "list_post_ids",
    "list_posts",
    "render_post",
]
__version__ = "0.1.0"
