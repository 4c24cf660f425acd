"""Error taxonomy for Inkpot.

Every failure surfaces to the caller as a PostError subclass. Library
exceptions (OSError, yaml.YAMLError, renderer failures) are chained as the
``__cause__`` and kept on ``original_error``.
"""

from __future__ import annotations

from pathlib import Path


class PostError(Exception):
    """Base error for the posts pipeline.

    Attributes:
        path: Filesystem path involved in the failure, if any.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        path: Path | None,
        message: str,
        original_error: Exception | None = None,
    ):
        self.path = path
        self.message = message
        self.original_error = original_error
        super().__init__(f"{path}: {message}" if path is not None else message)


class DirectoryNotFoundError(PostError):
    """The posts directory does not exist or is not a directory."""


class PostReadError(PostError):
    """A post file could not be read or decoded."""


class PostNotFoundError(PostReadError):
    """No ``<id>.md`` file exists for the requested identifier."""


class FrontmatterParseError(PostError):
    """The front matter block is not valid YAML or is not a mapping."""


class PostRenderError(PostError):
    """The markdown renderer failed on a post body."""


class InvalidIdentifierError(PostError):
    """A post identifier would escape the posts directory.

    Attributes:
        post_id: The rejected identifier.
    """

    def __init__(self, post_id: str, message: str):
        self.post_id = post_id
        super().__init__(None, f"invalid post id {post_id!r}: {message}")
