from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any

from .utils import date_sort_key

if TYPE_CHECKING:
    from .content import PostSummary


class PostCollection(Sequence["PostSummary"]):
    """Lightweight helper for working with lists of post summaries."""

    def __init__(self, posts: Iterable[PostSummary]):
        self._posts = list(posts)

    def __iter__(self) -> Iterator[PostSummary]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)

    def __getitem__(self, item):
        return self._posts[item]

    def sorted(self) -> PostCollection:
        """Sort posts by date, newest first.

        The sort is stable: posts with equal dates keep their current order.
        Posts without a date come after every dated post, also in their
        current order.

        Returns:
            A new PostCollection with sorted posts.
        """
        dated = [p for p in self._posts if date_sort_key(p.date) is not None]
        undated = [p for p in self._posts if date_sort_key(p.date) is None]
        dated.sort(key=lambda p: date_sort_key(p.date), reverse=True)
        return PostCollection(dated + undated)

    def latest(self, count: int = 5) -> PostCollection:
        return PostCollection(self.sorted()[:count])

    def ids(self) -> list[str]:
        return [p.id for p in self._posts]

    def as_dicts(self) -> list[dict[str, Any]]:
        return [p.to_dict() for p in self._posts]

    def __repr__(self) -> str:  # pragma: no cover - for debugging
        return f"PostCollection({len(self._posts)} posts)"
