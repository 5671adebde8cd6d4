from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from .dates import parse_date
from .datamodels import Author, Post, PostPage, SelectedFeed

logger = logging.getLogger("homepage")


def sort_posts(posts: Iterable[Post]) -> List[Post]:
    """Most recent first. Posts sharing a date keep their input order."""
    return sorted(posts, key=lambda p: parse_date(p.date), reverse=True)


def core_content(posts: Iterable[Post]) -> List[Post]:
    """Drop drafts, keeping the order of everything else."""
    return [p for p in posts if not p.draft]


def select_posts(posts: Iterable[Post], limit: int) -> SelectedFeed:
    """Return the `limit` most recent posts and whether more exist."""
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")
    ordered = sort_posts(posts)
    return SelectedFeed(items=tuple(ordered[:limit]), has_more=len(ordered) > limit)


def find_author(authors: Iterable[Author], name: str) -> Optional[Author]:
    for author in authors:
        if author.name == name:
            return author
    logger.debug("No author named %r", name)
    return None


def paginate_posts(posts: Iterable[Post], page: int, per_page: int) -> PostPage:
    """Slice an already ordered post list into 1-based pages."""
    if per_page <= 0:
        raise ValueError(f"per_page must be positive, got {per_page}")
    posts = list(posts)
    total_pages = max(1, math.ceil(len(posts) / per_page))
    if not 1 <= page <= total_pages:
        raise ValueError(f"page {page} out of range 1..{total_pages}")
    start = (page - 1) * per_page
    return PostPage(
        items=tuple(posts[start : start + per_page]),
        current_page=page,
        total_pages=total_pages,
    )
