"""View models for the recent-posts feed and the profile block.

Everything here is a pure mapping from content records to display values;
the Textual widgets in :mod:`homepage_tui.widgets` only lay these out.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from .config import NO_POSTS_MESSAGE
from .dates import format_date
from .datamodels import Author, Post, SelectedFeed
from .routes import BLOG_PATH, post_path

DateFormatter = Callable[[str, str], str]


@dataclass(frozen=True)
class FeedRow:
    slug: str
    date: str
    date_text: str
    title: str
    href: str
    tags: Tuple[str, ...]
    summary: str

    @property
    def read_more_label(self) -> str:
        return f'Read more: "{self.title}"'


@dataclass(frozen=True)
class FeedView:
    rows: Tuple[FeedRow, ...]
    all_posts_href: Optional[str] = None

    @property
    def empty_message(self) -> Optional[str]:
        return None if self.rows else NO_POSTS_MESSAGE


@dataclass(frozen=True)
class ProfileView:
    name: str
    avatar: Optional[str] = None
    avatar_alt: str = "avatar"


def build_row(post: Post, locale: str, formatter: DateFormatter = format_date) -> FeedRow:
    return FeedRow(
        slug=post.slug,
        date=post.date,
        date_text=formatter(post.date, locale),
        title=post.title,
        href=post_path(post.slug),
        tags=tuple(post.tags),
        summary=post.summary,
    )


def build_rows(
    posts: Iterable[Post], locale: str, formatter: DateFormatter = format_date
) -> Tuple[FeedRow, ...]:
    return tuple(build_row(p, locale, formatter) for p in posts)


def build_feed(
    feed: SelectedFeed, locale: str, formatter: DateFormatter = format_date
) -> FeedView:
    return FeedView(
        rows=build_rows(feed.items, locale, formatter),
        all_posts_href=BLOG_PATH if feed.has_more else None,
    )


def build_profile(author: Optional[Author]) -> Optional[ProfileView]:
    if author is None:
        return None
    return ProfileView(name=author.name, avatar=author.avatar or None)
