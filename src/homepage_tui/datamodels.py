from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


def _tags(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"tags must be a list, got {type(value).__name__}")
    return tuple(value)


# --- Data models ---
@dataclass(frozen=True)
class Post:
    slug: str
    date: str
    title: str
    summary: str = ""
    tags: Tuple[str, ...] = ()
    draft: bool = False
    lastmod: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Post:
        """Build a post from an already-parsed content record."""
        return cls(
            slug=data["slug"],
            date=data["date"],
            title=data["title"],
            summary=data.get("summary") or "",
            tags=_tags(data.get("tags")),
            draft=bool(data.get("draft", False)),
            lastmod=data.get("lastmod"),
        )


@dataclass(frozen=True)
class Author:
    name: str
    avatar: Optional[str] = None
    occupation: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Author:
        return cls(
            name=data["name"],
            avatar=data.get("avatar"),
            occupation=data.get("occupation"),
            company=data.get("company"),
            email=data.get("email"),
            github=data.get("github"),
            linkedin=data.get("linkedin"),
            twitter=data.get("twitter"),
        )


@dataclass(frozen=True)
class Project:
    title: str
    description: str
    href: Optional[str] = None
    img_src: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Project:
        return cls(
            title=data["title"],
            description=data.get("description", ""),
            href=data.get("href"),
            img_src=data.get("imgSrc") or data.get("img_src"),
        )


@dataclass(frozen=True)
class SelectedFeed:
    items: Tuple[Post, ...] = ()
    has_more: bool = False


@dataclass(frozen=True)
class PostPage:
    items: Tuple[Post, ...]
    current_page: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


@dataclass
class HighlightState:
    mounted: bool = False
    animate: bool = False
