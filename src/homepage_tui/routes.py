from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

HOME_PATH = "/"
BLOG_PATH = "/blog"
ABOUT_PATH = "/about"
PROJECTS_PATH = "/projects"

_PAGE_RE = re.compile(r"^/blog/page/(\d+)$")
_POST_RE = re.compile(r"^/blog/([^/]+)$")


@dataclass(frozen=True)
class Route:
    name: str
    slug: Optional[str] = None
    page: int = 1


def post_path(slug: str) -> str:
    return f"{BLOG_PATH}/{slug}"


def page_path(page: int) -> str:
    if page <= 1:
        return BLOG_PATH
    return f"{BLOG_PATH}/page/{page}"


def match_route(path: str) -> Optional[Route]:
    """Map a site path to a route, or None when nothing matches."""
    path = path.rstrip("/") or HOME_PATH
    if path == HOME_PATH:
        return Route("home")
    if path == BLOG_PATH:
        return Route("blog")
    if path == ABOUT_PATH:
        return Route("about")
    if path == PROJECTS_PATH:
        return Route("projects")
    match = _PAGE_RE.match(path)
    if match:
        return Route("blog", page=int(match.group(1)))
    match = _POST_RE.match(path)
    if match:
        return Route("post", slug=match.group(1))
    return None
