from __future__ import annotations

from typing import Iterable, List, Optional

from ..datamodels import Author, Post
from .base import ContentSource


class InMemorySource(ContentSource):
    def __init__(
        self,
        posts: Optional[Iterable[Post]] = None,
        authors: Optional[Iterable[Author]] = None,
    ):
        super().__init__({})
        self.posts = list(posts or [])
        self.authors = list(authors or [])

    def get_posts(self) -> List[Post]:
        return list(self.posts)

    def get_authors(self) -> List[Author]:
        return list(self.authors)
