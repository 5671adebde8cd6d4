from __future__ import annotations

import importlib.resources
import json
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ..datamodels import Author, Post
from .base import ContentSource

logger = logging.getLogger("homepage")

T = TypeVar("T")


class JSONFileSource(ContentSource):
    """Reads posts and authors from a JSON file.

    The file holds ``{"posts": [...], "authors": [...]}``. Without a
    configured ``path`` the sample content bundled with the package is used.
    """

    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)
        self.path: Optional[str] = self.config.get("path")
        self._data: Optional[Dict[str, Any]] = None

    def _load(self) -> Dict[str, Any]:
        if self._data is not None:
            return self._data
        try:
            if self.path:
                with open(self.path, "r", encoding="utf-8") as f:
                    self._data = json.load(f)
                logger.info("Loaded content from %s", self.path)
            else:
                bundled = importlib.resources.files("homepage_tui") / "data" / "content.json"
                self._data = json.loads(bundled.read_text(encoding="utf-8"))
                logger.info("Loaded bundled sample content")
        except (IOError, json.JSONDecodeError) as e:
            logger.error("Failed to load content from %s: %s", self.path or "package data", e)
            self._data = {}
        return self._data

    def _records(self, key: str, build: Callable[[Dict[str, Any]], T]) -> List[T]:
        records = []
        for raw in self._load().get(key) or []:
            try:
                records.append(build(raw))
            except (KeyError, TypeError) as e:
                # Ignore invalid records
                logger.warning("Ignoring invalid %s record %r: %s", key, raw, e)
        return records

    def get_posts(self) -> List[Post]:
        return self._records("posts", Post.from_dict)

    def get_authors(self) -> List[Author]:
        return self._records("authors", Author.from_dict)
