from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..datamodels import Author, Post


class ContentSource(ABC):
    """Abstract base class for a supplier of already-parsed content records."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config

    @abstractmethod
    def get_posts(self) -> List[Post]:
        """Return every post, in no particular order."""
        pass

    @abstractmethod
    def get_authors(self) -> List[Author]:
        """Return every author, in no particular order."""
        pass
