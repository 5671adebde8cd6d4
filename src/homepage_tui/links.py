from __future__ import annotations

import logging
import webbrowser
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from textual.message_pump import MessagePump

from .messages import Navigate

logger = logging.getLogger("homepage")


@dataclass(frozen=True)
class InternalLink:
    path: str

    def attributes(self) -> Dict[str, str]:
        return {"href": self.path}


@dataclass(frozen=True)
class ExternalLink:
    url: str
    # Always emitted as a pair.
    target: str = field(default="_blank", init=False)
    rel: str = field(default="noopener noreferrer", init=False)

    def attributes(self) -> Dict[str, str]:
        return {"href": self.url, "target": self.target, "rel": self.rel}


LinkTarget = Union[InternalLink, ExternalLink]


def classify_link(url: Optional[str]) -> Optional[LinkTarget]:
    """Paths starting with "/" stay in the site; anything else is foreign."""
    if not url:
        return None
    if url.startswith("/"):
        return InternalLink(url)
    return ExternalLink(url)


def follow_link(sender: MessagePump, link: LinkTarget) -> None:
    if isinstance(link, InternalLink):
        sender.post_message(Navigate(link.path))
        return
    logger.info("Opening external link %s", link.url)
    # new=2 asks for a new tab / browsing context
    webbrowser.open(link.url, new=2)
