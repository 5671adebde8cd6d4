from __future__ import annotations

import logging
from typing import Optional

from rich.text import Text
from textual import events
from textual.binding import Binding
from textual.timer import Timer
from textual.widgets import Static

from .config import ANIMATION_DELAY
from .datamodels import HighlightState
from .links import ExternalLink, InternalLink, classify_link, follow_link

logger = logging.getLogger("homepage")

HIGHLIGHT_CLASS = "hand-highlight"
ANIMATE_CLASS = "-animate"


def merge_class_names(*classes: Optional[str]) -> str:
    return " ".join(c for c in classes if c)


class HandHighlight(Static):
    """Inline text with a one-shot highlight sweep shortly after mounting.

    With a ``url`` the highlight doubles as a link: paths inside the site
    post a navigation message, anything else opens in a new browser tab.
    """

    BINDINGS = [
        Binding("enter", "follow", "Open link", show=False),
    ]

    def __init__(
        self,
        children: str | Text,
        url: Optional[str] = None,
        *,
        classes: Optional[str] = None,
        id: Optional[str] = None,
        delay: float = ANIMATION_DELAY,
    ):
        assert children, "HandHighlight requires inline content"
        link_target = classify_link(url)
        link_class = None
        if isinstance(link_target, InternalLink):
            link_class = "-internal"
        elif isinstance(link_target, ExternalLink):
            link_class = "-external"
        super().__init__(
            children,
            markup=False,
            id=id,
            classes=merge_class_names(HIGHLIGHT_CLASS, classes, link_class),
        )
        self.link_target = link_target
        self.highlight_state = HighlightState()
        self.animation_delay = delay
        self.can_focus = self.link_target is not None
        self._animation_timer: Optional[Timer] = None

    @property
    def link_attributes(self) -> dict[str, str]:
        return self.link_target.attributes() if self.link_target else {}

    def on_mount(self) -> None:
        self.highlight_state.mounted = True
        self._animation_timer = self.set_timer(self.animation_delay, self._start_animation)

    def on_unmount(self) -> None:
        self.highlight_state.mounted = False
        self._release_timer()

    def _release_timer(self) -> None:
        if self._animation_timer is not None:
            self._animation_timer.stop()
            self._animation_timer = None

    def _start_animation(self) -> None:
        self._animation_timer = None
        if not self.highlight_state.mounted or self.highlight_state.animate:
            return
        self.highlight_state.animate = True
        self.set_class(True, ANIMATE_CLASS)
        logger.debug("Highlight animation started for %r", self.id or self)

    def on_click(self, event: events.Click) -> None:
        if self.link_target is not None:
            event.stop()
            self.action_follow()

    def action_follow(self) -> None:
        if self.link_target is not None:
            follow_link(self, self.link_target)
