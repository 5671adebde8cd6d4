from __future__ import annotations

from typing import Optional

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, ListItem, ListView, Static
from textual.reactive import reactive
from rich.text import Text

from .config import NO_POSTS_MESSAGE, SiteSettings
from .datamodels import SelectedFeed
from .feed import FeedRow, FeedView, ProfileView
from .highlight import HandHighlight
from .links import classify_link, follow_link
from .routes import BLOG_PATH


class Link(Static):
    """Plain text link, the non-animated sibling of HandHighlight."""

    BINDINGS = [
        Binding("enter", "follow", "Open link", show=False),
    ]

    def __init__(
        self,
        text: str,
        url: str,
        *,
        label: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ):
        super().__init__(text, markup=False, id=id, classes=classes)
        self.link_target = classify_link(url)
        if label:
            self.tooltip = label
        self.can_focus = self.link_target is not None

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.action_follow()

    def action_follow(self) -> None:
        if self.link_target is not None:
            follow_link(self, self.link_target)


# --- UI Widgets ---
class TagLabel(Static):
    def __init__(self, tag: str):
        super().__init__(tag, markup=False, classes="tag")
        self.tag = tag


class PostItem(ListItem):
    def __init__(self, row: FeedRow):
        super().__init__()
        self.row = row

    def compose(self) -> ComposeResult:
        with Vertical(classes="post"):
            yield Static(self.row.date_text, markup=False, classes="post-date")
            yield Link(self.row.title, self.row.href, classes="post-title")
            with Horizontal(classes="post-tags"):
                for tag in self.row.tags:
                    yield TagLabel(tag)
            yield Static(self.row.summary, markup=False, classes="post-summary")
            yield Link(
                "Read more →",
                self.row.href,
                label=self.row.read_more_label,
                classes="read-more",
            )


class AllPostsLink(Link):
    def __init__(self, href: str):
        super().__init__("All Posts →", href, label="All posts", id="all-posts")


class EmptyFeed(Static):
    def __init__(self, message: str):
        super().__init__(message, markup=False, id="no-posts")
        self.empty_message = message


class PostList(Vertical):
    """A list of feed rows, or the empty-state message when there are none."""

    def __init__(self, view: FeedView, *, id: Optional[str] = None):
        super().__init__(id=id, classes="post-list")
        self.feed_view = view

    def compose(self) -> ComposeResult:
        if self.feed_view.empty_message:
            yield EmptyFeed(self.feed_view.empty_message)
        else:
            yield ListView(*(PostItem(row) for row in self.feed_view.rows), classes="posts")
        if self.feed_view.all_posts_href:
            with Horizontal(classes="all-posts-row"):
                yield AllPostsLink(self.feed_view.all_posts_href)


class ProfileBlock(Vertical):
    def __init__(self, profile: ProfileView):
        super().__init__(id="profile")
        self.profile = profile

    def compose(self) -> ComposeResult:
        if self.profile.avatar:
            yield Static(
                Text.assemble((f"[{self.profile.avatar_alt}] ", "dim"), self.profile.avatar),
                id="avatar",
            )
        yield Static(self.profile.name, markup=False, classes="profile-name")


class HeroSection(Horizontal):
    def __init__(self, settings: SiteSettings, profile: Optional[ProfileView]):
        super().__init__(id="hero")
        self.settings = settings
        self.profile = profile

    def compose(self) -> ComposeResult:
        with Vertical(id="greeting"):
            yield Static(f"hello,\ni'm {self.settings.nickname}", markup=False, classes="hero-title")
            yield Static(
                "I am generally curious and especially interested in",
                classes="hero-intro",
            )
            with Horizontal(classes="interests"):
                for interest in self.settings.interests:
                    yield HandHighlight(interest, classes="interest")
            with Horizontal(id="hero-buttons"):
                yield Button("about", id="about-button", variant="primary")
                yield Button("read", id="read-button")
        if self.profile is not None:
            yield ProfileBlock(self.profile)


class RecentSection(Vertical):
    def __init__(self, settings: SiteSettings, view: FeedView):
        super().__init__(id="content")
        self.settings = settings
        self.feed_view = view

    def compose(self) -> ComposeResult:
        yield Static("recent", classes="section-title")
        yield Static(self.settings.description, markup=False, classes="section-description")
        yield PostList(self.feed_view, id="recent-posts")


class StatusBar(Static):
    """Bottom line on the home screen: how much of the feed is showing, and key hints."""

    shown = reactive(0)
    total = reactive(0)
    keybinding_hint = reactive("")

    def on_mount(self) -> None:
        self.update(self.status_text())

    def show_feed(self, feed: SelectedFeed, total: int) -> None:
        self.shown = len(feed.items)
        self.total = total

    def status_text(self) -> str:
        if not self.total:
            feed_status = NO_POSTS_MESSAGE
        elif self.shown < self.total:
            feed_status = f"{self.shown} of {self.total} posts, more under {BLOG_PATH}"
        else:
            feed_status = f"{self.total} posts"
        return " | ".join(s for s in (feed_status, self.keybinding_hint) if s)

    def watch_shown(self, shown: int) -> None:
        self.update(self.status_text())

    def watch_total(self, total: int) -> None:
        self.update(self.status_text())

    def watch_keybinding_hint(self, keybinding_hint: str) -> None:
        self.update(self.status_text())


class ErrorMessage(Static):
    def __init__(self, message: str):
        super().__init__(Text(message, style="bold red"))

