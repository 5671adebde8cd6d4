from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Button, Header, ListView

from .config import UI_DEFAULTS, SiteSettings
from .datamodels import Project
from .feed import build_feed, build_profile, build_row, build_rows
from .messages import Navigate
from .projects import PROJECTS
from .routes import ABOUT_PATH, BLOG_PATH, HOME_PATH, PROJECTS_PATH, match_route
from .screens import AboutScreen, BlogScreen, ErrorScreen, PostScreen, ProjectsScreen
from .selection import core_content, find_author, paginate_posts, select_posts, sort_posts
from .sources.base import ContentSource
from .sources.memory import InMemorySource
from .widgets import HeroSection, PostItem, RecentSection, StatusBar

logger = logging.getLogger("homepage")

KEYBINDING_STYLE = "cyan"


class HomepageApp(App):
    TITLE = "homepage"

    CSS_PATH = "app.css"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("h", f"go('{HOME_PATH}')", "Home"),
        Binding("b", f"go('{BLOG_PATH}')", "Blog"),
        Binding("a", f"go('{ABOUT_PATH}')", "About"),
        Binding("p", f"go('{PROJECTS_PATH}')", "Projects"),
        Binding("r", "read", "Read"),
    ]

    def __init__(
        self,
        site: Optional[SiteSettings] = None,
        source: Optional[ContentSource] = None,
        projects: Optional[Iterable[Project]] = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.site = site or SiteSettings()
        self.source = source or InMemorySource()
        self.projects = list(PROJECTS if projects is None else projects)
        # Recomputed from the source on every start, there is no cursor.
        self.posts = core_content(sort_posts(self.source.get_posts()))
        self.author = find_author(self.source.get_authors(), self.site.author_name)
        self.feed = select_posts(self.posts, self.site.max_display)
        logger.info(
            "Selected %d of %d posts (more: %s)",
            len(self.feed.items),
            len(self.posts),
            self.feed.has_more,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="home"):
            yield HeroSection(self.site, build_profile(self.author))
            yield RecentSection(self.site, build_feed(self.feed, self.site.locale))
        yield StatusBar()

    def on_mount(self) -> None:
        self.title = self.site.title
        if self.site.theme in self.available_themes:
            self.theme = self.site.theme
        else:
            logger.warning("Theme '%s' not found, keeping %s", self.site.theme, self.theme)

        status = self.query_one(StatusBar)
        status.show_feed(self.feed, len(self.posts))
        status.keybinding_hint = UI_DEFAULTS["statusbar_keybindings"].format(
            color=KEYBINDING_STYLE
        )

    def navigate(self, path: str) -> None:
        """Resolve a site path and show the matching screen."""
        logger.info("Navigating to %s", path)
        route = match_route(path)
        if route is None:
            self._not_found(path)
        elif route.name == "home":
            for _ in range(len(self.screen_stack) - 1):
                self.pop_screen()
        elif route.name == "blog":
            try:
                page = paginate_posts(self.posts, route.page, self.site.posts_per_page)
            except ValueError as e:
                logger.warning("Bad blog page %s: %s", route.page, e)
                self._not_found(path)
                return
            self.push_screen(BlogScreen(page, build_rows(page.items, self.site.locale)))
        elif route.name == "post":
            post = next((p for p in self.posts if p.slug == route.slug), None)
            if post is None:
                self._not_found(path)
                return
            self.push_screen(PostScreen(build_row(post, self.site.locale)))
        elif route.name == "about":
            self.push_screen(AboutScreen(self.author))
        elif route.name == "projects":
            self.push_screen(ProjectsScreen(self.projects))

    def _not_found(self, path: str) -> None:
        self.push_screen(ErrorScreen("Page not found", f"Nothing lives at `{path}`."))

    def on_navigate(self, message: Navigate) -> None:
        self.navigate(message.path)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, PostItem):
            self.navigate(event.item.row.href)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "about-button":
            self.navigate(ABOUT_PATH)
        elif event.button.id == "read-button":
            self.action_read()

    def action_go(self, path: str) -> None:
        self.navigate(path)

    def action_read(self) -> None:
        """Scroll the home screen down to the recent posts."""
        if len(self.screen_stack) > 1:
            self.navigate(HOME_PATH)
        try:
            self.query_one("#content").scroll_visible()
        except NoMatches:
            logger.debug("Recent posts section not mounted yet")
