from __future__ import annotations

from typing import Iterable, Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, Markdown, Static

from .datamodels import Author, PostPage, Project
from .feed import FeedRow, FeedView
from .highlight import HandHighlight
from .routes import page_path
from .widgets import ErrorMessage, Link, PostList, TagLabel

BACK_BINDING = Binding("escape,backspace,left", "app.pop_screen", "Back")


class PostScreen(Screen):
    """Detail view for a single post, reached through /blog/{slug}."""

    BINDINGS = [BACK_BINDING]

    def __init__(self, row: FeedRow):
        super().__init__()
        self.row = row

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="post-scroll"):
            yield Static(self.row.title, markup=False, classes="section-title")
            yield Static(self.row.date_text, markup=False, classes="post-date")
            with Horizontal(classes="post-tags"):
                for tag in self.row.tags:
                    yield TagLabel(tag)
            yield Static(self.row.summary, markup=False, classes="post-summary")
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.row.title
        self.sub_title = self.row.date_text
        self.query_one("#post-scroll").focus()


class BlogScreen(Screen):
    """Every published post, a page at a time."""

    BINDINGS = [BACK_BINDING]

    def __init__(self, page: PostPage, rows: Iterable[FeedRow]):
        super().__init__()
        self.page = page
        self.rows = tuple(rows)

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="blog-scroll"):
            yield Static("all posts", classes="section-title")
            yield PostList(FeedView(rows=self.rows), id="blog-posts")
            with Horizontal(classes="pagination"):
                if self.page.has_previous:
                    yield Link("← Previous", page_path(self.page.current_page - 1), id="previous-page")
                yield Static(
                    f"{self.page.current_page} of {self.page.total_pages}",
                    classes="page-count",
                )
                if self.page.has_next:
                    yield Link("Next →", page_path(self.page.current_page + 1), id="next-page")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "Blog"
        self.sub_title = f"page {self.page.current_page} of {self.page.total_pages}"


class AboutScreen(Screen):
    BINDINGS = [BACK_BINDING]

    def __init__(self, author: Optional[Author]):
        super().__init__()
        self.author = author

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="about-scroll"):
            if self.author is None:
                yield ErrorMessage("No author profile available.")
            else:
                yield Static(self.author.name, markup=False, classes="section-title")
                if self.author.avatar:
                    yield Static(f"[avatar] {self.author.avatar}", markup=False, id="avatar")
                role = ", ".join(p for p in (self.author.occupation, self.author.company) if p)
                if role:
                    yield Static(role, markup=False, classes="section-description")
                for label, url in self._contact_links():
                    yield HandHighlight(label, url=url, classes="contact")
        yield Footer()

    def _contact_links(self) -> list[tuple[str, str]]:
        links = []
        if self.author.email:
            links.append(("email", f"mailto:{self.author.email}"))
        for label in ("github", "linkedin", "twitter"):
            url = getattr(self.author, label)
            if url:
                links.append((label, url))
        return links

    def on_mount(self) -> None:
        self.title = "About"


class ProjectsScreen(Screen):
    BINDINGS = [BACK_BINDING]

    def __init__(self, projects: Iterable[Project]):
        super().__init__()
        self.projects = list(projects)

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="projects-scroll"):
            yield Static("projects", classes="section-title")
            for project in self.projects:
                yield HandHighlight(project.title, url=project.href, classes="project-title")
                yield Static(project.description, markup=False, classes="project-description")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "Projects"


class ErrorScreen(Screen):
    BINDINGS = [BACK_BINDING]

    def __init__(self, title: str, message: str):
        super().__init__()
        self.title = title
        self.message = message

    def compose(self) -> ComposeResult:
        yield Header()
        yield Label(self.title, classes="error-title")
        yield Markdown(self.message)
        yield Footer()
