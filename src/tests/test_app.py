from __future__ import annotations

import unittest

from homepage_tui.app import HomepageApp
from homepage_tui.config import SiteSettings
from homepage_tui.datamodels import Author, Post
from homepage_tui.screens import BlogScreen, ErrorScreen, PostScreen
from homepage_tui.sources.memory import InMemorySource
from homepage_tui.widgets import AllPostsLink, EmptyFeed, Link, PostItem, ProfileBlock, StatusBar

from factories import make_posts

AUTHOR = Author(name="syamil maulod", avatar="/static/images/avatar.png")


def build_app(posts, authors=(AUTHOR,), **site) -> HomepageApp:
    return HomepageApp(site=SiteSettings(**site), source=InMemorySource(posts, authors))


class TestRecentFeed(unittest.IsolatedAsyncioTestCase):
    async def test_seven_posts_show_five_and_all_posts_link(self):
        app = build_app(make_posts(7))
        async with app.run_test():
            items = app.screen.query(PostItem)
            self.assertEqual(
                [item.row.slug for item in items],
                ["post-6", "post-5", "post-4", "post-3", "post-2"],
            )
            self.assertEqual(len(app.screen.query(AllPostsLink)), 1)
            self.assertEqual(len(app.screen.query(EmptyFeed)), 0)

    async def test_three_posts_show_all_without_link(self):
        app = build_app(make_posts(3))
        async with app.run_test():
            self.assertEqual(len(app.screen.query(PostItem)), 3)
            self.assertEqual(len(app.screen.query(AllPostsLink)), 0)

    async def test_no_posts_shows_message(self):
        app = build_app([])
        async with app.run_test():
            self.assertEqual(len(app.screen.query(PostItem)), 0)
            empty = app.screen.query_one(EmptyFeed)
            self.assertEqual(empty.empty_message, "No posts found.")

    async def test_drafts_are_not_listed(self):
        posts = make_posts(2) + [Post(slug="draft", date="2025-01-01", title="D", draft=True)]
        app = build_app(posts)
        async with app.run_test():
            slugs = [item.row.slug for item in app.screen.query(PostItem)]
            self.assertEqual(slugs, ["post-1", "post-0"])

    async def test_links_carry_accessible_labels(self):
        app = build_app(make_posts(7))
        async with app.run_test():
            self.assertEqual(app.screen.query_one(AllPostsLink).tooltip, "All posts")
            read_more = app.screen.query(".read-more").first(Link)
            self.assertEqual(read_more.tooltip, 'Read more: "Post 6"')

    async def test_status_bar_reports_feed_size(self):
        app = build_app(make_posts(7))
        async with app.run_test():
            status = app.query_one(StatusBar).status_text()
            self.assertTrue(status.startswith("5 of 7 posts, more under /blog"))

    async def test_status_bar_without_posts(self):
        app = build_app([])
        async with app.run_test():
            status = app.query_one(StatusBar).status_text()
            self.assertTrue(status.startswith("No posts found."))

    async def test_max_display_comes_from_settings(self):
        app = build_app(make_posts(4), max_display=2)
        async with app.run_test():
            self.assertEqual(len(app.screen.query(PostItem)), 2)
            self.assertEqual(len(app.screen.query(AllPostsLink)), 1)


class TestProfile(unittest.IsolatedAsyncioTestCase):
    async def test_profile_with_avatar(self):
        app = build_app(make_posts(1))
        async with app.run_test():
            profile = app.screen.query_one(ProfileBlock)
            self.assertEqual(len(profile.query("#avatar")), 1)

    async def test_profile_without_avatar(self):
        app = build_app(make_posts(1), authors=[Author(name="syamil maulod")])
        async with app.run_test():
            profile = app.screen.query_one(ProfileBlock)
            self.assertEqual(len(profile.query("#avatar")), 0)

    async def test_missing_author_omits_profile(self):
        app = build_app(make_posts(1), authors=[Author(name="Syamil Maulod")])
        async with app.run_test():
            self.assertEqual(len(app.screen.query(ProfileBlock)), 0)


class TestNavigation(unittest.IsolatedAsyncioTestCase):
    async def test_all_posts_link_opens_blog(self):
        app = build_app(make_posts(7))
        async with app.run_test() as pilot:
            app.screen.query_one(AllPostsLink).action_follow()
            await pilot.pause(0.1)
            self.assertIsInstance(app.screen, BlogScreen)
            self.assertEqual(app.screen.page.current_page, 1)
            self.assertEqual(app.screen.page.total_pages, 2)
            self.assertEqual(len(app.screen.query(PostItem)), 5)

    async def test_second_blog_page(self):
        app = build_app(make_posts(7))
        async with app.run_test() as pilot:
            app.navigate("/blog/page/2")
            await pilot.pause()
            self.assertIsInstance(app.screen, BlogScreen)
            slugs = [item.row.slug for item in app.screen.query(PostItem)]
            self.assertEqual(slugs, ["post-1", "post-0"])

    async def test_post_detail(self):
        app = build_app(make_posts(3))
        async with app.run_test() as pilot:
            app.navigate("/blog/post-1")
            await pilot.pause()
            self.assertIsInstance(app.screen, PostScreen)
            self.assertEqual(app.screen.row.title, "Post 1")
            self.assertEqual(app.screen.row.date_text, "January 2, 2024")

    async def test_unknown_paths(self):
        app = build_app(make_posts(3))
        async with app.run_test() as pilot:
            for path in ("/blog/missing", "/nowhere", "/blog/page/9"):
                app.navigate(path)
                await pilot.pause()
                self.assertIsInstance(app.screen, ErrorScreen)

    async def test_home_pops_back(self):
        app = build_app(make_posts(3))
        async with app.run_test() as pilot:
            app.navigate("/blog")
            await pilot.pause()
            app.navigate("/blog/post-0")
            await pilot.pause()
            app.navigate("/")
            await pilot.pause()
            self.assertEqual(len(app.screen_stack), 1)
            self.assertEqual(len(app.screen.query(PostItem)), 3)


if __name__ == "__main__":
    unittest.main()
