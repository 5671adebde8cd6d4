import json
import os
import shutil
import unittest
from pathlib import Path
from unittest.mock import patch

from homepage_tui import config
from homepage_tui.config import MAX_DISPLAY, SiteSettings

TEST_DIR = Path("/tmp/test_homepage_config")
TEST_CONFIG_PATH = str(TEST_DIR / ".config/homepage/config.json")


class TestSiteSettings(unittest.TestCase):
    def test_defaults(self):
        settings = SiteSettings.from_config({})
        self.assertEqual(settings.max_display, MAX_DISPLAY)
        self.assertEqual(settings.max_display, 5)
        self.assertEqual(settings.locale, "en-US")
        self.assertEqual(settings.author_name, "syamil maulod")
        self.assertEqual(settings.theme, "dracula")

    def test_overrides(self):
        settings = SiteSettings.from_config(
            {"theme": "nord", "site": {"max_display": 3, "locale": "de-DE"}}
        )
        self.assertEqual(settings.max_display, 3)
        self.assertEqual(settings.locale, "de-DE")
        self.assertEqual(settings.theme, "nord")
        self.assertEqual(settings.nickname, "syamil")

    def test_invalid_max_display(self):
        with self.assertRaises(ValueError):
            SiteSettings.from_config({"site": {"max_display": 0}})

    def test_invalid_posts_per_page(self):
        with self.assertRaises(ValueError):
            SiteSettings.from_config({"site": {"posts_per_page": 0}})
        with self.assertRaises(ValueError):
            SiteSettings(posts_per_page=-1)


class TestConfigLoading(unittest.TestCase):
    def setUp(self):
        os.makedirs(TEST_DIR, exist_ok=True)

    def tearDown(self):
        shutil.rmtree(TEST_DIR)

    @patch("homepage_tui.config.CONFIG_PATH", TEST_CONFIG_PATH)
    def test_default_config_is_copied(self):
        loaded = config.load_config()

        self.assertTrue(os.path.exists(TEST_CONFIG_PATH))
        self.assertEqual(loaded["source"], "json")
        self.assertEqual(loaded["site"]["max_display"], 5)

    @patch("homepage_tui.config.CONFIG_PATH", TEST_CONFIG_PATH)
    def test_corrupt_config_falls_back_to_empty(self):
        os.makedirs(os.path.dirname(TEST_CONFIG_PATH), exist_ok=True)
        with open(TEST_CONFIG_PATH, "w") as f:
            f.write("{not json")

        self.assertEqual(config.load_config(), {})

    @patch("homepage_tui.config.CONFIG_PATH", TEST_CONFIG_PATH)
    def test_user_config_is_loaded(self):
        os.makedirs(os.path.dirname(TEST_CONFIG_PATH), exist_ok=True)
        with open(TEST_CONFIG_PATH, "w") as f:
            json.dump({"theme": "monokai"}, f)

        self.assertEqual(config.load_config(), {"theme": "monokai"})


if __name__ == "__main__":
    unittest.main()
