from __future__ import annotations

import importlib.resources
import json
import logging
import os
import shutil
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

# --- Configuration ---
CONFIG_PATH = os.path.expanduser("~/.config/homepage/config.json")

MAX_DISPLAY = 5
POSTS_PER_PAGE = 5
# Seconds between mount and the highlight animation flag flip.
ANIMATION_DELAY = 0.05

NO_POSTS_MESSAGE = "No posts found."

SITE_DEFAULTS: Dict[str, Any] = {
    "title": "bearylogical",
    "description": "notes on manufacturing, data and the places they meet",
    "locale": "en-US",
    "author_name": "syamil maulod",
    "nickname": "syamil",
    "interests": ["advanced manufacturing", "data", "social equity"],
    "max_display": MAX_DISPLAY,
    "posts_per_page": POSTS_PER_PAGE,
}

# Default UI settings
UI_DEFAULTS = {
    "statusbar_keybindings": "[b {color}]b[/] blog, [b {color}]a[/] about, [b {color}]p[/] projects",
}

# --- Logging ---
logger = logging.getLogger("homepage")

def setup_logging(debug: bool = False) -> Optional[str]:
    """Configure logging."""
    if not debug:
        logging.basicConfig(level=logging.CRITICAL, handlers=[logging.NullHandler()])
        return None

    ts = datetime.now().strftime("%Y%m%dT%H%M%S")
    pid = os.getpid()
    debug_path = f"/tmp/homepage_debug_{ts}_{pid}.log"

    # Use basicConfig to set up the root logger with a file handler
    logging.basicConfig(
        level=logging.DEBUG,
        filename=debug_path,
        filemode="a",
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    logger.debug("Debug logging enabled to %s", debug_path)
    return debug_path


def ensure_config_file_exists() -> None:
    """Copy the default config file if the user's config file is not found."""
    if not os.path.exists(CONFIG_PATH):
        logger.info("Config file not found at %s, creating default.", CONFIG_PATH)
        try:
            os.makedirs(os.path.dirname(CONFIG_PATH), exist_ok=True)
            default_config = importlib.resources.files("homepage_tui") / "default_config.json"
            with importlib.resources.as_file(default_config) as default_config_path:
                shutil.copy(default_config_path, CONFIG_PATH)
        except (IOError, OSError) as e:
            logger.error("Failed to create default config file: %s", e)

def load_config() -> Dict[str, Any]:
    """Load the main configuration file."""
    ensure_config_file_exists()
    try:
        with open(CONFIG_PATH, "r") as f:
            config = json.load(f)
            logger.info("Loaded config from %s", CONFIG_PATH)
            return config
    except (IOError, json.JSONDecodeError) as e:
        logger.error("Failed to load config from %s: %s", CONFIG_PATH, e)
        return {}


@dataclass(frozen=True)
class SiteSettings:
    """Site metadata and display limits, passed explicitly to the feed."""

    title: str = SITE_DEFAULTS["title"]
    description: str = SITE_DEFAULTS["description"]
    locale: str = SITE_DEFAULTS["locale"]
    author_name: str = SITE_DEFAULTS["author_name"]
    nickname: str = SITE_DEFAULTS["nickname"]
    interests: Tuple[str, ...] = tuple(SITE_DEFAULTS["interests"])
    max_display: int = MAX_DISPLAY
    posts_per_page: int = POSTS_PER_PAGE
    theme: str = "dracula"

    def __post_init__(self) -> None:
        for name in ("max_display", "posts_per_page"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"site.{name} must be positive, got {value}")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> SiteSettings:
        site = {**SITE_DEFAULTS, **config.get("site", {})}
        return cls(
            title=site["title"],
            description=site["description"],
            locale=site["locale"],
            author_name=site["author_name"],
            nickname=site["nickname"],
            interests=tuple(site["interests"]),
            max_display=int(site["max_display"]),
            posts_per_page=int(site["posts_per_page"]),
            theme=config.get("theme") or "dracula",
        )
