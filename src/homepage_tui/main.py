#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import logging
import sys

from .app import HomepageApp
from .config import SiteSettings, load_config, setup_logging
from .sources.manager import get_source

logger = logging.getLogger("homepage")


# --- Entrypoint ---
def main() -> None:
    parser = argparse.ArgumentParser(description="Personal homepage in the terminal")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--theme", type=str, help="Set theme for this run")
    parser.add_argument(
        "--content",
        type=str,
        help="JSON file with posts and authors (defaults to the configured source)",
    )
    args = parser.parse_args()

    debug_path = setup_logging(args.debug)
    if debug_path:
        print(f"Debug logging enabled: {debug_path}", file=sys.stderr)

    config = load_config()
    if args.theme:
        config["theme"] = args.theme
    if args.content:
        config["source"] = "json"
        config.setdefault("sources", {})["json"] = {"path": args.content}

    try:
        site = SiteSettings.from_config(config)
        source = get_source(config)
        app = HomepageApp(site=site, source=source)
        app.run()
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        print(f"Application crashed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
