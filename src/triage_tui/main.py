#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import logging
import sys

from .app import TriageApp
from .config import DEFAULT_THEME, load_config, setup_logging
from .source_manager import get_source
from .sources.base import SeedError
from .store import ArticleStore

logger = logging.getLogger("triage")


# --- Entrypoint ---
def main() -> None:
    parser = argparse.ArgumentParser(description="Article triage TUI")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--theme", type=str, help="Set theme for this run")
    seed_group = parser.add_mutually_exclusive_group()
    seed_group.add_argument("--seed", type=str, help="Path to a JSON seed file")
    seed_group.add_argument("--feed", type=str, help="Seed the queue from an RSS/Atom feed URL")
    args = parser.parse_args()

    debug_path = setup_logging(args.debug)
    if debug_path:
        print(f"Debug logging enabled: {debug_path}", file=sys.stderr)

    config = load_config()
    if args.seed:
        config["source"] = "static"
        config.setdefault("sources", {}).setdefault("static", {})["path"] = args.seed
    elif args.feed:
        config["source"] = "rss"
        config.setdefault("sources", {}).setdefault("rss", {})["url"] = args.feed

    theme_name = args.theme or config.get("theme") or DEFAULT_THEME
    logger.info("Using theme: %s", theme_name)

    try:
        seed = get_source(config).get_seed()
    except (SeedError, ValueError) as e:
        logger.error("Failed to load seed data: %s", e)
        print(f"Failed to load articles: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        app = TriageApp(ArticleStore(seed), theme=theme_name, config=config)
        app.run()
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        print(f"Application crashed: {e}", file=sys.stderr)


if __name__ == "__main__":
    main()
