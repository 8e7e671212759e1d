from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Configuration ---
CONFIG_PATH = os.path.expanduser("~/.config/triage/config.json")
DEFAULT_SEED_PATH = Path(__file__).parent / "data" / "articles.json"
DEFAULT_THEME = "textual-dark"
DEFAULT_SOURCE = "static"

HTTP_TIMEOUT = 15
RETRY_ATTEMPTS = 4
RETRY_BACKOFF_FACTOR = 0.5
REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:115.0) "
        "Gecko/20100101 Firefox/115.0"
    )
}

# Default UI settings
UI_DEFAULTS = {
    "statusbar_keybindings": "[b {color}]tab[/] to move, [b {color}]enter[/] to press, [b {color}]q[/] to quit",
}

# --- Logging ---
logger = logging.getLogger("triage")


def setup_logging(debug: bool = False) -> Optional[str]:
    """Configure logging."""
    if not debug:
        logging.basicConfig(level=logging.CRITICAL, handlers=[logging.NullHandler()])
        return None

    ts = datetime.now().strftime("%Y%m%dT%H%M%S")
    pid = os.getpid()
    debug_path = f"/tmp/triage_debug_{ts}_{pid}.log"

    logging.basicConfig(
        level=logging.DEBUG,
        filename=debug_path,
        filemode="a",
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    logger.debug("Debug logging enabled to %s", debug_path)
    return debug_path


def load_config() -> Dict[str, Any]:
    """Load the main configuration file, or an empty config if there is none."""
    if not os.path.exists(CONFIG_PATH):
        logger.info("No config file at %s, using defaults.", CONFIG_PATH)
        return {}
    try:
        with open(CONFIG_PATH, "r") as f:
            config = json.load(f)
            logger.info("Loaded config from %s", CONFIG_PATH)
            return config
    except (IOError, json.JSONDecodeError) as e:
        logger.error("Failed to load config from %s: %s", CONFIG_PATH, e)
        return {}
