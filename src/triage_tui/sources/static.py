from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..config import DEFAULT_SEED_PATH
from ..datamodels import Article, Seed
from .base import SeedError, Source, article_from_record

logger = logging.getLogger("triage")

SEED_KEYS = ("saved", "favorited", "archived", "trashed")


def parse_seed(data: Any) -> Seed:
    """Turn a decoded seed document into a Seed. Missing keys are empty."""
    if not isinstance(data, dict):
        raise SeedError("Seed document must be a JSON object")

    groups: Dict[str, List[Article]] = {}
    for key in SEED_KEYS:
        records = data.get(key, [])
        if not isinstance(records, list):
            raise SeedError(f"Seed key '{key}' must be a list")
        groups[key] = [article_from_record(r) for r in records]
    return Seed(**groups)


class StaticSource(Source):
    """Reads the four seed sequences from a JSON file."""

    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)
        self.path = Path(self.config.get("path") or DEFAULT_SEED_PATH).expanduser()

    def get_seed(self) -> Seed:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise SeedError(f"Unable to read seed file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SeedError(f"Invalid JSON in seed file {self.path}: {e}") from e

        seed = parse_seed(data)
        logger.info("Loaded %d saved articles from %s", len(seed.saved), self.path)
        return seed
