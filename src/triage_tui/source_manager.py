from __future__ import annotations

from typing import Any, Dict

from .config import DEFAULT_SOURCE
from .sources.base import Source
from .sources.rss import RSSSource
from .sources.static import StaticSource

SOURCES = {"static": StaticSource, "rss": RSSSource}


def get_source(config: Dict[str, Any]) -> Source:
    source_name = config.get("source", DEFAULT_SOURCE)
    source_config = config.get("sources", {}).get(source_name, {})
    source_class = SOURCES.get(source_name)
    if not source_class:
        raise ValueError(f"Unknown source: {source_name}")
    return source_class(source_config)
