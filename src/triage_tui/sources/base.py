from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from ..datamodels import Article, Seed


class SeedError(Exception):
    """Raised when seed data cannot be loaded or is malformed."""


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def article_from_record(record: Mapping[str, Any]) -> Article:
    """Build an Article from a raw record, coercing scalar fields to strings."""
    if not isinstance(record, Mapping):
        raise SeedError(f"Article record must be an object, got {type(record).__name__}")
    if record.get("id") in (None, ""):
        raise SeedError(f"Article record has no id: {dict(record)!r}")
    return Article(
        id=str(record["id"]),
        title=str(record.get("title", "")),
        author=_optional_str(record.get("author")),
        body=str(record.get("body", "")),
        url=_optional_str(record.get("url")),
        published=_optional_str(record.get("published")),
        expanded=bool(record.get("expanded", False)),
    )


class Source(ABC):
    """Abstract base class for a seed data provider."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config

    @abstractmethod
    def get_seed(self) -> Seed:
        """Return the initial queue and result collections."""
        pass
