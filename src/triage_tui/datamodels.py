from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


# --- Data models ---
@dataclass(frozen=True)
class Article:
    id: str
    title: str = ""
    author: Optional[str] = None
    body: str = ""
    url: Optional[str] = None
    published: Optional[str] = None
    expanded: bool = False


class ActionKind(str, Enum):
    """The transition a per-article control triggers."""

    FAVORITE = "favorite"
    ARCHIVE = "archive"
    TRASH = "trash"
    TOGGLE_EXPAND = "toggleExpand"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional[ActionKind]:
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Stats:
    num_favorited: int
    num_archived: int
    num_trashed: int


@dataclass(frozen=True)
class TriageState:
    queue: Tuple[Article, ...] = ()
    favorited: Tuple[Article, ...] = ()
    archived: Tuple[Article, ...] = ()
    trashed: Tuple[Article, ...] = ()


@dataclass
class Seed:
    saved: List[Article] = field(default_factory=list)
    favorited: List[Article] = field(default_factory=list)
    archived: List[Article] = field(default_factory=list)
    trashed: List[Article] = field(default_factory=list)
