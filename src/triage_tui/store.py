from __future__ import annotations

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from .datamodels import Article, Seed, Stats, TriageState

logger = logging.getLogger("triage")

CONTAINERS = ("queue", "favorited", "archived", "trashed")


class UnknownArticleError(KeyError):
    """Raised when an id has no record in the seed lookup table."""


def _without(articles: Iterable[Article], article_id: str) -> Tuple[Article, ...]:
    return tuple(a for a in articles if a.id != article_id)


def _has(articles: Iterable[Article], article_id: str) -> bool:
    return any(a.id == article_id for a in articles)


class ArticleStore:
    """Holds the queue and the three result collections.

    Every transition reads a single snapshot, derives each container it touches
    from that snapshot and swaps in the new state in one assignment. Articles are
    matched by ``id``; records are copied between containers, so object identity
    means nothing here.
    """

    def __init__(self, seed: Seed):
        lookup: dict[str, Article] = {}
        for article in seed.saved:
            lookup[article.id] = article
        for group in (seed.favorited, seed.archived, seed.trashed):
            for article in group:
                lookup.setdefault(article.id, article)
        self._lookup: Mapping[str, Article] = MappingProxyType(lookup)

        self._state = TriageState(
            queue=tuple(seed.saved),
            favorited=tuple(seed.favorited),
            archived=tuple(seed.archived),
            trashed=tuple(seed.trashed),
        )
        logger.debug(
            "Store seeded: %d queued, %d favorited, %d archived, %d trashed",
            len(self._state.queue),
            len(self._state.favorited),
            len(self._state.archived),
            len(self._state.trashed),
        )

    # --- Read side ---
    @property
    def state(self) -> TriageState:
        return self._state

    @property
    def queue(self) -> Tuple[Article, ...]:
        return self._state.queue

    @property
    def favorited(self) -> Tuple[Article, ...]:
        return self._state.favorited

    @property
    def archived(self) -> Tuple[Article, ...]:
        return self._state.archived

    @property
    def trashed(self) -> Tuple[Article, ...]:
        return self._state.trashed

    @property
    def stats(self) -> Stats:
        state = self._state
        return Stats(
            num_favorited=len(state.favorited),
            num_archived=len(state.archived),
            num_trashed=len(state.trashed),
        )

    def contains(self, container: str, article_id: str) -> bool:
        """Return True if ``container`` holds an article with ``article_id``."""
        if container not in CONTAINERS:
            raise ValueError(f"Unknown container: {container}")
        return _has(getattr(self._state, container), article_id)

    def lookup(self, article_id: str) -> Article:
        """Resolve a record from the seed table, not from the live queue."""
        try:
            return self._lookup[article_id]
        except KeyError:
            raise UnknownArticleError(article_id) from None

    # --- Transitions ---
    def favorite(self, article_id: str) -> TriageState:
        target = self.lookup(article_id)
        state = self._state
        if _has(state.favorited, article_id):
            favorited = _without(state.favorited, article_id)
            logger.debug("Unfavorited %s", article_id)
        else:
            favorited = state.favorited + (target,)
            logger.debug("Favorited %s", article_id)
        self._state = replace(state, favorited=favorited)
        return self._state

    def archive(self, article_id: str) -> TriageState:
        target = self.lookup(article_id)
        state = self._state
        self._state = replace(
            state,
            queue=_without(state.queue, article_id),
            archived=state.archived + (target,),
        )
        logger.debug("Archived %s", article_id)
        return self._state

    def trash(self, article_id: str) -> TriageState:
        target = self.lookup(article_id)
        state = self._state
        self._state = replace(
            state,
            queue=_without(state.queue, article_id),
            favorited=_without(state.favorited, article_id),
            trashed=state.trashed + (target,),
        )
        logger.debug("Trashed %s", article_id)
        return self._state

    def toggle_expand(self, article_id: str) -> TriageState:
        state = self._state
        queue = tuple(
            replace(a, expanded=not a.expanded) if a.id == article_id else a
            for a in state.queue
        )
        self._state = replace(state, queue=queue)
        logger.debug("Toggled expand on %s", article_id)
        return self._state
