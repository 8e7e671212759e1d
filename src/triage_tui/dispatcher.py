from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple

from .datamodels import ActionKind, TriageState
from .store import ArticleStore

logger = logging.getLogger("triage")

Transition = Callable[[str], TriageState]


class Dispatcher:
    """Routes control events to exactly one store transition.

    A control is any node carrying ``action_kind`` and ``article_id``
    attributes. Events whose origin has no such ancestor, or whose action kind
    is not recognised, are ignored.
    """

    def __init__(self, store: ArticleStore):
        self.store = store
        self._routes: Mapping[ActionKind, Transition] = MappingProxyType(
            {
                ActionKind.FAVORITE: store.favorite,
                ActionKind.ARCHIVE: store.archive,
                ActionKind.TRASH: store.trash,
                ActionKind.TOGGLE_EXPAND: store.toggle_expand,
            }
        )

    @property
    def routes(self) -> Mapping[ActionKind, Transition]:
        return self._routes

    @staticmethod
    def resolve_control(node: Any) -> Optional[Any]:
        """Walk up from ``node`` to the nearest actionable control."""
        while node is not None:
            if hasattr(node, "action_kind") and hasattr(node, "article_id"):
                return node
            node = getattr(node, "parent", None)
        return None

    def handle(self, origin: Any) -> Optional[Tuple[ActionKind, str]]:
        control = self.resolve_control(origin)
        if control is None:
            logger.debug("Ignoring event from %r: no actionable control", origin)
            return None

        kind = ActionKind.parse(control.action_kind)
        if kind is None:
            logger.debug("Ignoring unknown action kind %r", control.action_kind)
            return None

        article_id = control.article_id
        self.dispatch(kind, article_id)
        return kind, article_id

    def dispatch(self, kind: ActionKind, article_id: str) -> TriageState:
        logger.info("Dispatching %s for article %s", kind.value, article_id)
        return self._routes[kind](article_id)
