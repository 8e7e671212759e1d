from __future__ import annotations

import logging
from typing import Any, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Header
from rich.markup import escape

from .config import DEFAULT_THEME, UI_DEFAULTS
from .dispatcher import Dispatcher
from .messages import TransitionApplied
from .store import ArticleStore
from .widgets import (
    ArticleCard,
    ArticlesContainer,
    NoArticlesMessage,
    StatsHeader,
    StatusBar,
)

logger = logging.getLogger("triage")

ACTION_DESCRIPTIONS = {
    "favorite": "Toggled favorite on",
    "archive": "Archived",
    "trash": "Trashed",
    "toggleExpand": "Toggled",
}


class TriageApp(App):
    TITLE = "Triage"
    SUB_TITLE = "Sort your reading list"

    CSS_PATH = "app.css"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        store: ArticleStore,
        theme: Optional[str] = None,
        config: Optional[dict[str, Any]] = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.store = store
        self.dispatcher = Dispatcher(store)
        self.config = config or {}
        self._theme_name = theme or DEFAULT_THEME

    def compose(self) -> ComposeResult:
        yield Header()
        yield StatsHeader(id="stats")
        yield ArticlesContainer(self.dispatcher, id="articles-container")
        yield StatusBar()

    async def on_mount(self) -> None:
        if self._theme_name in self.available_themes:
            self.theme = self._theme_name
        else:
            logger.warning(
                "Theme '%s' not found, falling back to %s.", self._theme_name, DEFAULT_THEME
            )
            self._theme_name = DEFAULT_THEME
            self.theme = DEFAULT_THEME

        keybindings_text = self.config.get("ui", {}).get(
            "statusbar_keybindings", UI_DEFAULTS["statusbar_keybindings"]
        )
        self.query_one(StatusBar).set_keybindings(keybindings_text.format(color="$accent"))
        await self.update_view()

    async def update_view(self) -> None:
        """Re-derive the cards and the counters from the store."""
        store = self.store
        self.query_one(StatsHeader).set_stats(store.stats)

        container = self.query_one("#articles-container", ArticlesContainer)
        await container.remove_children()
        if not store.queue:
            await container.mount(NoArticlesMessage())
            return

        cards = [
            ArticleCard(article, favorited=store.contains("favorited", article.id))
            for article in store.queue
        ]
        await container.mount_all(cards)

    async def on_transition_applied(self, message: TransitionApplied) -> None:
        article = self.store.lookup(message.article_id)
        description = ACTION_DESCRIPTIONS.get(message.kind.value, message.kind.value)
        self.query_one(StatusBar).last_action = f"{description} '{escape(article.title)}'"
        await self.update_view()
