from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.reactive import reactive
from textual.widgets import Button, Static
from rich.text import Text

from .datamodels import ActionKind, Article, Stats
from .dispatcher import Dispatcher
from .messages import TransitionApplied

logger = logging.getLogger("triage")


class ArticleButton(Button):
    """A per-article control. Carries the attributes the dispatcher reads."""

    def __init__(self, label: str, action_kind: ActionKind, article_id: str, **kwargs):
        super().__init__(label, classes=f"article-button {action_kind.value}", **kwargs)
        self.action_kind = action_kind.value
        self.article_id = article_id


# --- UI Widgets ---
class ArticleCard(Vertical):
    def __init__(self, article: Article, favorited: bool = False):
        classes = "article-card expanded" if article.expanded else "article-card"
        super().__init__(classes=classes)
        self.article = article
        self.favorited = favorited

    def compose(self) -> ComposeResult:
        article = self.article
        yield Static(Text(article.title, style="bold"), classes="article-title")
        byline = " · ".join(p for p in (article.author, article.published) if p)
        if byline:
            yield Static(Text(byline), classes="article-byline")
        if article.expanded:
            yield Static(Text(article.body or "(no content)"), classes="article-body")
        with Horizontal(classes="article-actions"):
            yield ArticleButton(
                "♥" if self.favorited else "♡", ActionKind.FAVORITE, article.id
            )
            yield ArticleButton("Archive", ActionKind.ARCHIVE, article.id)
            yield ArticleButton("Trash", ActionKind.TRASH, article.id, variant="error")
            yield ArticleButton(
                "Less" if article.expanded else "More",
                ActionKind.TOGGLE_EXPAND,
                article.id,
            )


class ArticlesContainer(VerticalScroll):
    """Holds the article cards and owns the only dispatch entry point."""

    def __init__(self, dispatcher: Dispatcher, **kwargs):
        super().__init__(**kwargs)
        self.dispatcher = dispatcher

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        control = self.dispatcher.resolve_control(event.button)
        if control is not None and not self.dispatcher.store.contains(
            "queue", control.article_id
        ):
            # Buttons only live on queue cards.
            logger.debug("Ignoring stale press for article %s", control.article_id)
            return
        applied = self.dispatcher.handle(event.button)
        if applied is not None:
            self.post_message(TransitionApplied(*applied))


class NoArticlesMessage(Static):
    def __init__(self):
        super().__init__("No articles to show here.", classes="no-articles-message")


class StatsHeader(Static):
    num_favorited = reactive(0)
    num_archived = reactive(0)
    num_trashed = reactive(0)

    def on_mount(self) -> None:
        self.update_display()

    def set_stats(self, stats: Stats) -> None:
        self.num_favorited = stats.num_favorited
        self.num_archived = stats.num_archived
        self.num_trashed = stats.num_trashed

    def update_display(self) -> None:
        self.update(
            f"♥ {self.num_favorited}   Archived {self.num_archived}   Trashed {self.num_trashed}"
        )

    def watch_num_favorited(self, value: int) -> None:
        self.update_display()

    def watch_num_archived(self, value: int) -> None:
        self.update_display()

    def watch_num_trashed(self, value: int) -> None:
        self.update_display()


class StatusBar(Static):
    last_action = reactive("")
    keybinding_hint = reactive("")

    def on_mount(self) -> None:
        self.update_display()

    def set_keybindings(self, hint: str) -> None:
        """Set the keybinding hint text."""
        self.keybinding_hint = hint

    def update_display(self) -> None:
        """Update the status bar display."""
        status_items = []
        if self.last_action:
            status_items.append(self.last_action)

        if self.keybinding_hint:
            status_items.append(self.keybinding_hint)

        self.update(" | ".join(status_items))

    def watch_last_action(self, last_action: str) -> None:
        self.update_display()

    def watch_keybinding_hint(self, keybinding_hint: str) -> None:
        self.update_display()
