from textual.message import Message

from .datamodels import ActionKind


class TransitionApplied(Message):
    """Posted after the dispatcher has applied a store transition."""
    def __init__(self, kind: ActionKind, article_id: str) -> None:
        self.kind = kind
        self.article_id = article_id
        super().__init__()
