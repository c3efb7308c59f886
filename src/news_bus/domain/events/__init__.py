"""领域事件"""

from .article_events import (
    ArticleDeleted,
    ArticleEvent,
    ArticleModified,
    ArticlePublished,
    ArticleRead,
    EventKind,
    event_for,
)

__all__ = [
    "EventKind",
    "ArticleEvent",
    "ArticlePublished",
    "ArticleModified",
    "ArticleDeleted",
    "ArticleRead",
    "event_for",
]
