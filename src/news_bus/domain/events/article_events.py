"""文章领域事件

事件是封闭的变体集合（发布 / 修改 / 删除 / 阅读），每个变体只引用一篇文章。
事件构造后不可变；通道只在分发时读取事件，不会保留。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar

from ...shared.exceptions import InvalidArgumentError
from ...shared.utils import utc_now
from ..entities import NewsArticle


class EventKind(str, Enum):
    """事件类型"""

    PUBLISHED = "published"
    MODIFIED = "modified"
    DELETED = "deleted"
    READ = "read"


@dataclass(frozen=True)
class ArticleEvent:
    """文章事件基类"""

    kind: ClassVar[EventKind]

    article: NewsArticle
    occurred_at: datetime = field(default_factory=utc_now, init=False)

    def __post_init__(self) -> None:
        if type(self) is ArticleEvent:
            raise TypeError("ArticleEvent 是抽象基类，请使用具体事件类型")
        if not isinstance(self.article, NewsArticle):
            raise InvalidArgumentError(
                "事件必须引用一篇 NewsArticle",
                details={"event": type(self).__name__, "article": repr(self.article)},
            )

    def to_dict(self) -> dict[str, str]:
        return {
            "event_type": self.kind.value,
            "article_id": str(self.article.id),
            "title": self.article.title,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class ArticlePublished(ArticleEvent):
    """文章发布事件"""

    kind: ClassVar[EventKind] = EventKind.PUBLISHED


@dataclass(frozen=True)
class ArticleModified(ArticleEvent):
    """文章修改事件"""

    kind: ClassVar[EventKind] = EventKind.MODIFIED


@dataclass(frozen=True)
class ArticleDeleted(ArticleEvent):
    """文章删除事件"""

    kind: ClassVar[EventKind] = EventKind.DELETED


@dataclass(frozen=True)
class ArticleRead(ArticleEvent):
    """文章被阅读事件"""

    kind: ClassVar[EventKind] = EventKind.READ


_EVENT_TYPES: dict[EventKind, type[ArticleEvent]] = {
    EventKind.PUBLISHED: ArticlePublished,
    EventKind.MODIFIED: ArticleModified,
    EventKind.DELETED: ArticleDeleted,
    EventKind.READ: ArticleRead,
}


def event_for(kind: EventKind, article: NewsArticle) -> ArticleEvent:
    """按事件类型构造对应的事件变体"""
    try:
        event_kind = EventKind(kind)
    except ValueError as e:
        raise InvalidArgumentError(
            f"未知的事件类型: {kind!r}", details={"kind": repr(kind)}, cause=e
        ) from e
    return _EVENT_TYPES[event_kind](article)
