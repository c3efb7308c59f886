"""
领域层 - DDD核心

领域层包含：
- entities: 新闻文章实体
- value_objects: 新闻领域 / 子领域
- events: 文章生命周期事件
- topics: 主题谓词代数

依赖规则：领域层不依赖任何外部层
"""

from .entities import NewsArticle, NewsAuthor
from .events import (
    ArticleDeleted,
    ArticleEvent,
    ArticleModified,
    ArticlePublished,
    ArticleRead,
    EventKind,
    event_for,
)
from .topics import (
    AllMatchTopic,
    AnyMatchTopic,
    AuthorTopic,
    DeletedTopic,
    DomainTopic,
    EventKindTopic,
    ModifiedTopic,
    PublishedTopic,
    ReadTopic,
    SubdomainTopic,
    TitleTopic,
    Topic,
)
from .value_objects import NewsDomain, NewsSubdomain

__all__ = [
    # Entities
    "NewsArticle",
    "NewsAuthor",
    # Value Objects
    "NewsDomain",
    "NewsSubdomain",
    # Events
    "EventKind",
    "ArticleEvent",
    "ArticlePublished",
    "ArticleModified",
    "ArticleDeleted",
    "ArticleRead",
    "event_for",
    # Topics
    "Topic",
    "DomainTopic",
    "SubdomainTopic",
    "TitleTopic",
    "AuthorTopic",
    "EventKindTopic",
    "PublishedTopic",
    "ModifiedTopic",
    "DeletedTopic",
    "ReadTopic",
    "AllMatchTopic",
    "AnyMatchTopic",
]
