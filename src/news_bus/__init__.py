"""新闻文章事件总线

进程内发布/订阅事件总线：生产者发布文章生命周期事件（发布、修改、删除、阅读），
消费者通过可组合的谓词主题（Topic）声明感兴趣的事件。

架构：
- 领域驱动设计 (DDD) + 六边形架构 (Hexagonal Architecture)
- domain: 文章实体、领域事件、主题谓词代数
- infrastructure: 事件通道（订阅表 + 并发投递）、内存持久化监听器、配置
- application: 编辑 / 读者等参与者

使用方式：
    from news_bus import EventChannel, NewsEditor, Reader

    with EventChannel() as channel:
        editor = NewsEditor("Alice", channel)
        article = editor.write(subdomain, "标题")
        editor.publish(article)

    # CLI
    python -m news_bus demo
"""

from .application.actors import NewsEditor, Reader
from .domain.entities import NewsArticle
from .domain.events import (
    ArticleDeleted,
    ArticleEvent,
    ArticleModified,
    ArticlePublished,
    ArticleRead,
    EventKind,
)
from .domain.value_objects import NewsDomain, NewsSubdomain
from .infrastructure.adapters.storage import InMemoryArticleStore
from .infrastructure.messaging import DeliveryFailure, EventChannel
from .shared.constants import APP_NAME, VERSION

__version__ = VERSION
__app_name__ = APP_NAME

__all__ = [
    "__version__",
    "__app_name__",
    "NewsDomain",
    "NewsSubdomain",
    "NewsArticle",
    "EventKind",
    "ArticleEvent",
    "ArticlePublished",
    "ArticleModified",
    "ArticleDeleted",
    "ArticleRead",
    "EventChannel",
    "DeliveryFailure",
    "InMemoryArticleStore",
    "NewsEditor",
    "Reader",
]
