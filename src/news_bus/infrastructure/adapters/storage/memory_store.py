"""内存文章存储（持久化监听器）

作为事件通道上的普通订阅者存在：
- PublishedTopic → 记录文章
- DeletedTopic → 移除文章

文章按 id 判等，标题重复的两篇文章互不影响。
"""

from __future__ import annotations

import threading
from uuid import UUID

from loguru import logger

from ....application.ports.outbound import EventChannelPort
from ....domain.entities import NewsArticle
from ....domain.events import ArticleEvent
from ....domain.topics import DeletedTopic, PublishedTopic


class InMemoryArticleStore:
    """
    内存文章存储

    使用方法：
        store = InMemoryArticleStore(channel)
        editor.publish(article)
        channel.wait_idle()
        assert article in store
    """

    def __init__(self, channel: EventChannelPort) -> None:
        self._channel = channel
        self._articles: dict[UUID, NewsArticle] = {}
        self._lock = threading.Lock()

        channel.register(PublishedTopic(), self.on_published)
        channel.register(DeletedTopic(), self.on_deleted)

    def on_published(self, event: ArticleEvent) -> None:
        """发布事件处理：记录文章（重复发布不产生重复条目）"""
        article = event.article
        with self._lock:
            self._articles[article.id] = article
        logger.info(f"存储已记录发布的文章 [{article.title}]")

    def on_deleted(self, event: ArticleEvent) -> None:
        """删除事件处理：移除文章（未记录的文章忽略）"""
        article = event.article
        with self._lock:
            removed = self._articles.pop(article.id, None)
        if removed is None:
            logger.debug(f"存储中不存在被删除的文章 [{article.title}]，忽略")
        else:
            logger.info(f"存储已移除文章 [{article.title}]")

    @property
    def articles(self) -> list[NewsArticle]:
        """当前已发布文章的快照（按发布顺序）"""
        with self._lock:
            return list(self._articles.values())

    def get(self, article_id: UUID) -> NewsArticle | None:
        with self._lock:
            return self._articles.get(article_id)

    def find_by_title(self, title: str) -> list[NewsArticle]:
        """按标题查找（标题不唯一，可能返回多篇）"""
        with self._lock:
            return [a for a in self._articles.values() if a.title == title]

    def __contains__(self, article: object) -> bool:
        if not isinstance(article, NewsArticle):
            return False
        with self._lock:
            return article.id in self._articles

    def __len__(self) -> int:
        with self._lock:
            return len(self._articles)
