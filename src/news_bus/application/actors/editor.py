"""新闻编辑参与者"""

from __future__ import annotations

import threading
from concurrent.futures import Future

from loguru import logger

from ...domain.entities import NewsArticle
from ...domain.events import ArticleDeleted, ArticleEvent, ArticleModified, ArticlePublished
from ...domain.topics import AuthorTopic, ReadTopic
from ...domain.value_objects import NewsSubdomain
from ...shared.exceptions import InvalidArgumentError
from ...shared.utils import log_event
from ..ports.outbound import EventChannelPort


class NewsEditor:
    """
    新闻编辑

    创建时在通道上注册 (AuthorTopic(本人) AND ReadTopic)，
    自己的文章被阅读时收到通知。
    """

    def __init__(self, name: str, channel: EventChannelPort) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("编辑名称不能为空", details={"name": name})

        self._name = name
        self._channel = channel
        self._read_events: list[ArticleEvent] = []
        self._lock = threading.Lock()

        self._topic = AuthorTopic(name) & ReadTopic()
        channel.register(self._topic, self.on_article_read)

    @property
    def name(self) -> str:
        return self._name

    @property
    def read_events(self) -> list[ArticleEvent]:
        """已收到的阅读通知快照"""
        with self._lock:
            return list(self._read_events)

    def on_article_read(self, event: ArticleEvent) -> None:
        """本人文章被阅读时的处理"""
        with self._lock:
            self._read_events.append(event)
        logger.info(f"编辑 [{self._name}] 收到通知：文章 [{event.article.title}] 被阅读")

    def write(self, subdomain: NewsSubdomain, title: str) -> NewsArticle:
        """撰写一篇文章（不发出事件）"""
        return NewsArticle(subdomain, self, title)

    def publish(self, article: NewsArticle) -> list[Future[bool]]:
        """发布文章"""
        log_event("article_published", title=article.title, author=self._name)
        return self._channel.dispatch(ArticlePublished(article))

    def modify(
        self,
        article: NewsArticle,
        *,
        title: str | None = None,
        subdomain: NewsSubdomain | None = None,
    ) -> list[Future[bool]]:
        """修改文章并分发修改事件（参数无效时文章不变，也不分发）"""
        article.revise(title=title, subdomain=subdomain)
        log_event("article_modified", title=article.title, author=self._name)
        return self._channel.dispatch(ArticleModified(article))

    def delete(self, article: NewsArticle) -> list[Future[bool]]:
        """删除文章"""
        log_event("article_deleted", title=article.title, author=self._name)
        return self._channel.dispatch(ArticleDeleted(article))

    def __repr__(self) -> str:
        return f"NewsEditor(name={self._name!r})"
