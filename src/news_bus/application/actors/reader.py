"""读者参与者"""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any

from ...domain.entities import NewsArticle
from ...domain.events import ArticleRead
from ..ports.outbound import EventChannelPort, Subscriber


class Reader:
    """读者：注册直通到通道，阅读时分发 ArticleRead"""

    def __init__(self, channel: EventChannelPort) -> None:
        self._channel = channel

    def register(self, topic: Any, subscriber: Subscriber) -> None:
        self._channel.register(topic, subscriber)

    def read(self, article: NewsArticle) -> list[Future[bool]]:
        return self._channel.dispatch(ArticleRead(article))
