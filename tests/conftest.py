"""测试夹具和共享配置

提供测试中常用的夹具：
- 示例子领域、作者、文章
- 事件通道（测试结束自动关闭）
- 记录型订阅者
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

import pytest

from news_bus.domain.entities import NewsArticle
from news_bus.domain.events import ArticleEvent
from news_bus.domain.value_objects import NewsDomain, NewsSubdomain
from news_bus.infrastructure.messaging import EventChannel

if TYPE_CHECKING:
    from collections.abc import Generator


WAIT_TIMEOUT = 5.0


@dataclass(frozen=True)
class StubAuthor:
    """只提供 name 的作者"""

    name: str


class RecordingSubscriber:
    """记录收到的事件（线程安全）"""

    def __init__(self) -> None:
        self._events: list[ArticleEvent] = []
        self._lock = threading.Lock()

    def notify(self, event: ArticleEvent) -> None:
        with self._lock:
            self._events.append(event)

    @property
    def events(self) -> list[ArticleEvent]:
        with self._lock:
            return list(self._events)

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._events)


# ============== 领域夹具 ==============


@pytest.fixture
def football() -> NewsSubdomain:
    """体育领域下的子领域"""
    return NewsSubdomain("football", NewsDomain.SPORTS)


@pytest.fixture
def gadgets() -> NewsSubdomain:
    """科技领域下的子领域"""
    return NewsSubdomain("gadgets", NewsDomain.TECH)


@pytest.fixture
def alice() -> StubAuthor:
    return StubAuthor("Alice")


@pytest.fixture
def article(football: NewsSubdomain, alice: StubAuthor) -> NewsArticle:
    """示例文章：SPORTS/football，作者 Alice"""
    return NewsArticle(football, alice, "Derby ends in a draw")


# ============== 通道夹具 ==============


@pytest.fixture
def channel() -> Generator[EventChannel, None, None]:
    """事件通道，测试结束后关闭"""
    ch = EventChannel(max_workers=4, thread_name_prefix="test-bus")
    yield ch
    ch.shutdown(wait=True)


@pytest.fixture
def recorder() -> RecordingSubscriber:
    return RecordingSubscriber()


@pytest.fixture
def make_recorder() -> type[RecordingSubscriber]:
    """需要多个记录型订阅者时使用"""
    return RecordingSubscriber


@pytest.fixture
def make_author() -> type[StubAuthor]:
    return StubAuthor
