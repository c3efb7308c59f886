"""参与者测试

测试 NewsEditor、Reader 的注册与分发行为。
"""

from __future__ import annotations

from concurrent.futures import wait

import pytest

from news_bus.application.actors import NewsEditor, Reader
from news_bus.application.ports import EventChannelPort, EventSubscriber
from news_bus.domain.events import ArticleDeleted, ArticleModified, ArticlePublished, ArticleRead
from news_bus.domain.topics import AuthorTopic, ModifiedTopic, ReadTopic, TitleTopic
from news_bus.infrastructure.messaging import EventChannel
from news_bus.shared.exceptions import InvalidArgumentError

WAIT = 5.0


class TestNewsEditor:
    """NewsEditor 测试"""

    @pytest.mark.unit
    def test_registers_own_read_topic(self, channel: EventChannel) -> None:
        """创建编辑时注册 (AuthorTopic AND ReadTopic)"""
        editor = NewsEditor("Alice", channel)

        assert channel.topics == [AuthorTopic("Alice") & ReadTopic()]
        assert channel.subscribers_of(AuthorTopic("Alice") & ReadTopic()) == [
            editor.on_article_read
        ]

    @pytest.mark.unit
    def test_channel_satisfies_port(self, channel: EventChannel) -> None:
        assert isinstance(channel, EventChannelPort)

    @pytest.mark.unit
    def test_notify_object_satisfies_subscriber_port(self, recorder) -> None:
        assert isinstance(recorder, EventSubscriber)
        assert not isinstance(lambda event: None, EventSubscriber)

    @pytest.mark.unit
    def test_write_creates_article_without_event(self, channel, football, recorder) -> None:
        channel.register(TitleTopic("Preview"), recorder)
        editor = NewsEditor("Alice", channel)

        article = editor.write(football, "Preview")
        channel.wait_idle(WAIT)

        assert article.author is editor
        assert article.author_name == "Alice"
        assert recorder.count == 0

    @pytest.mark.unit
    def test_notified_when_own_article_read(self, channel, football) -> None:
        editor = NewsEditor("Alice", channel)
        article = editor.write(football, "Cup final")

        wait(Reader(channel).read(article), timeout=WAIT)

        assert len(editor.read_events) == 1
        assert isinstance(editor.read_events[0], ArticleRead)
        assert editor.read_events[0].article is article

    @pytest.mark.unit
    def test_not_notified_for_other_authors(self, channel, football) -> None:
        alice = NewsEditor("Alice", channel)
        bob = NewsEditor("Bob", channel)
        article = bob.write(football, "Transfer news")

        Reader(channel).read(article)
        assert channel.wait_idle(WAIT)

        assert alice.read_events == []
        assert len(bob.read_events) == 1

    @pytest.mark.unit
    def test_not_notified_for_publish(self, channel, football) -> None:
        editor = NewsEditor("Alice", channel)
        article = editor.write(football, "Cup final")

        editor.publish(article)
        assert channel.wait_idle(WAIT)

        assert editor.read_events == []

    @pytest.mark.unit
    def test_publish_modify_delete_dispatch_events(self, channel, football, gadgets, recorder) -> None:
        editor = NewsEditor("Alice", channel)
        channel.register(AuthorTopic("Alice"), recorder)
        article = editor.write(football, "Draft")

        wait(editor.publish(article), timeout=WAIT)
        wait(editor.modify(article, title="Final", subdomain=gadgets), timeout=WAIT)
        wait(editor.delete(article), timeout=WAIT)

        kinds = sorted(type(e).__name__ for e in recorder.events)
        assert kinds == sorted(
            [ArticlePublished.__name__, ArticleModified.__name__, ArticleDeleted.__name__]
        )
        assert article.title == "Final"
        assert article.subdomain == gadgets

    @pytest.mark.unit
    def test_modify_updates_timestamp_before_dispatch(self, channel, football, recorder) -> None:
        editor = NewsEditor("Alice", channel)
        channel.register(ModifiedTopic(), recorder)
        article = editor.write(football, "Draft")
        publish_date = article.publish_date

        wait(editor.modify(article, title="Final"), timeout=WAIT)

        event = recorder.events[0]
        assert event.article.title == "Final"
        assert event.article.last_modified >= publish_date
        assert event.article.publish_date == publish_date

    @pytest.mark.unit
    def test_modify_requires_a_change(self, channel, football) -> None:
        editor = NewsEditor("Alice", channel)
        article = editor.write(football, "Draft")

        with pytest.raises(InvalidArgumentError):
            editor.modify(article)

    @pytest.mark.unit
    def test_invalid_modify_leaves_article_unchanged(self, channel, football, recorder) -> None:
        """标题有效但子领域无效：文章不变，也不分发修改事件"""
        editor = NewsEditor("Alice", channel)
        channel.register(ModifiedTopic(), recorder)
        article = editor.write(football, "Old")
        before = article.last_modified

        with pytest.raises(InvalidArgumentError):
            editor.modify(article, title="New", subdomain="not-a-subdomain")  # type: ignore[arg-type]

        assert channel.wait_idle(WAIT)
        assert article.title == "Old"
        assert article.subdomain == football
        assert article.last_modified == before
        assert recorder.count == 0

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "  "])
    def test_blank_name_rejected(self, channel, name: str) -> None:
        with pytest.raises(InvalidArgumentError):
            NewsEditor(name, channel)
        assert len(channel) == 0


class TestReader:
    """Reader 测试"""

    @pytest.mark.unit
    def test_register_passes_through(self, channel, recorder) -> None:
        Reader(channel).register(ReadTopic(), recorder)

        assert channel.subscribers_of(ReadTopic()) == [recorder]

    @pytest.mark.unit
    def test_read_dispatches_read_event(self, channel, article, recorder) -> None:
        reader = Reader(channel)
        reader.register(ReadTopic(), recorder)

        futures = reader.read(article)
        wait(futures, timeout=WAIT)

        assert len(recorder.events) == 1
        assert isinstance(recorder.events[0], ArticleRead)
        assert recorder.events[0].article is article


class TestScenarios:
    """端到端场景"""

    @pytest.mark.integration
    def test_author_and_read_composite(self, channel, football, alice, recorder) -> None:
        """Alice 的文章被阅读时 L 收到一次通知；发布事件不通知"""
        from news_bus.domain.entities import NewsArticle

        article = NewsArticle(football, alice, "Cup final")
        channel.register(AuthorTopic("Alice") & ReadTopic(), recorder)

        wait(channel.dispatch(ArticleRead(article)), timeout=WAIT)
        assert recorder.count == 1

        wait(channel.dispatch(ArticlePublished(article)), timeout=WAIT)
        assert channel.wait_idle(WAIT)
        assert recorder.count == 1
