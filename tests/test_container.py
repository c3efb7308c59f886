"""配置与依赖注入容器测试"""

from __future__ import annotations

import pytest

from news_bus.domain.events import ArticleRead
from news_bus.domain.topics import ReadTopic
from news_bus.infrastructure.config import (
    AppSettings,
    ChannelSettings,
    Container,
    get_container,
    get_settings,
    reset_container,
)
from news_bus.infrastructure.messaging import EventChannel
from news_bus.shared.constants import DEFAULT_MAX_WORKERS
from news_bus.shared.exceptions import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """隔离环境变量与 .env，并重置缓存"""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_container()


class TestSettings:
    """AppSettings 测试"""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        settings = AppSettings()

        assert settings.log_level == "INFO"
        assert settings.debug is False
        assert settings.channel.max_workers == DEFAULT_MAX_WORKERS

    @pytest.mark.unit
    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEWS_BUS_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("NEWS_BUS_CHANNEL__MAX_WORKERS", "3")

        settings = AppSettings()

        assert settings.log_level == "WARNING"
        assert settings.channel.max_workers == 3

    @pytest.mark.unit
    def test_debug_forces_debug_level(self) -> None:
        settings = AppSettings(debug=True, log_level="ERROR")
        assert settings.effective_log_level == "DEBUG"

    @pytest.mark.unit
    def test_invalid_env_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEWS_BUS_CHANNEL__MAX_WORKERS", "0")

        with pytest.raises(ConfigError) as exc_info:
            get_settings()

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID.code

    @pytest.mark.unit
    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestContainer:
    """Container 测试"""

    @pytest.mark.unit
    def test_channel_lazy_creation(self) -> None:
        container = Container(settings=AppSettings(channel=ChannelSettings(max_workers=2)))
        assert container._channel is None

        channel = container.channel

        assert isinstance(channel, EventChannel)
        assert container.channel is channel
        container.close()
        assert channel.closed

    @pytest.mark.unit
    def test_store_registers_on_channel(self) -> None:
        container = Container(settings=AppSettings())
        store = container.store

        assert container.store is store
        assert len(container.channel) == 2
        container.close()

    @pytest.mark.integration
    def test_actors_share_channel(self, football) -> None:
        container = Container(settings=AppSettings())
        store = container.store
        editor = container.create_editor("Alice")
        reader = container.create_reader()

        article = editor.write(football, "Cup final")
        editor.publish(article)
        assert container.channel.wait_idle(5)
        reader.read(article)
        assert container.channel.wait_idle(5)

        assert article in store
        assert len(editor.read_events) == 1
        container.close()

    @pytest.mark.unit
    def test_delivery_error_hook_wired(self, article) -> None:
        failures = []
        container = Container(settings=AppSettings(), on_delivery_error=failures.append)

        def broken(event) -> None:
            raise RuntimeError("boom")

        container.channel.register(ReadTopic(), broken)
        container.channel.dispatch(ArticleRead(article))
        assert container.channel.wait_idle(5)
        container.close()

        assert len(failures) == 1

    @pytest.mark.unit
    def test_get_container_singleton_and_reset(self) -> None:
        first = get_container()
        assert get_container() is first

        channel = first.channel
        reset_container()

        assert channel.closed
        assert get_container() is not first
