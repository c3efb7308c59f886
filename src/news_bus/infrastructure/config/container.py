"""依赖注入容器 - 组装应用组件"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from loguru import logger

from ...application.actors import NewsEditor, Reader
from ..adapters.storage import InMemoryArticleStore
from ..messaging import DeliveryErrorHandler, EventChannel
from .settings import AppSettings, get_settings


@dataclass
class Container:
    """
    依赖注入容器

    负责按配置创建事件通道和持久化监听器，并把通道注入参与者。
    通道的生命周期归容器所有：close() 时关闭。
    """

    settings: AppSettings = field(default_factory=get_settings)
    on_delivery_error: DeliveryErrorHandler | None = None

    # 线程安全锁（保护懒加载属性的初始化）
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    _channel: EventChannel | None = field(default=None, init=False)
    _store: InMemoryArticleStore | None = field(default=None, init=False)

    @property
    def channel(self) -> EventChannel:
        """获取事件通道"""
        if self._channel is None:
            with self._lock:
                if self._channel is None:
                    self._channel = self._create_channel()
        return self._channel

    @property
    def store(self) -> InMemoryArticleStore:
        """获取文章存储（首次访问时在通道上注册）"""
        if self._store is None:
            channel = self.channel
            with self._lock:
                if self._store is None:
                    self._store = InMemoryArticleStore(channel)
        return self._store

    def create_editor(self, name: str) -> NewsEditor:
        """创建注入了通道的编辑"""
        return NewsEditor(name, self.channel)

    def create_reader(self) -> Reader:
        """创建注入了通道的读者"""
        return Reader(self.channel)

    def _create_channel(self) -> EventChannel:
        cfg = self.settings.channel
        logger.info(
            f"创建事件通道: max_workers={cfg.max_workers}, "
            f"pending_warning_threshold={cfg.pending_warning_threshold}"
        )
        return EventChannel(
            max_workers=cfg.max_workers,
            thread_name_prefix=cfg.thread_name_prefix,
            pending_warning_threshold=cfg.pending_warning_threshold,
            on_delivery_error=self.on_delivery_error,
        )

    def close(self, wait: bool = True) -> None:
        """关闭容器持有的通道"""
        with self._lock:
            channel = self._channel
            self._channel = None
            self._store = None
        if channel is not None:
            channel.shutdown(wait=wait)


# 进程级容器
_container: Container | None = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """获取进程级容器（线程安全）"""
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = Container()
    return _container


def reset_container() -> None:
    """关闭并重置进程级容器（用于测试）"""
    global _container
    with _container_lock:
        container = _container
        _container = None
    if container is not None:
        container.close()
