"""事件通道出站端口 - 参与者依赖的通道接口"""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Callable, Protocol, Union, runtime_checkable

from ....domain.events import ArticleEvent


@runtime_checkable
class EventSubscriber(Protocol):
    """
    订阅者端口

    单方法契约：每次分发最多被通知一次。
    也可以直接传入普通可调用对象 callback(event)。
    """

    def notify(self, event: ArticleEvent) -> None:
        """
        接收事件

        在独立的投递线程中调用；抛出的异常只会被记录，不会影响分发方。
        """
        ...


# 订阅者：实现 notify 的对象，或普通可调用对象 callback(event)
Subscriber = Union[EventSubscriber, Callable[[ArticleEvent], None]]


@runtime_checkable
class EventChannelPort(Protocol):
    """
    事件通道端口

    参与者（编辑、读者、持久化监听器）通过它注册主题和分发事件，
    通道实例由外部注入，不存在全局通道。
    """

    def register(self, topic: Any, subscriber: Subscriber) -> None:
        """
        注册 (主题, 订阅者)

        Args:
            topic: 任何提供 matches(event) 的主题
            subscriber: EventSubscriber 或 callable(event)

        Raises:
            InvalidArgumentError: 主题或订阅者无效
            ChannelClosedError: 通道已关闭
        """
        ...

    def dispatch(self, event: ArticleEvent) -> list[Future[bool]]:
        """
        分发事件

        Returns:
            每个接收者一次投递的 Future（结果为是否投递成功）
        """
        ...
