"""进程内事件通道

负责订阅表（主题 → 订阅者列表）与分发算法：
- register 与 dispatch 的匹配阶段共用同一把互斥锁，订阅表始终一致
- 接收者集合在锁内一次性算出并去重，释放锁后再交给有界线程池投递
- 投递在独立线程中执行，订阅者异常只记录、上报，不会抛回分发方
- 分发返回时投递只是已调度，不等待完成

线程池上限（max_workers）就是并发投递的显式上限；
排队中的投递数没有上限，超过 pending_warning_threshold 时记录告警。
"""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Hashable

from loguru import logger

from ...application.ports.outbound import EventSubscriber, Subscriber
from ...domain.events import ArticleEvent
from ...domain.topics import describe_topic, is_topic
from ...shared.constants import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_PENDING_WARNING_THRESHOLD,
    DEFAULT_THREAD_NAME_PREFIX,
)
from ...shared.exceptions import ChannelClosedError, DeliveryError, InvalidArgumentError


@dataclass(frozen=True)
class DeliveryFailure:
    """一次失败的投递（带外上报给 on_delivery_error）"""

    event: ArticleEvent
    subscriber: Subscriber
    error: BaseException

    def as_error(self) -> DeliveryError:
        """包装为 DeliveryError，便于统一记录"""
        return DeliveryError(
            f"订阅者 {describe_subscriber(self.subscriber)} 处理事件失败: {self.error}",
            details={
                "event": self.event.kind.value,
                "article_id": str(self.event.article.id),
                "subscriber": describe_subscriber(self.subscriber),
            },
            cause=self.error if isinstance(self.error, Exception) else None,
        )


DeliveryErrorHandler = Callable[[DeliveryFailure], None]


class EventChannel:
    """
    事件通道

    使用方法：
        with EventChannel(max_workers=4) as channel:
            channel.register(AuthorTopic("Alice") & ReadTopic(), on_read)
            futures = channel.dispatch(ArticleRead(article))

            # 测试或关闭前等待投递完成
            channel.wait_idle(timeout=5)
    """

    def __init__(
        self,
        max_workers: int | None = DEFAULT_MAX_WORKERS,
        *,
        thread_name_prefix: str = DEFAULT_THREAD_NAME_PREFIX,
        pending_warning_threshold: int = DEFAULT_PENDING_WARNING_THRESHOLD,
        on_delivery_error: DeliveryErrorHandler | None = None,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise InvalidArgumentError("max_workers 必须 >= 1", details={"max_workers": max_workers})
        if pending_warning_threshold < 1:
            raise InvalidArgumentError(
                "pending_warning_threshold 必须 >= 1",
                details={"pending_warning_threshold": pending_warning_threshold},
            )

        self._subscriptions: dict[Hashable, list[Any]] = {}
        self._lock = threading.Lock()

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=thread_name_prefix
        )
        self._pending_warning_threshold = pending_warning_threshold
        self._on_delivery_error = on_delivery_error

        # 在途投递计数（已调度但未结束）
        self._idle = threading.Condition()
        self._in_flight = 0
        self._over_threshold = False

        self._closed = False
        # 标记当前线程是否正在执行投递（用于在投递线程内关闭通道）
        self._worker_state = threading.local()

        logger.debug(f"EventChannel 已创建 (max_workers={max_workers})")

    # ---------------- 注册 ----------------

    def register(self, topic: Any, subscriber: Subscriber) -> None:
        """
        注册 (主题, 订阅者)

        重复注册会产生重复条目（不去重）；分发时按订阅者去重。

        Raises:
            InvalidArgumentError: 主题不提供 matches / 不可哈希，或订阅者不可调用
            ChannelClosedError: 通道已关闭
        """
        _check_topic(topic)
        _check_subscriber(subscriber)

        with self._lock:
            if self._closed:
                raise ChannelClosedError("通道已关闭，无法注册")
            self._subscriptions.setdefault(topic, []).append(subscriber)

        logger.debug(
            f"已注册订阅者 {describe_subscriber(subscriber)} -> {describe_topic(topic)}"
        )

    # ---------------- 分发 ----------------

    def recipients(self, event: ArticleEvent) -> list[Any]:
        """
        计算事件的接收者（不投递）

        扫描全部主题，合并所有命中主题的订阅者并去重，保持首次注册顺序。
        """
        _check_event(event)
        with self._lock:
            if self._closed:
                raise ChannelClosedError("通道已关闭，无法分发")
            return self._collect_recipients(event)

    def dispatch(self, event: ArticleEvent) -> list[Future[bool]]:
        """
        分发事件

        接收者集合在锁内一次算出；投递期间新增的注册不会收到本次事件。
        方法在所有投递调度完成后立即返回，不等待订阅者执行。

        Returns:
            每个接收者一个 Future，结果为 True（成功）或 False（订阅者抛出异常）
        """
        _check_event(event)
        with self._lock:
            if self._closed:
                raise ChannelClosedError("通道已关闭，无法分发")
            recipients = self._collect_recipients(event)
            # 与接收者计算处于同一临界区：wait_idle 不会在提交前返回
            if recipients:
                self._begin_deliveries(len(recipients))

        if not recipients:
            logger.debug(f"事件 {event.kind.value} 无匹配主题: {event.article.title!r}")
            return []

        futures: list[Future[bool]] = []
        for index, subscriber in enumerate(recipients):
            try:
                futures.append(self._executor.submit(self._deliver, subscriber, event))
            except RuntimeError as e:
                # 线程池已关闭：剩余投递不会再执行
                self._end_deliveries(len(recipients) - index)
                raise ChannelClosedError("通道已关闭，无法分发", cause=e) from e

        logger.debug(
            f"事件 {event.kind.value} 已调度给 {len(recipients)} 个订阅者: {event.article.title!r}"
        )
        return futures

    def _collect_recipients(self, event: ArticleEvent) -> list[Any]:
        seen: dict[Hashable, Any] = {}
        for topic, subscribers in self._subscriptions.items():
            if not topic.matches(event):
                continue
            for subscriber in subscribers:
                seen.setdefault(_identity_key(subscriber), subscriber)
        return list(seen.values())

    def _deliver(self, subscriber: Subscriber, event: ArticleEvent) -> bool:
        self._worker_state.delivering = True
        try:
            notify = getattr(subscriber, "notify", None)
            if callable(notify):
                notify(event)
            else:
                subscriber(event)
            return True
        except Exception as e:
            self._report_failure(DeliveryFailure(event=event, subscriber=subscriber, error=e))
            return False
        finally:
            self._worker_state.delivering = False
            self._end_deliveries(1)

    def _report_failure(self, failure: DeliveryFailure) -> None:
        logger.opt(exception=failure.error).error(
            f"订阅者 {describe_subscriber(failure.subscriber)} 处理事件 "
            f"{failure.event.kind.value} 失败: {failure.error}"
        )
        if self._on_delivery_error is None:
            return
        try:
            self._on_delivery_error(failure)
        except Exception:
            logger.exception("投递失败回调自身抛出异常")

    # ---------------- 在途计数 ----------------

    def _begin_deliveries(self, count: int) -> None:
        with self._idle:
            self._in_flight += count
            if self._in_flight > self._pending_warning_threshold and not self._over_threshold:
                self._over_threshold = True
                logger.warning(
                    f"在途投递数 {self._in_flight} 超过阈值 {self._pending_warning_threshold}，"
                    "订阅者处理速度跟不上分发速度"
                )

    def _end_deliveries(self, count: int) -> None:
        with self._idle:
            self._in_flight -= count
            if self._in_flight <= self._pending_warning_threshold:
                self._over_threshold = False
            if self._in_flight == 0:
                self._idle.notify_all()

    @property
    def in_flight(self) -> int:
        """已调度但尚未结束的投递数"""
        with self._idle:
            return self._in_flight

    def wait_idle(self, timeout: float | None = None) -> bool:
        """
        等待所有在途投递结束

        Args:
            timeout: 超时时间（秒），None 表示无限等待

        Returns:
            是否在超时前变为空闲
        """
        with self._idle:
            return self._idle.wait_for(lambda: self._in_flight == 0, timeout=timeout)

    # ---------------- 查询 ----------------

    @property
    def topics(self) -> list[Any]:
        """已注册主题的快照"""
        with self._lock:
            return list(self._subscriptions)

    @property
    def subscriber_count(self) -> int:
        """订阅条目总数（含重复注册）"""
        with self._lock:
            return sum(len(subscribers) for subscribers in self._subscriptions.values())

    def subscribers_of(self, topic: Any) -> list[Any]:
        """某主题下的订阅者快照"""
        with self._lock:
            return list(self._subscriptions.get(topic, ()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    # ---------------- 生命周期 ----------------

    @property
    def closed(self) -> bool:
        return self._closed

    def shutdown(self, wait: bool = True) -> None:
        """
        关闭通道

        关闭后 register / dispatch 抛出 ChannelClosedError。

        Args:
            wait: 是否等待已调度的投递执行完毕
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True

        if wait and getattr(self._worker_state, "delivering", False):
            # 投递线程不能 join 自身所在的线程池；其余投递照常执行完毕
            logger.debug("在投递线程内关闭通道，不等待线程池")
            wait = False
        self._executor.shutdown(wait=wait)
        logger.debug("EventChannel 已关闭")

    def __enter__(self) -> EventChannel:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)

    def __repr__(self) -> str:
        return f"EventChannel(topics={len(self._subscriptions)}, closed={self._closed})"


# ---------------- 校验与描述 ----------------


def _check_topic(topic: Any) -> None:
    if not is_topic(topic):
        raise InvalidArgumentError("主题必须提供可调用的 matches()", details={"topic": repr(topic)})
    try:
        hash(topic)
    except TypeError as e:
        raise InvalidArgumentError(
            "主题必须可哈希（作为订阅表的键）", details={"topic": repr(topic)}, cause=e
        ) from e


def _check_subscriber(subscriber: Any) -> None:
    if subscriber is None:
        raise InvalidArgumentError("订阅者不能为空")
    if isinstance(subscriber, EventSubscriber) and callable(subscriber.notify):
        return
    if not callable(subscriber):
        raise InvalidArgumentError(
            "订阅者必须提供 notify(event) 或本身可调用",
            details={"subscriber": repr(subscriber)},
        )


def _check_event(event: Any) -> None:
    if not isinstance(event, ArticleEvent):
        raise InvalidArgumentError("只能分发 ArticleEvent", details={"event": repr(event)})


def _identity_key(subscriber: Any) -> Hashable:
    # 可哈希订阅者按相等性去重（同一绑定方法多次取值视为同一订阅者），否则按身份
    try:
        hash(subscriber)
    except TypeError:
        return ("id", id(subscriber))
    return subscriber


def describe_subscriber(subscriber: Any) -> str:
    """订阅者的简短描述（用于日志）"""
    name = getattr(subscriber, "__qualname__", None) or type(subscriber).__qualname__
    return str(name)
