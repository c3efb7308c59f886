"""组合主题

AllMatchTopic / AnyMatchTopic 持有有序的子主题元组，可任意嵌套。
子主题被冻结为 tuple，因此组合主题按结构判等：
结构相同的组合主题在订阅表中合并为同一个条目。
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ...shared.exceptions import InvalidArgumentError
from ..events import ArticleEvent
from .base import Topic, describe_topic, is_topic


def _freeze(topics: Iterable[Any], owner: str) -> tuple[Topic, ...]:
    if isinstance(topics, (str, bytes)) or not isinstance(topics, Iterable):
        raise InvalidArgumentError(f"{owner} 需要子主题序列", details={"topics": repr(topics)})
    frozen = tuple(topics)
    for child in frozen:
        if not is_topic(child):
            raise InvalidArgumentError(
                f"{owner} 的子主题必须提供 matches()", details={"child": repr(child)}
            )
    return frozen


@dataclass(frozen=True)
class AllMatchTopic(Topic):
    """所有子主题都命中时命中；空列表恒为 True"""

    topics: tuple[Topic, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "topics", _freeze(self.topics, "AllMatchTopic"))

    def matches(self, event: ArticleEvent) -> bool:
        return all(topic.matches(event) for topic in self.topics)

    def describe(self) -> str:
        if not self.topics:
            return "ALL()"
        return "(" + " AND ".join(describe_topic(t) for t in self.topics) + ")"


@dataclass(frozen=True)
class AnyMatchTopic(Topic):
    """至少一个子主题命中时命中；空列表恒为 False"""

    topics: tuple[Topic, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "topics", _freeze(self.topics, "AnyMatchTopic"))

    def matches(self, event: ArticleEvent) -> bool:
        return any(topic.matches(event) for topic in self.topics)

    def describe(self) -> str:
        if not self.topics:
            return "ANY()"
        return "(" + " OR ".join(describe_topic(t) for t in self.topics) + ")"


def all_of(*topics: Topic) -> AllMatchTopic:
    """便捷函数：all_of(a, b, c)"""
    return AllMatchTopic(topics)


def any_of(*topics: Topic) -> AnyMatchTopic:
    """便捷函数：any_of(a, b, c)"""
    return AnyMatchTopic(topics)
