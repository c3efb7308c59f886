"""主题抽象基类"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..events import ArticleEvent


class Topic(ABC):
    """
    主题：对事件的布尔谓词

    matches 必须是纯函数，只依赖主题绑定的参数和事件本身。
    主题是不可变值对象，可作为订阅表的键。

    组合方式：
        AuthorTopic("Alice") & ReadTopic()      # 全部匹配
        DomainTopic(NewsDomain.TECH) | TitleTopic("标题")  # 任一匹配
    """

    @abstractmethod
    def matches(self, event: ArticleEvent) -> bool:
        """判断事件是否命中该主题"""

    def describe(self) -> str:
        """人类可读的主题描述（用于日志与 CLI）"""
        return repr(self)

    def __and__(self, other: Any) -> Topic:
        if not is_topic(other):
            return NotImplemented
        return AllMatchTopic((self, other))

    def __or__(self, other: Any) -> Topic:
        if not is_topic(other):
            return NotImplemented
        return AnyMatchTopic((self, other))


def is_topic(obj: Any) -> bool:
    """鸭子类型检查：任何提供可调用 matches 的对象都可作为主题"""
    return callable(getattr(obj, "matches", None))


def describe_topic(topic: Any) -> str:
    """主题描述；鸭子类型主题没有 describe 时退回 repr"""
    describe = getattr(topic, "describe", None)
    return describe() if callable(describe) else repr(topic)


# 避免循环导入
from .composite import AllMatchTopic, AnyMatchTopic  # noqa: E402
