"""原子主题

每个原子主题比较事件（或其文章）的一个属性与绑定值。
相等性 = 类型相同且绑定值相同，仅用于订阅表查找 / 合并，不参与事件匹配。
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...shared.exceptions import InvalidArgumentError
from ..events import ArticleEvent, EventKind
from ..value_objects import NewsDomain, NewsSubdomain
from .base import Topic


@dataclass(frozen=True)
class DomainTopic(Topic):
    """文章子领域所属的领域等于绑定领域"""

    domain: NewsDomain

    def __post_init__(self) -> None:
        if not isinstance(self.domain, NewsDomain):
            raise InvalidArgumentError("DomainTopic 需要 NewsDomain", details={"domain": self.domain})

    def matches(self, event: ArticleEvent) -> bool:
        return event.article.subdomain.domain is self.domain

    def describe(self) -> str:
        return f"domain={self.domain.value}"


@dataclass(frozen=True)
class SubdomainTopic(Topic):
    """文章子领域等于绑定子领域（按名称）"""

    subdomain: NewsSubdomain

    def __post_init__(self) -> None:
        if not isinstance(self.subdomain, NewsSubdomain):
            raise InvalidArgumentError(
                "SubdomainTopic 需要 NewsSubdomain", details={"subdomain": self.subdomain}
            )

    def matches(self, event: ArticleEvent) -> bool:
        return event.article.subdomain == self.subdomain

    def describe(self) -> str:
        return f"subdomain={self.subdomain.name}"


@dataclass(frozen=True)
class TitleTopic(Topic):
    """文章标题等于绑定字符串"""

    title: str

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            raise InvalidArgumentError("TitleTopic 需要字符串标题", details={"title": self.title})

    def matches(self, event: ArticleEvent) -> bool:
        return event.article.title == self.title

    def describe(self) -> str:
        return f"title={self.title!r}"


@dataclass(frozen=True)
class AuthorTopic(Topic):
    """文章作者名称等于绑定字符串"""

    author_name: str

    def __post_init__(self) -> None:
        if not isinstance(self.author_name, str):
            raise InvalidArgumentError(
                "AuthorTopic 需要字符串作者名", details={"author_name": self.author_name}
            )

    def matches(self, event: ArticleEvent) -> bool:
        return event.article.author_name == self.author_name

    def describe(self) -> str:
        return f"author={self.author_name!r}"


@dataclass(frozen=True)
class EventKindTopic(Topic):
    """事件类型等于绑定类型"""

    kind: EventKind

    def __post_init__(self) -> None:
        if not isinstance(self.kind, EventKind):
            raise InvalidArgumentError("EventKindTopic 需要 EventKind", details={"kind": self.kind})

    def matches(self, event: ArticleEvent) -> bool:
        return event.kind is self.kind

    def describe(self) -> str:
        return f"kind={self.kind.value}"


@dataclass(frozen=True)
class PublishedTopic(EventKindTopic):
    kind: EventKind = field(default=EventKind.PUBLISHED, init=False)


@dataclass(frozen=True)
class ModifiedTopic(EventKindTopic):
    kind: EventKind = field(default=EventKind.MODIFIED, init=False)


@dataclass(frozen=True)
class DeletedTopic(EventKindTopic):
    kind: EventKind = field(default=EventKind.DELETED, init=False)


@dataclass(frozen=True)
class ReadTopic(EventKindTopic):
    kind: EventKind = field(default=EventKind.READ, init=False)
