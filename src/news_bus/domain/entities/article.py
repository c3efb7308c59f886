"""新闻文章实体"""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Protocol, runtime_checkable
from uuid import UUID, uuid4

from ...shared.exceptions import InvalidArgumentError
from ...shared.utils import utc_now
from ..value_objects import NewsSubdomain


@runtime_checkable
class NewsAuthor(Protocol):
    """文章作者：只要求暴露 name（NewsEditor 满足该协议）"""

    @property
    def name(self) -> str: ...


class NewsArticle:
    """
    新闻文章实体

    - 身份由 id (UUID) 决定，标题可以重复
    - publish_date 在构造时固定，之后不再变化
    - 修改 title / subdomain 会同时刷新 last_modified

    注意：这些只是被动的数据约定，修改本身不会发出事件，
    需要由参与者（如 NewsEditor.modify）显式分发 ArticleModified。
    """

    def __init__(
        self,
        subdomain: NewsSubdomain,
        author: NewsAuthor,
        title: str,
        *,
        id: UUID | None = None,
    ) -> None:
        _check_subdomain(subdomain)
        _check_title(title)
        if not isinstance(getattr(author, "name", None), str):
            raise InvalidArgumentError("作者必须提供 name", details={"author": repr(author)})

        self._id = id or uuid4()
        self._subdomain = subdomain
        self._author = author
        self._title = title
        self._lock = threading.Lock()

        now = utc_now()
        self._publish_date = now
        self._last_modified = now

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def author(self) -> NewsAuthor:
        return self._author

    @property
    def author_name(self) -> str:
        """作者名称（AuthorTopic 按此匹配）"""
        return self._author.name

    @property
    def publish_date(self) -> datetime:
        return self._publish_date

    @property
    def last_modified(self) -> datetime:
        return self._last_modified

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, title: str) -> None:
        _check_title(title)
        with self._lock:
            self._title = title
            self._touch()

    @property
    def subdomain(self) -> NewsSubdomain:
        return self._subdomain

    @subdomain.setter
    def subdomain(self, subdomain: NewsSubdomain) -> None:
        _check_subdomain(subdomain)
        with self._lock:
            self._subdomain = subdomain
            self._touch()

    def revise(
        self,
        *,
        title: str | None = None,
        subdomain: NewsSubdomain | None = None,
    ) -> None:
        """
        同时修改标题和/或子领域

        先校验全部参数，任一无效则文章保持不变；全部有效时一次性应用。

        Raises:
            InvalidArgumentError: 未提供任何修改，或参数无效
        """
        if title is None and subdomain is None:
            raise InvalidArgumentError("至少需要修改 title 或 subdomain")
        if title is not None:
            _check_title(title)
        if subdomain is not None:
            _check_subdomain(subdomain)

        with self._lock:
            if title is not None:
                self._title = title
            if subdomain is not None:
                self._subdomain = subdomain
            self._touch()

    def _touch(self) -> None:
        # 时钟回拨时保持单调不减
        self._last_modified = max(utc_now(), self._last_modified)

    def __hash__(self) -> int:
        return hash(self._id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NewsArticle):
            return False
        return self._id == other._id

    def __repr__(self) -> str:
        return (
            f"NewsArticle(id={self._id}, title={self._title!r}, "
            f"subdomain={self._subdomain}, author={self.author_name!r})"
        )


def _check_title(title: str) -> None:
    if not isinstance(title, str) or not title.strip():
        raise InvalidArgumentError("文章标题不能为空", details={"title": title})


def _check_subdomain(subdomain: NewsSubdomain) -> None:
    if not isinstance(subdomain, NewsSubdomain):
        raise InvalidArgumentError(
            "文章必须归属于 NewsSubdomain", details={"subdomain": repr(subdomain)}
        )
