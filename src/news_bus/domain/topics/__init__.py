"""主题谓词代数

原子主题：DomainTopic / SubdomainTopic / TitleTopic / AuthorTopic / EventKindTopic
（以及固定类型的 PublishedTopic / ModifiedTopic / DeletedTopic / ReadTopic）
组合主题：AllMatchTopic（AND）/ AnyMatchTopic（OR），可任意嵌套
"""

from .atomic import (
    AuthorTopic,
    DeletedTopic,
    DomainTopic,
    EventKindTopic,
    ModifiedTopic,
    PublishedTopic,
    ReadTopic,
    SubdomainTopic,
    TitleTopic,
)
from .base import Topic, describe_topic, is_topic
from .composite import AllMatchTopic, AnyMatchTopic, all_of, any_of

__all__ = [
    "Topic",
    "is_topic",
    "describe_topic",
    # 原子主题
    "DomainTopic",
    "SubdomainTopic",
    "TitleTopic",
    "AuthorTopic",
    "EventKindTopic",
    "PublishedTopic",
    "ModifiedTopic",
    "DeletedTopic",
    "ReadTopic",
    # 组合主题
    "AllMatchTopic",
    "AnyMatchTopic",
    "all_of",
    "any_of",
]
