"""值对象"""

from .news_domain import NewsDomain, NewsSubdomain

__all__ = [
    "NewsDomain",
    "NewsSubdomain",
]
