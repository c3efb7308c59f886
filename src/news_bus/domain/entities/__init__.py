"""领域实体"""

from .article import NewsArticle, NewsAuthor

__all__ = [
    "NewsArticle",
    "NewsAuthor",
]
