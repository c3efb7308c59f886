"""基础设施适配器"""

from .storage import InMemoryArticleStore

__all__ = ["InMemoryArticleStore"]
