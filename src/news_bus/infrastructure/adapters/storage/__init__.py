"""存储适配器"""

from .memory_store import InMemoryArticleStore

__all__ = ["InMemoryArticleStore"]
