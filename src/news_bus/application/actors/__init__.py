"""参与者：通过注入的事件通道注册主题、分发事件"""

from .editor import NewsEditor
from .reader import Reader

__all__ = [
    "NewsEditor",
    "Reader",
]
