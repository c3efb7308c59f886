"""
应用层

- ports: 出站端口（事件通道、订阅者契约）
- actors: 编辑、读者
"""

from .actors import NewsEditor, Reader
from .ports import EventChannelPort, EventSubscriber

__all__ = [
    "NewsEditor",
    "Reader",
    "EventChannelPort",
    "EventSubscriber",
]
