"""出站端口 - 定义应用层依赖的外部服务接口"""

from .event_channel_port import EventChannelPort, EventSubscriber, Subscriber

__all__ = [
    "EventChannelPort",
    "EventSubscriber",
    "Subscriber",
]
