"""端口定义"""

from .outbound import EventChannelPort, EventSubscriber, Subscriber

__all__ = [
    "EventChannelPort",
    "EventSubscriber",
    "Subscriber",
]
