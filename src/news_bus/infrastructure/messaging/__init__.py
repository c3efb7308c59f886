"""消息基础设施"""

from .event_channel import DeliveryErrorHandler, DeliveryFailure, EventChannel

__all__ = [
    "EventChannel",
    "DeliveryFailure",
    "DeliveryErrorHandler",
]
