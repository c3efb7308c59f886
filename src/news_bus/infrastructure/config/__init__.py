"""配置模块"""

from .container import Container, get_container, reset_container
from .settings import AppSettings, ChannelSettings, get_settings

__all__ = [
    "AppSettings",
    "ChannelSettings",
    "get_settings",
    "Container",
    "get_container",
    "reset_container",
]
