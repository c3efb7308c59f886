"""共享工具"""

from datetime import datetime, timezone

from .logger import log_event, logger, setup_logger


def utc_now() -> datetime:
    """返回当前 UTC 时间（带时区信息），替代 datetime.now() 的无时区调用"""
    return datetime.now(timezone.utc)


__all__ = [
    # Logger
    "logger",
    "setup_logger",
    "log_event",
    # Datetime
    "utc_now",
]
