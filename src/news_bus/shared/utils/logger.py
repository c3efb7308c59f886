"""日志配置 - 基于Loguru

支持：
- 结构化 JSON 日志
- 日志文件轮转
- 结构化事件记录 (log_event)
"""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

from ..constants import CONFIG_DIR_NAME, LOG_DIR_NAME, LOG_FILE_NAME


def setup_logger(
    level: str = "INFO",
    log_to_file: bool = False,
    log_dir: Path | None = None,
    json_format: bool = False,
    rotation: str = "10 MB",
    retention: str = "30 days",
) -> None:
    """
    配置日志

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR)
        log_to_file: 是否写入文件
        log_dir: 日志目录，默认 ~/.news_bus/logs
        json_format: 是否使用JSON格式（便于日志收集系统）
        rotation: 日志文件轮转策略 (例如 "10 MB", "1 day")
        retention: 日志保留时间 (例如 "30 days", "5 files")
    """
    # 移除默认处理器
    logger.remove()

    if json_format:
        logger.add(
            sys.stderr,
            level=level,
            format="{message}",
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{thread.name}</cyan> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_to_file:
        if log_dir is None:
            log_dir = Path.home() / CONFIG_DIR_NAME / LOG_DIR_NAME
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / LOG_FILE_NAME,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {thread.name} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
            enqueue=True,  # 投递线程并发写日志
        )


def log_event(
    event: str,
    level: str = "INFO",
    **kwargs: Any,
) -> None:
    """
    记录结构化事件

    Args:
        event: 事件名称
        level: 日志级别
        **kwargs: 额外的事件属性

    Examples:
        log_event("article_published", title="...", author="Alice")
        log_event("delivery_failed", level="ERROR", subscriber="...", error="...")
    """
    # 属性通过 bind 附加，消息本身不做 format，标题里的花括号不会被解析
    logger.bind(event=event, **kwargs).log(
        level.upper(),
        f"[{event}] " + " ".join(f"{k}={v}" for k, v in kwargs.items()),
    )


__all__ = [
    "logger",
    "setup_logger",
    "log_event",
]
