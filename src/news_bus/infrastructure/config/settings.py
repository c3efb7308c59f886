"""配置管理 - 基于Pydantic Settings

环境变量：NEWS_BUS_ 前缀 + 双下划线嵌套，例如
    NEWS_BUS_LOG_LEVEL=DEBUG
    NEWS_BUS_CHANNEL__MAX_WORKERS=16
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...shared.constants import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_PENDING_WARNING_THRESHOLD,
    DEFAULT_THREAD_NAME_PREFIX,
    ENV_PREFIX,
)
from ...shared.exceptions import ConfigError, ErrorCode


class ChannelSettings(BaseSettings):
    """事件通道配置"""

    max_workers: int = Field(
        default=DEFAULT_MAX_WORKERS,
        ge=1,
        description="投递线程池上限（并发投递的显式上限）",
    )
    thread_name_prefix: str = Field(
        default=DEFAULT_THREAD_NAME_PREFIX,
        description="投递线程名前缀",
    )
    pending_warning_threshold: int = Field(
        default=DEFAULT_PENDING_WARNING_THRESHOLD,
        ge=1,
        description="在途投递数告警阈值",
    )


class AppSettings(BaseSettings):
    """主应用配置"""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # 基本设置
    debug: bool = Field(default=False, description="调试模式")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="日志级别",
    )
    log_to_file: bool = Field(default=False, description="是否写入日志文件")
    log_json: bool = Field(default=False, description="是否输出JSON结构化日志")

    # 子配置
    channel: ChannelSettings = Field(default_factory=ChannelSettings)

    @property
    def effective_log_level(self) -> str:
        """debug 模式强制 DEBUG"""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> AppSettings:
    """获取应用配置（单例）

    Raises:
        ConfigError: 环境变量或 .env 中的配置值无效
    """
    try:
        return AppSettings()
    except ValidationError as e:
        raise ConfigError(
            f"配置值无效: {e.error_count()} 处错误",
            error_code=ErrorCode.CONFIG_INVALID,
            details={"errors": [err["loc"] for err in e.errors()]},
            cause=e,
        ) from e
