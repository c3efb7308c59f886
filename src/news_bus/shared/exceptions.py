"""自定义异常类

包含：
- 错误码枚举 (ErrorCode)
- 分层异常类（领域层、事件通道、配置）
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """错误码枚举

    错误码范围：
    - 1xxx: 通用错误
    - 2xxx: 事件通道错误
    - 6xxx: 配置错误
    """

    # 通用错误 1xxx
    UNKNOWN_ERROR = (1000, "未知错误")
    INVALID_INPUT = (1001, "参数无效")

    # 事件通道错误 2xxx
    CHANNEL_ERROR = (2000, "事件通道错误")
    CHANNEL_CLOSED = (2001, "事件通道已关闭")
    DELIVERY_FAILED = (2002, "事件投递失败")

    # 配置错误 6xxx
    CONFIG_ERROR = (6000, "配置错误")
    CONFIG_INVALID = (6002, "配置值无效")

    def __init__(self, code: int, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> int:
        """错误码"""
        return self._code

    @property
    def message(self) -> str:
        """错误消息"""
        return self._message

    def __str__(self) -> str:
        return f"[{self._code}] {self._message}"


class NewsBusError(Exception):
    """基础异常类

    所有自定义异常的基类，支持错误码和详细信息。
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self._error_code = error_code or self.error_code
        self._message = message or self._error_code.message
        self._details = details or {}
        self._cause = cause

        super().__init__(self._message)

    @property
    def code(self) -> int:
        """错误码"""
        return self._error_code.code

    @property
    def user_message(self) -> str:
        """用户友好的错误消息"""
        return self._message

    @property
    def details(self) -> dict[str, Any]:
        """详细信息"""
        return self._details

    @property
    def cause(self) -> Exception | None:
        """原始异常"""
        return self._cause

    def to_dict(self) -> dict[str, Any]:
        """转换为字典（用于日志）"""
        return {
            "error_code": self._error_code.code,
            "error_type": self._error_code.name,
            "message": self._message,
            "details": self._details,
        }

    def __str__(self) -> str:
        return f"[{self._error_code.code}] {self._message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self._error_code.code}, message={self._message!r})"


# ============ 领域层异常 ============


class DomainError(NewsBusError):
    """领域异常基类"""


class InvalidArgumentError(DomainError):
    """参数无效异常（注册、构造时快速失败）"""

    error_code = ErrorCode.INVALID_INPUT


# ============ 事件通道异常 ============


class ChannelError(NewsBusError):
    """事件通道异常基类

    订阅表一致性相关的错误对通道实例是致命的。
    """

    error_code = ErrorCode.CHANNEL_ERROR


class ChannelClosedError(ChannelError):
    """通道已关闭后仍尝试注册或分发"""

    error_code = ErrorCode.CHANNEL_CLOSED


class DeliveryError(ChannelError):
    """订阅者投递失败

    只用于带外上报（DeliveryFailure.as_error），从不抛回分发方。
    """

    error_code = ErrorCode.DELIVERY_FAILED


# ============ 配置异常 ============


class ConfigError(NewsBusError):
    """配置异常"""

    error_code = ErrorCode.CONFIG_ERROR

