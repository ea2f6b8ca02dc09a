"""
Reusable validation helpers.
"""
# 说明：参数验证相关的辅助函数，用于在库内部统一进行轻量级参数检查。
# 职责：
# - ParamValidationError：参数结构性错误（调用方编程错误），区别于数据质量告警
# - ensure：基于布尔条件触发参数校验错误的轻量断言工具
# - ensure_type：检查参数是否属于指定类型集合
# - ensure_choice：将字符串/枚举参数规范化为枚举成员

from __future__ import annotations

from enum import Enum
from typing import Any, Tuple, Type, TypeVar

E = TypeVar("E", bound=Enum)


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise ParamValidationError(f"{label} must be instance of {names}")


def ensure_choice(value: Any, enum_cls: Type[E], *, label: str = "value") -> E:
    """Coerce ``value`` into a member of ``enum_cls`` or raise."""
    # 接受枚举成员本身或其字符串取值
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as exc:
        choices = ", ".join(repr(member.value) for member in enum_cls)
        raise ParamValidationError(f"{label} must be one of {choices}; got {value!r}") from exc
