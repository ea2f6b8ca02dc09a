"""
Runtime configuration utilities.

Centralises the library's tunable defaults and exposes helpers to read
from environment variables or update settings at runtime.
"""
# 说明：运行时配置管理工具，集中管理库内可调默认值，并支持环境变量覆写与运行期更新。
# 职责：
# - RuntimeConfig：封装日志等级、告警日志开关、默认边界规则与默认自动分箱规则
# - load_from_env(...)：按统一前缀（HISTLIB_）从环境变量加载并解析配置值
# - get_config()：获取全局 RuntimeConfig 单例
# - configure(...)：通过关键字参数更新全局配置并返回更新后的实例
# 约定：
# - 布尔类环境变量使用 {"1", "true", "yes"}（大小写不敏感）视为 True
# - 配置只在调用时用于补全缺省参数，计算流程本身从不写入全局状态

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

_BOOL_KEYS = ("LOG_WARNINGS",)
_ENV_KEYS = ("LOG_LEVEL", "LOG_WARNINGS", "DEFAULT_EDGE_RULE", "DEFAULT_AUTO_RULE")


@dataclass
class RuntimeConfig:
    log_level: str = field(default_factory=lambda: os.environ.get("HISTLIB_LOG_LEVEL", "INFO"))
    log_warnings: bool = True
    default_edge_rule: str = "closed-right"
    default_auto_rule: str = "fd"

    def update(self, **kwargs: Any) -> None:
        # 按关键字参数更新当前配置实例，未知字段名将显式报错
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config option '{key}'")
            setattr(self, key, value)

    def load_from_env(self, prefix: str = "HISTLIB_") -> None:
        # 从带有指定前缀的环境变量中加载配置
        for key in _ENV_KEYS:
            env_key = f"{prefix}{key}"
            if env_key not in os.environ:
                continue
            value: Any = os.environ[env_key]
            if key in _BOOL_KEYS:
                value = value.lower() in {"1", "true", "yes"}
            setattr(self, key.lower(), value)


# 全局配置单例
_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    # 以关键字参数更新全局配置，并返回更新后的实例
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
