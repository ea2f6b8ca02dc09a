"""
Lightweight logging helpers shared by every histlib module.
"""
# 说明：轻量级日志工具，提供统一的 logger 获取入口。
# 职责：
# - configure_logging(...)：初始化 logging 基本配置
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 日志级别优先级：显式参数 level > 环境变量 HISTLIB_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别并设置统一格式
    log_level = level or os.environ.get("HISTLIB_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若尚无 handler，则懒加载方式调用 configure_logging
    logger = logging.getLogger(name)
    if not logger.handlers:
        configure_logging()
    return logger
