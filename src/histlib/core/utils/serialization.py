"""
Serialization helpers for histogram results.

Provides JSON helpers with optional field stripping and a simple version
envelope to ease backwards compatibility for exported results.
"""
# 说明：序列化辅助工具，统一 JSON 编码行为并内置简单的版本封装。
# 职责：
# - strip_fields：在任意嵌套层级删除指定键（如 items / sample），用于紧凑导出
# - serialize_to_json / deserialize_from_json：JSON 编解码接口
# - 内部 _prepare：支持 dataclass 与实现了 to_dict 的对象的统一前处理
# 约定：
# - 无穷端点（溢出分箱）按 Python json 默认行为编码为 Infinity / -Infinity

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Optional, Sequence

import numpy as np


def strip_fields(payload: Any, fields: Sequence[str]) -> Any:
    # 递归删除 dict 中的指定键；list / tuple 逐项处理
    if isinstance(payload, dict):
        return {key: strip_fields(value, fields) for key, value in payload.items() if key not in fields}
    if isinstance(payload, (list, tuple)):
        return [strip_fields(value, fields) for value in payload]
    return payload


def _prepare(obj: Any) -> Any:
    # 将对象转换为可 JSON 序列化的基础结构
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


def serialize_to_json(
    obj: Any,
    *,
    exclude_fields: Optional[Sequence[str]] = None,
    version: Optional[str] = None,
) -> str:
    payload = _prepare(obj)
    if exclude_fields:
        payload = strip_fields(payload, exclude_fields)
    if version is not None:
        payload = {"version": version, "payload": payload}
    return json.dumps(payload, default=_prepare, ensure_ascii=False)


def deserialize_from_json(text: str) -> Any:
    return json.loads(text)
