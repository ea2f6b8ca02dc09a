"""Shared pytest configuration and path setup for test modules."""

import sys
from dataclasses import asdict
from pathlib import Path

import pytest

# Ensure repo root, src/ and the shared strategies are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
_STRATEGIES = Path(__file__).resolve().parent / "property_based"
for p in (str(_ROOT), str(_SRC), str(_STRATEGIES)):
    if p not in sys.path:
        sys.path.insert(0, p)

from histlib.core.utils import get_config  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_runtime_config():
    # 每个测试结束后恢复全局运行时配置，避免测试之间相互影响
    config = get_config()
    snapshot = asdict(config)
    yield
    config.update(**snapshot)
