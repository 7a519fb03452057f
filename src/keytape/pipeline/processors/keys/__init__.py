"""
按键归一化（唯一公共入口）

公共 API：
- NormalizationPolicy: compact（vim 风格 <C-C>）/ icon（符号 ^⌫）
- normalize(): 单个按键
- normalize_events(): 整个事件序列
"""
from .normalize import (
    COMPACT_OVERRIDES,
    ICON_OVERRIDES,
    NormalizationPolicy,
    normalize,
    normalize_events,
)

__all__ = [
    "COMPACT_OVERRIDES",
    "ICON_OVERRIDES",
    "NormalizationPolicy",
    "normalize",
    "normalize_events",
]
