"""
按键归一化：原始按键标识 → 显示文本

组合键用 "+" 分隔（如 "Ctrl+Shift+T"），逐段查表替换，未知按键原样保留。
"""
import dataclasses
from enum import Enum
from typing import Dict, List, Sequence

from keytape.schema import KeyEvent

COMPACT_OVERRIDES: Dict[str, str] = {
    "Backspace": "BS",
    "Delete": "Del",
    "Enter": "CR",
    "Escape": "Esc",
    "Ctrl": "C",
    "Alt": "A",
    "Shift": "S",
}

ICON_OVERRIDES: Dict[str, str] = {
    "Backspace": "⌫",
    "Delete": "⌦",
    "Ctrl": "^",
    "Alt": "⌥",
    "Shift": "⇧",
    "Down": "↓",
    "PageDown": "⇟",
    "Up": "↑",
    "PageUp": "⇞",
    "Left": "←",
    "Right": "→",
    "Space": "␣",
    "Enter": "⏎",
    "Escape": "\U000f12b7",  # nf-md-keyboard_esc
    "Tab": "⇥",
}


class NormalizationPolicy(Enum):
    """归一化策略（封闭集合，只有两种）。"""

    COMPACT = "compact"
    ICON = "icon"

    @classmethod
    def from_name(cls, name: str) -> "NormalizationPolicy":
        """
        解析配置值。"vim" 是 compact 的别名。

        Raises:
            ValueError: 未知策略
        """
        value = name.strip().lower()
        if value == "vim":
            value = "compact"
        for policy in cls:
            if policy.value == value:
                return policy
        raise ValueError(
            f"Unknown key normalization: {name!r} "
            f"(available: {', '.join(p.value for p in cls)})"
        )


def _compact(key: str) -> str:
    parts = [COMPACT_OVERRIDES.get(part, part) for part in key.split("+")]

    if len(parts) == 1 and len(parts[0]) == 1:
        return parts[0]

    return "<" + "-".join(parts) + ">"


def _icon(key: str) -> str:
    return "".join(ICON_OVERRIDES.get(part, part) for part in key.split("+"))


def normalize(key: str, policy: NormalizationPolicy = NormalizationPolicy.COMPACT) -> str:
    """
    归一化单个按键。

    - compact: "Ctrl+C" → "<C-C>"，"a" → "a"，"Escape" → "<Esc>"
    - icon: "Ctrl+Backspace" → "^⌫"
    """
    if policy is NormalizationPolicy.COMPACT:
        return _compact(key)
    elif policy is NormalizationPolicy.ICON:
        return _icon(key)
    raise ValueError(f"Unsupported normalization policy: {policy!r}")


def normalize_events(
    events: Sequence[KeyEvent],
    policy: NormalizationPolicy = NormalizationPolicy.COMPACT,
) -> List[KeyEvent]:
    """返回按键已归一化的新事件列表（时间戳与顺序不变）。"""
    return [dataclasses.replace(e, key=normalize(e.key, policy)) for e in events]
