"""
Schema 模块：按键事件与显示窗口的数据结构
"""
from .keylog import KeyEvent, Window, load_keylog, parse_events, validate_events

__all__ = [
    "KeyEvent",
    "Window",
    "load_keylog",
    "parse_events",
    "validate_events",
]
