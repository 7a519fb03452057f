"""
工具模块

提供纯函数工具和日志功能。
"""
from .logger import info, success, warning, error, debug, get_logger, setup_logging
from .color import rgb_to_ass_color
from .timecode import ms_to_ass_time

__all__ = [
    "info",
    "success",
    "warning",
    "error",
    "debug",
    "get_logger",
    "setup_logging",
    "rgb_to_ass_color",
    "ms_to_ass_time",
]
