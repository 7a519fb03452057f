"""
ASS 格式化：窗口 → 带样式的字幕文本

ASS 约定：
- 颜色为 &HBBGGRR&（与常见的 RRGGBB 顺序相反）
- alpha 为 00（不透明）到 FF（全透明）
- "\\"、"{"、"}" 是 override code 的语法字符，按键文本中必须转义
"""
import math
from typing import Sequence

from keytape.schema import KeyEvent, Window
from keytape.utils.timecode import ms_to_ass_time

ELLIPSIS = "…"


def ass_escape(text: str) -> str:
    """转义 ASS 语法字符（先处理反斜杠）。"""
    return text.replace("\\", "\\\\").replace("{", "\\{").replace("}", "\\}")


def opacity_to_ass_alpha(opacity: float) -> str:
    """
    不透明度（0-1）→ 两位十六进制 ASS alpha。

    0.5 → "80"，0.0 → "FF"，1.0 → "00"
    """
    if not 0 <= opacity <= 1:
        raise ValueError(f"Opacity must be between 0 and 1, got {opacity}")
    alpha = math.floor((1 - opacity) * 255 + 0.5)
    return f"{alpha:02X}"


def window_text(events: Sequence[KeyEvent], window: Window, highlight_color: str) -> str:
    """
    渲染窗口内的按键文本。

    早先的按键用空格分隔；最后一个按键（刚按下的）用 highlight_color 高亮，
    之后用 {\\r} 恢复默认样式。被截断时前置省略号。
    """
    buf = []

    if window.truncated:
        buf.append(ELLIPSIS)

    for i in range(window.first_index, window.last_index):
        buf.append(ass_escape(events[i].key))

    last_key = ass_escape(events[window.last_index].key)
    buf.append(f"{{\\c{highlight_color}}}{last_key}{{\\r}}")

    return " ".join(buf)


def dialogue_line(
    events: Sequence[KeyEvent],
    window: Window,
    highlight_color: str,
    alpha: str,
) -> str:
    """渲染一行 ASS Dialogue（开始时间为最后一个按键的时间）。"""
    text = window_text(events, window, highlight_color)
    text = f"{{\\bord3\\shad0\\3c&H000000&\\3a&H{alpha}&}}{text}"

    start = ms_to_ass_time(events[window.last_index].timestamp_ms)
    end = ms_to_ass_time(window.display_until_ms)

    return f"Dialogue: 0,{start},{end},Keys,,0,0,0,,{text}"
