"""
颜色工具：RRGGBB → ASS 颜色
"""
import re

_HEX_COLOR_RE = re.compile(r"[0-9A-Fa-f]{6}")


def rgb_to_ass_color(rgb: str) -> str:
    """
    RRGGBB → &HBBGGRR&（ASS 的分量顺序与 RGB 相反）

    Raises:
        ValueError: 不是 6 位十六进制
    """
    if not _HEX_COLOR_RE.fullmatch(rgb):
        raise ValueError(f"Color must be RRGGBB, got {rgb!r}")
    r, g, b = rgb[0:2], rgb[2:4], rgb[4:6]
    return f"&H{b}{g}{r}&"
