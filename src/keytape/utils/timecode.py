"""
时间码工具：毫秒 → ASS 时间戳
"""


def ms_to_ass_time(ms: int) -> str:
    """
    将毫秒转换为 ASS 时间戳 H:MM:SS.CC（厘秒精度）。

    只截断不四舍五入，小时不设上限。
    例如：3661234 → "1:01:01.23"

    Raises:
        ValueError: ms 为负数
    """
    ms = int(ms)
    if ms < 0:
        raise ValueError(f"Timestamp must be non-negative, got {ms}")

    h, ms = divmod(ms, 3_600_000)
    m, ms = divmod(ms, 60_000)
    s, ms = divmod(ms, 1_000)
    cs = ms // 10

    return f"{h}:{m:02d}:{s:02d}.{cs:02d}"
