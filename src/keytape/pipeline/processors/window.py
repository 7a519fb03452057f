"""
窗口生成：按键事件序列 → 显示窗口序列

示例（inactivity_threshold_ms=1000）：

    Key     Ms
    L      100
    O      200
    G      300
    I     1500
    N     1600

生成的窗口（ASS 需要的开始/结束/文本）：

    Start   Stop   Text
     100     200    L
     200     300    LO
     300    1300    LOG   (超过不活动阈值)
    1500    1600    I
    1600    2600    IN    (没有下一个按键)

每个事件恰好对应一个窗口；同一 session 内窗口首尾相接，
session 之间不重叠。可见按键超过 max_visible_keys 时丢弃最早的按键。
"""
from typing import Iterator, List, Sequence

from keytape.schema import KeyEvent, Window


def iter_windows(
    events: Sequence[KeyEvent],
    inactivity_threshold_ms: int,
    max_visible_keys: int,
) -> Iterator[Window]:
    """
    逐个生成窗口（惰性版本）。

    Args:
        events: 已按时间排序的事件（通常已归一化）
        inactivity_threshold_ms: 不活动阈值（毫秒，> 0）；相邻按键间隔
            <= 阈值视为同一 session（含边界）
        max_visible_keys: 同时可见的最大按键数（< 1 时按 1 处理）

    Raises:
        ValueError: inactivity_threshold_ms 不是正数
    """
    if inactivity_threshold_ms <= 0:
        raise ValueError(f"inactivity_threshold_ms must be positive, got {inactivity_threshold_ms}")
    max_keys = max(max_visible_keys, 1)

    n = len(events)
    session_start = 0

    for i, current in enumerate(events):
        window_start = max(session_start, i - max_keys + 1)
        truncated = window_start > session_start

        if i + 1 < n and events[i + 1].timestamp_ms - current.timestamp_ms <= inactivity_threshold_ms:
            display_until = events[i + 1].timestamp_ms
        else:
            display_until = current.timestamp_ms + inactivity_threshold_ms
            session_start = i + 1

        yield Window(
            first_index=window_start,
            last_index=i,
            display_until_ms=display_until,
            truncated=truncated,
        )


def generate_windows(
    events: Sequence[KeyEvent],
    inactivity_threshold_ms: int,
    max_visible_keys: int,
) -> List[Window]:
    """生成全部窗口（参数同 iter_windows）。"""
    return list(iter_windows(events, inactivity_threshold_ms, max_visible_keys))
