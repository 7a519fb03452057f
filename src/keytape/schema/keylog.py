"""
Keylog Model: 按键日志的内存表示

数据流：
  keylog.json（VHS 录制）→ parse_events → KeyEvent[] → normalize → generate_windows → Window[]

约定：
- 时间单位统一用 int 毫秒（timestamp_ms / display_until_ms）
- KeyEvent 解析后不可变；归一化通过 dataclasses.replace 生成新对象
- Window 只引用事件下标，不复制事件本身
"""
import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Sequence


@dataclass(frozen=True)
class KeyEvent:
    """
    单次按键。

    字段：
    - timestamp_ms: 相对录制开始的时间（毫秒，非负）
    - key: 按键标识（如 "a"、"Ctrl+C"），归一化后为显示文本
    """
    timestamp_ms: int
    key: str


@dataclass(frozen=True)
class Window:
    """
    显示窗口：一段时间内屏幕上可见的连续按键。

    字段：
    - first_index: 第一个可见按键的下标
    - last_index: 刚按下的按键下标（高亮显示）
    - display_until_ms: 窗口结束时间（毫秒）
    - truncated: 是否丢弃了本 session 更早的按键（需前置省略号）
    """
    first_index: int
    last_index: int
    display_until_ms: int
    truncated: bool = False


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def validate_events(events: Sequence[KeyEvent]) -> None:
    """
    校验事件序列：非空，且按 timestamp_ms 非递减。

    Raises:
        ValueError: 序列为空或未排序
    """
    if not events:
        raise ValueError("No key events found")

    for i in range(len(events) - 1):
        if events[i].timestamp_ms > events[i + 1].timestamp_ms:
            raise ValueError(
                f"Events must be sorted by timestamp: event {i + 1} "
                f"({events[i + 1].timestamp_ms}ms) comes before event {i} "
                f"({events[i].timestamp_ms}ms)"
            )


def parse_events(raw: Any) -> List[KeyEvent]:
    """
    从 JSON 解码结果构建 KeyEvent 列表并校验。

    每条记录格式：{"ms": <number>, "key": <string>}
    ms 必须是整数毫秒（100.0 这类整数值的浮点数可以接受）。

    Raises:
        ValueError: 结构不合法（非数组、缺字段、类型错误、负时间戳、未排序）
    """
    if not isinstance(raw, list) or not raw:
        raise ValueError("No key events found")

    events: List[KeyEvent] = []
    for i, record in enumerate(raw):
        if not isinstance(record, dict):
            raise ValueError(f"Event {i} is not an object")

        ms = record.get("ms")
        if not _is_number(ms):
            raise ValueError(f"Event {i} missing numeric ms")
        if ms < 0:
            raise ValueError(f"Event {i} has negative ms: {ms}")
        if ms != int(ms):
            raise ValueError(f"Event {i} ms must be a whole number of milliseconds, got {ms}")

        key = record.get("key")
        if not isinstance(key, str):
            raise ValueError(f"Event {i} missing string key")

        events.append(KeyEvent(timestamp_ms=int(ms), key=key))

    validate_events(events)
    return events


def load_keylog(path: str | Path) -> List[KeyEvent]:
    """
    读取 keylog JSON 文件。

    Raises:
        FileNotFoundError: 文件不存在
        ValueError: JSON 无法解析或内容不合法
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Keylog file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid keylog JSON in {path}: {e}") from e

    return parse_events(raw)
