"""测试窗口生成（session 切分、截断、边界）"""
import pytest

from keytape.pipeline.processors.window import generate_windows, iter_windows
from keytape.schema import KeyEvent, Window


def _events(*timestamps):
    return [KeyEvent(timestamp_ms=ms, key=str(i)) for i, ms in enumerate(timestamps)]


def test_log_example_windows(log_events):
    windows = generate_windows(log_events, inactivity_threshold_ms=1000, max_visible_keys=10)
    assert windows == [
        Window(first_index=0, last_index=0, display_until_ms=200, truncated=False),
        Window(first_index=0, last_index=1, display_until_ms=300, truncated=False),
        Window(first_index=0, last_index=2, display_until_ms=1300, truncated=False),
        Window(first_index=3, last_index=3, display_until_ms=1600, truncated=False),
        Window(first_index=3, last_index=4, display_until_ms=2600, truncated=False),
    ]


def test_truncates_to_max_visible_keys(log_events):
    windows = generate_windows(log_events, inactivity_threshold_ms=1000, max_visible_keys=2)
    assert windows[2] == Window(first_index=1, last_index=2, display_until_ms=1300, truncated=True)
    # 新 session 从头开始计数，不受上一 session 影响
    assert windows[3].truncated is False
    assert windows[4] == Window(first_index=3, last_index=4, display_until_ms=2600, truncated=False)


def test_gap_equal_to_threshold_stays_in_session():
    windows = generate_windows(_events(0, 1000), inactivity_threshold_ms=1000, max_visible_keys=10)
    assert windows[0].display_until_ms == 1000
    assert windows[1].first_index == 0


def test_gap_just_over_threshold_starts_new_session():
    windows = generate_windows(_events(0, 1001), inactivity_threshold_ms=1000, max_visible_keys=10)
    assert windows[0].display_until_ms == 1000
    assert windows[1].first_index == 1


def test_max_visible_keys_clamped_to_one():
    windows = generate_windows(_events(0, 10, 20), inactivity_threshold_ms=1000, max_visible_keys=0)
    assert [(w.first_index, w.last_index, w.truncated) for w in windows] == [
        (0, 0, False),
        (1, 1, True),
        (2, 2, True),
    ]


def test_single_event():
    windows = generate_windows(_events(500), inactivity_threshold_ms=750, max_visible_keys=10)
    assert windows == [Window(first_index=0, last_index=0, display_until_ms=1250, truncated=False)]


def test_simultaneous_events_share_timestamp():
    windows = generate_windows(_events(100, 100, 100), inactivity_threshold_ms=1000, max_visible_keys=10)
    assert [w.display_until_ms for w in windows] == [100, 100, 1100]


def test_rejects_non_positive_threshold():
    with pytest.raises(ValueError):
        generate_windows(_events(0, 10), inactivity_threshold_ms=0, max_visible_keys=10)


def test_invariants_hold():
    events = _events(0, 50, 120, 2000, 2100, 2200, 2300, 2400, 9000, 9999, 10000)
    windows = generate_windows(events, inactivity_threshold_ms=800, max_visible_keys=3)

    assert len(windows) == len(events)
    session_start = 0
    for i, w in enumerate(windows):
        assert w.last_index == i
        assert w.first_index <= w.last_index
        assert w.display_until_ms >= events[i].timestamp_ms
        assert w.last_index - w.first_index + 1 <= 3
        assert w.truncated == (w.first_index > session_start)
        if w.display_until_ms != (events[i + 1].timestamp_ms if i + 1 < len(events) else None):
            session_start = i + 1

    # 窗口之间不重叠
    for prev, nxt, ev in zip(windows, windows[1:], events[1:]):
        assert prev.display_until_ms <= ev.timestamp_ms


def test_generation_is_repeatable(log_events):
    first = generate_windows(log_events, inactivity_threshold_ms=1000, max_visible_keys=2)
    second = generate_windows(log_events, inactivity_threshold_ms=1000, max_visible_keys=2)
    assert first == second
    assert list(iter_windows(log_events, 1000, 2)) == first
