"""测试 keylog 解析与校验"""
import json

import pytest

from keytape.pipeline.processors.window import generate_windows
from keytape.schema import KeyEvent, load_keylog, parse_events, validate_events


def test_parse_events():
    events = parse_events([{"ms": 100, "key": "a"}, {"ms": 250.0, "key": "Ctrl+C"}])
    assert events == [KeyEvent(timestamp_ms=100, key="a"), KeyEvent(timestamp_ms=250, key="Ctrl+C")]


def test_parse_events_ignores_extra_fields():
    events = parse_events([{"ms": 0, "key": "a", "type": "keydown"}])
    assert events == [KeyEvent(timestamp_ms=0, key="a")]


@pytest.mark.parametrize("raw", [[], None, {}, "keys"])
def test_empty_or_not_a_list(raw):
    with pytest.raises(ValueError, match="No key events found"):
        parse_events(raw)


@pytest.mark.parametrize(
    "record, message",
    [
        ({"key": "a"}, "missing numeric ms"),
        ({"ms": "100", "key": "a"}, "missing numeric ms"),
        ({"ms": True, "key": "a"}, "missing numeric ms"),
        ({"ms": float("nan"), "key": "a"}, "missing numeric ms"),
        ({"ms": -5, "key": "a"}, "negative ms"),
        ({"ms": 10}, "missing string key"),
        ({"ms": 10, "key": 7}, "missing string key"),
    ],
)
def test_invalid_record(record, message):
    with pytest.raises(ValueError, match=message):
        parse_events([{"ms": 0, "key": "x"}, record])


def test_record_not_an_object():
    with pytest.raises(ValueError, match="Event 0 is not an object"):
        parse_events([["a", 100]])


def test_unsorted_events():
    with pytest.raises(ValueError, match="sorted by timestamp"):
        parse_events([{"ms": 200, "key": "a"}, {"ms": 100, "key": "b"}])


@pytest.mark.parametrize(
    "timestamps",
    [
        [100.7, 100.2],
        [100.0, 1100.9],
        [0, 0.5],
    ],
)
def test_fractional_ms_rejected(timestamps):
    raw = [{"ms": ms, "key": "a"} for ms in timestamps]
    with pytest.raises(ValueError, match="whole number of milliseconds"):
        parse_events(raw)


def test_equal_timestamps_are_sorted():
    validate_events([KeyEvent(timestamp_ms=5, key="a"), KeyEvent(timestamp_ms=5, key="b")])


def test_load_keylog(tmp_path):
    path = tmp_path / "keylog.json"
    path.write_text(json.dumps([{"ms": 100, "key": "L"}, {"ms": 200, "key": "O"}]), encoding="utf-8")
    assert [e.key for e in load_keylog(path)] == ["L", "O"]


def test_load_keylog_invalid_json(tmp_path):
    path = tmp_path / "keylog.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid keylog JSON"):
        load_keylog(path)


def test_load_keylog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_keylog(tmp_path / "missing.json")


def test_integral_float_ms_keeps_session_boundary():
    events = parse_events([{"ms": 100.0, "key": "a"}, {"ms": 1101.0, "key": "b"}])
    windows = generate_windows(events, inactivity_threshold_ms=1000, max_visible_keys=10)
    assert windows[0].display_until_ms == 1100
    assert windows[1].first_index == 1
