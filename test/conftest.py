import pytest

from keytape.schema import KeyEvent


@pytest.fixture
def log_events():
    """L O G ... I N（第三、四个按键之间超过 1000ms）"""
    return [
        KeyEvent(timestamp_ms=100, key="L"),
        KeyEvent(timestamp_ms=200, key="O"),
        KeyEvent(timestamp_ms=300, key="G"),
        KeyEvent(timestamp_ms=1500, key="I"),
        KeyEvent(timestamp_ms=1600, key="N"),
    ]
