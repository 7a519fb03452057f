"""
日志工具

所有模块统一通过 info/success/warning/error/debug 输出，
底层是标准库 logging 的 "keytape" logger。
"""
import logging
import sys

LOGGER_NAME = "keytape"

_logger = logging.getLogger(LOGGER_NAME)


def get_logger(name: str | None = None) -> logging.Logger:
    """返回 keytape logger（或其子 logger）。"""
    if not name:
        return _logger
    return _logger.getChild(name)


def setup_logging(verbose: bool = False) -> None:
    """
    配置控制台输出（只在 CLI 入口调用一次）。

    Args:
        verbose: True 时输出 DEBUG 级别日志
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    _logger.handlers.clear()
    _logger.addHandler(handler)
    _logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    _logger.propagate = False


def info(msg: str) -> None:
    _logger.info(msg)


def success(msg: str) -> None:
    _logger.info(f"✓ {msg}")


def warning(msg: str) -> None:
    _logger.warning(f"⚠ {msg}")


def error(msg: str) -> None:
    _logger.error(f"✗ {msg}")


def debug(msg: str) -> None:
    _logger.debug(msg)
