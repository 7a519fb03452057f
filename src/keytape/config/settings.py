import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Tuple

from dotenv import load_dotenv

from keytape.pipeline.processors.keys import NormalizationPolicy
from keytape.utils.color import rgb_to_ass_color

ENV_PREFIX = "KEYTAPE_"


def load_env_file(env_path: str | Path | None = None) -> Path | None:
    """
    加载项目级 .env 文件（不覆盖已存在的环境变量）。

    如果 env_path 为 None，从当前工作目录向上查找 .env。

    Returns:
        实际加载的 .env 路径；没有找到则返回 None
    """
    if env_path is None:
        cwd = Path.cwd().resolve()
        for parent in (cwd, *cwd.parents):
            env_file = parent / ".env"
            if env_file.is_file():
                load_dotenv(env_file, override=False)
                return env_file
        return None

    env_path = Path(env_path)
    if env_path.is_file():
        load_dotenv(env_path, override=False)
        return env_path
    return None


@dataclass(frozen=True)
class KeytapeConfig:
    # ── 窗口 ──
    inactivity_timer_ms: int = 1000  # 不活动阈值，超过则关闭窗口
    max_keys_onscreen: int = 10  # 同时显示的最大按键数

    # ── 样式 ──
    font: str = "JetBrainsMonoNL NFM"
    font_size: int = 32
    highlight_color: str = "&H66CCFF&"  # ASS 颜色（&HBBGGRR&）
    background_opacity: float = 0.5  # 0 = 全透明, 1 = 不透明
    key_normalization: NormalizationPolicy = NormalizationPolicy.COMPACT

    # ── 位置 ──
    margin_left: int = 40
    margin_right: int = 40
    margin_vertical: int = 40


# ── 选项解析 ──────────────────────────────────────────────

def _parse_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _parse_positive_int(name: str, value: str) -> int:
    n = _parse_int(name, value)
    if n <= 0:
        raise ValueError(f"{name} must be positive, got {n}")
    return n


def _parse_highlight_color(value: str) -> str:
    try:
        return rgb_to_ass_color(value.strip())
    except ValueError:
        raise ValueError(f"highlight-color must be RRGGBB, got {value!r}") from None


def _parse_opacity(value: str) -> float:
    message = f"background-opacity must be between 0 and 1, got {value!r}"
    try:
        n = float(value.strip())
    except ValueError:
        raise ValueError(message) from None
    if not 0 <= n <= 1:
        raise ValueError(message)
    return n


# 选项名（CLI flag 形式）→ (KeytapeConfig 字段, 解析函数)
OPTION_HANDLERS: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "font": ("font", lambda v: v),
    "font-size": ("font_size", lambda v: _parse_positive_int("font-size", v)),
    "key-normalization": ("key_normalization", NormalizationPolicy.from_name),
    "inactivity-timer-ms": ("inactivity_timer_ms", lambda v: _parse_positive_int("inactivity-timer-ms", v)),
    "max-keys-onscreen": ("max_keys_onscreen", lambda v: _parse_int("max-keys-onscreen", v)),
    "margin-left": ("margin_left", lambda v: _parse_int("margin-left", v)),
    "margin-right": ("margin_right", lambda v: _parse_int("margin-right", v)),
    "margin-vertical": ("margin_vertical", lambda v: _parse_int("margin-vertical", v)),
    "highlight-color": ("highlight_color", _parse_highlight_color),
    "background-opacity": ("background_opacity", _parse_opacity),
}


def env_name(option: str) -> str:
    """font-size → KEYTAPE_FONT_SIZE"""
    return ENV_PREFIX + option.replace("-", "_").upper()


def parse_option(option: str, value: str) -> Tuple[str, Any]:
    """
    解析单个选项。

    Returns:
        (字段名, 解析后的值)

    Raises:
        ValueError: 未知选项或值不合法
    """
    handler = OPTION_HANDLERS.get(option)
    if handler is None:
        raise ValueError(f"Unknown flag: --{option}")
    field_name, parse = handler
    return field_name, parse(value)


def config_from_sources(
    environ: Mapping[str, str] | None = None,
    cli_options: Mapping[str, str] | None = None,
) -> KeytapeConfig:
    """
    合并默认值、环境变量和 CLI 选项（优先级依次升高）。

    Args:
        environ: 环境变量（通常是 os.environ；.env 需事先加载进去）
        cli_options: CLI 选项（flag 名 → 原始字符串，如 {"font-size": "40"}）

    Returns:
        KeytapeConfig
    """
    overrides: Dict[str, Any] = {}

    for option in OPTION_HANDLERS:
        value = (environ or {}).get(env_name(option))
        if value is not None:
            field_name, parsed = parse_option(option, value)
            overrides[field_name] = parsed

    for option, value in (cli_options or {}).items():
        field_name, parsed = parse_option(option, value)
        overrides[field_name] = parsed

    return dataclasses.replace(KeytapeConfig(), **overrides)


def template_values(config: KeytapeConfig, res_x: int, res_y: int) -> Dict[str, Any]:
    """ASS header 占位符取值（{{font}}、{{res_x}} 等）。"""
    values = dataclasses.asdict(config)
    values["key_normalization"] = config.key_normalization.value
    values["res_x"] = res_x
    values["res_y"] = res_y
    return values
