"""
ASS 渲染器：事件 + 窗口 → ASS 文档

文档结构：
- header：[Script Info] / [V4+ Styles] / [Events] 格式行，{{name}} 占位符由配置填充
- body：每个窗口一行 Dialogue
"""
import re
from pathlib import Path
from typing import Any, List, Mapping, Sequence

from keytape.config.settings import KeytapeConfig, template_values
from keytape.schema import KeyEvent
from keytape.pipeline.processors.window import generate_windows
from .format import dialogue_line, opacity_to_ass_alpha

ASS_HEADER_TEMPLATE = """\
[Script Info]
ScriptType: v4.00+
PlayResX: {{res_x}}
PlayResY: {{res_y}}
ScaledBorderAndShadow: yes

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Keys,{{font}},{{font_size}},&H00FFFFFF,&H000000FF,&H00000000,&H00000000,1,0,0,0,100,100,0,0,3,0,0,3,{{margin_left}},{{margin_right}},{{margin_vertical}},1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"""

_PLACEHOLDER_RE = re.compile(r"\{\{(.*?)\}\}")


def render_header(template: str, values: Mapping[str, Any]) -> str:
    """
    替换 header 模板中的 {{name}} 占位符。

    Raises:
        ValueError: 占位符没有对应的值
    """
    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        value = values.get(name)
        if value is None:
            raise ValueError(f"Missing template value: {name}")
        return str(value)

    return _PLACEHOLDER_RE.sub(_substitute, template)


def build_ass_lines(
    events: Sequence[KeyEvent],
    config: KeytapeConfig,
    *,
    res_x: int,
    res_y: int,
    template: str = ASS_HEADER_TEMPLATE,
) -> List[str]:
    """
    生成 ASS 文档的所有行（header 在前，随后每个窗口一行 Dialogue）。

    Args:
        events: 已归一化的事件
        config: 样式与窗口参数
        res_x, res_y: 视频分辨率（PlayResX/PlayResY）
        template: header 模板
    """
    header = render_header(template, template_values(config, res_x, res_y))
    alpha = opacity_to_ass_alpha(config.background_opacity)

    windows = generate_windows(
        events,
        inactivity_threshold_ms=config.inactivity_timer_ms,
        max_visible_keys=config.max_keys_onscreen,
    )

    lines = [header]
    for window in windows:
        lines.append(dialogue_line(events, window, config.highlight_color, alpha))
    return lines


def write_ass(output_path: Path, lines: Sequence[str]) -> None:
    """写出 ASS 文件（UTF-8，每行以 \\n 结尾）。"""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line + "\n")
