"""
ASS Processor：事件 → ASS 文件（唯一对外入口）

职责：
- 调用 render_ass 生成文档并写到调用方指定的路径
- 返回 ProcessorResult
"""
from pathlib import Path
from typing import Sequence

from keytape.config.settings import KeytapeConfig
from keytape.schema import KeyEvent
from keytape.utils.logger import debug
from .._types import ProcessorResult
from .render_ass import ASS_HEADER_TEMPLATE, build_ass_lines, write_ass


def run(
    events: Sequence[KeyEvent],
    config: KeytapeConfig,
    *,
    res_x: int,
    res_y: int,
    output_path: str | Path,
    template: str = ASS_HEADER_TEMPLATE,
) -> ProcessorResult:
    """
    生成 ASS 字幕文件。

    Args:
        events: 已归一化的事件
        config: KeytapeConfig
        res_x, res_y: 视频分辨率
        output_path: 输出 .ass 路径

    Returns:
        ProcessorResult:
        - data.output_path: 输出文件路径
        - metrics.windows: Dialogue 行数
    """
    output_path = Path(output_path)
    lines = build_ass_lines(events, config, res_x=res_x, res_y=res_y, template=template)
    write_ass(output_path, lines)

    windows = len(lines) - 1
    debug(f"Wrote {windows} dialogue lines to {output_path}")

    return ProcessorResult(
        data={"output_path": str(output_path)},
        metrics={"windows": windows},
    )
