"""
Media Processor：字幕烧录（唯一对外入口）

职责：
- 调用 impl 执行 ffmpeg
- 校验输出文件并返回 ProcessorResult
"""
from pathlib import Path

from keytape.utils.logger import info
from .._types import ProcessorResult
from .impl import burn_subtitles


def run(
    video_path: str,
    *,
    ass_path: str,
    output_path: str,
) -> ProcessorResult:
    """
    把 ASS 字幕烧录进视频。

    Args:
        video_path: 输入视频路径
        ass_path: ASS 字幕路径
        output_path: 输出视频路径

    Returns:
        ProcessorResult:
        - data.output_path: 输出视频路径
        - metrics.video_size_mb: 输出大小
    """
    info("Running ffmpeg...")
    burn_subtitles(video_path, ass_path, output_path)

    output_file = Path(output_path)
    if not output_file.exists():
        raise RuntimeError(f"Subtitle burn failed: {output_path} was not created")

    output_size = output_file.stat().st_size
    if output_size == 0:
        raise RuntimeError(f"Subtitle burn failed: {output_path} is empty")

    return ProcessorResult(
        data={
            "output_path": output_path,
        },
        metrics={
            "video_size_mb": output_size / 1024 / 1024,
        },
    )
