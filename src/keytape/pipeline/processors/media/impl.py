"""
Media 内部实现：ffprobe / ffmpeg 调用

只负责执行外部命令并解析结果，不做文件校验。
"""
import re
import subprocess
from typing import List, Tuple

from keytape.utils.logger import debug

_DIMS_RE = re.compile(r"^(\d+)x(\d+)\s*$")
_FILTERGRAPH_SPECIAL_RE = re.compile(r"([\\'\[\],;])")


def escape_filter_value(value: str) -> str:
    """
    转义 ffmpeg 滤镜参数值（两层）。

    - 第一层（选项值）：\\ ' : 加反斜杠
    - 第二层（filtergraph）：\\ ' [ ] , ; 加反斜杠
    """
    value = value.replace("\\", "\\\\").replace("'", "\\'").replace(":", "\\:")
    return _FILTERGRAPH_SPECIAL_RE.sub(r"\\\1", value)


def _run(cmd: List[str]) -> subprocess.CompletedProcess:
    debug(f"$ {' '.join(cmd)}")
    try:
        return subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        raise RuntimeError(f"{cmd[0]} not found; is it installed and on PATH?") from None


def probe_video_dims(video_path: str) -> Tuple[int, int]:
    """
    用 ffprobe 读取第一路视频流的分辨率。

    Returns:
        (width, height)

    Raises:
        RuntimeError: ffprobe 失败或输出无法解析
    """
    result = _run(
        [
            "ffprobe",
            "-v", "error",
            "-select_streams", "v:0",
            "-show_entries", "stream=width,height",
            "-of", "csv=s=x:p=0",
            video_path,
        ]
    )

    if result.returncode != 0:
        raise RuntimeError(
            f"ffprobe failed with exit code {result.returncode}: {result.stderr.strip()}"
        )

    m = _DIMS_RE.match(result.stdout)
    if not m:
        raise RuntimeError(
            f"Could not determine video dimensions from ffprobe output: {result.stdout.strip()!r}"
        )

    return int(m.group(1)), int(m.group(2))


def burn_subtitles(video_path: str, ass_path: str, output_path: str) -> None:
    """
    用 ffmpeg 的 ass 滤镜把字幕烧进视频（音频直接 copy）。

    Raises:
        RuntimeError: ffmpeg 退出码非 0
    """
    result = _run(
        [
            "ffmpeg", "-y",
            "-i", video_path,
            "-vf", f"ass={escape_filter_value(ass_path)}",
            "-c:a", "copy",
            output_path,
        ]
    )

    if result.returncode != 0:
        raise RuntimeError(
            f"FFmpeg failed with exit code {result.returncode}: {result.stderr.strip()[-500:]}"
        )
