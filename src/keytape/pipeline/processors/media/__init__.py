"""
Media 模块：ffprobe 探测 + ffmpeg 烧录

公共 API：
- probe_video_dims(): 视频分辨率
- run(): 烧录字幕并校验输出
"""
from .impl import burn_subtitles, probe_video_dims
from .processor import run

__all__ = ["burn_subtitles", "probe_video_dims", "run"]
