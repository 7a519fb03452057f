"""
keytape: 把按键日志渲染成 ASS 字幕，并烧录到录屏视频中。
"""
__version__ = "0.1.0"
