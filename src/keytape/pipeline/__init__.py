"""
Pipeline：keylog → 归一化 → 窗口 → ASS → 烧录
"""
