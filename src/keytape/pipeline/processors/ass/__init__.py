"""
ASS 字幕模块（唯一公共入口）

公共 API：
- run(): 事件 → .ass 文件

内部模块：
- format.py: 转义、颜色、alpha、单行 Dialogue
- render_ass.py: header 模板 + 全部 Dialogue 行
"""
from .processor import run

__all__ = ["run"]
