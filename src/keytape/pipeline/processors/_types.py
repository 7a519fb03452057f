"""
Processors 统一类型定义

所有会写文件的 processor 返回 ProcessorResult，保持接口一致性。
Processor 只写调用方指定的输出路径。
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ProcessorResult:
    """
    Processor 执行结果（统一返回格式）。

    - data: 结构化数据（例如 output_path）
    - metrics: 统计信息（例如 windows 数量、文件大小）
    - warnings: 非致命问题
    """
    data: Optional[Dict[str, Any]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
