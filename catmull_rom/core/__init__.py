"""
core - 核心算法模块

包含:
- options: 配置与结果类型
- knots: 参数化指数与局部节点计算
- windows: 端点虚拟点与分段窗口
- segment: 单段金字塔求值
- exceptions: 异常类型
"""

from .exceptions import CatmullRomError, DimensionError
from .knots import compute_knot_times, resolve_alpha
from .options import DEFAULT_EPSILON, CatmullRomOptions, CatmullRomResult, SampleMeta
from .segment import catmull_rom_at, sample_segment
from .windows import pad_open_path, segment_window

__all__ = [
    "CatmullRomError",
    "DimensionError",
    "compute_knot_times",
    "resolve_alpha",
    "DEFAULT_EPSILON",
    "CatmullRomOptions",
    "CatmullRomResult",
    "SampleMeta",
    "catmull_rom_at",
    "sample_segment",
    "pad_open_path",
    "segment_window",
]
