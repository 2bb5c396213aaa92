"""
catmull_rom - N 维 Catmull-Rom 样条插值库

对稀疏的有序控制点生成平滑稠密的采样路径，
支持均匀 / 弦长 / 向心参数化、开闭曲线与两种端点策略。
"""

from .algorithm import SplineEvaluator, catmull_rom
from .core import CatmullRomOptions, CatmullRomResult, DimensionError, SampleMeta

__version__ = "0.1.0"
__all__ = [
    "SplineEvaluator",
    "catmull_rom",
    "CatmullRomOptions",
    "CatmullRomResult",
    "DimensionError",
    "SampleMeta",
]
