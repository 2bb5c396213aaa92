"""
utils - 工具函数模块

包含:
- geometry: 距离、带时间插值与类型判断
"""

from .geometry import distance, lerp_timed, is_point, is_path

__all__ = [
    "distance",
    "lerp_timed",
    "is_point",
    "is_path",
]
