"""
datasets - 示例数据集

包含:
- paths: 典型控制点路径
"""

from .paths import zigzag_path, diamond_loop, helix_path, coincident_path

__all__ = [
    "zigzag_path",
    "diamond_loop",
    "helix_path",
    "coincident_path",
]
