"""
exceptions - 异常类型

所有异常均在单次调用内同步抛出，不做重试。
"""


class CatmullRomError(Exception):
    """catmull_rom 包的异常基类。"""


class DimensionError(CatmullRomError, ValueError):
    """控制点坐标数少于有效维度。"""

    def __init__(self, index: int, size: int, dimension: int):
        self.index = index
        self.size = size
        self.dimension = dimension
        super().__init__(
            f"Point {index} has {size} coordinates, dimension {dimension} required"
        )
