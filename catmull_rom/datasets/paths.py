"""
paths - 示例控制点路径

提供演示与测试使用的典型控制点序列:
- zigzag_path: 平面折线 (开曲线)
- diamond_loop: 单位菱形 (闭曲线)
- helix_path: 三维螺旋线
- coincident_path: 含重合点的退化路径
"""

import numpy as np


def zigzag_path() -> np.ndarray:
    """
    平面折线路径。

    Returns:
        points: (4, 2) 控制点
    """
    return np.array([[0.0, 0.0], [1.0, 2.0], [2.0, 1.0], [3.0, 3.0]])


def diamond_loop() -> np.ndarray:
    """
    单位菱形，按逆时针排列，用作闭曲线。

    Returns:
        points: (4, 2) 控制点
    """
    return np.array([[1.0, 0.0], [0.0, 1.0], [-1.0, 0.0], [0.0, -1.0]])


def helix_path(n_points: int = 12, radius: float = 1.0, pitch: float = 0.5) -> np.ndarray:
    """
    三维螺旋线上的等角度采样点。

    Args:
        n_points: 点数
        radius: 半径
        pitch: 每圈上升高度

    Returns:
        points: (n_points, 3) 控制点
    """
    theta = np.linspace(0, 2 * np.pi, n_points)
    return np.column_stack([
        radius * np.cos(theta),
        radius * np.sin(theta),
        pitch * theta / (2 * np.pi),
    ])


def coincident_path() -> np.ndarray:
    """
    含相邻重合点的路径，用于检验退化保护。

    Returns:
        points: (5, 2) 控制点
    """
    return np.array([[0.0, 0.0], [1.0, 1.0], [1.0, 1.0], [2.0, 0.0], [3.0, 1.0]])


if __name__ == "__main__":
    for name, pts in [
        ("zigzag", zigzag_path()),
        ("diamond", diamond_loop()),
        ("helix", helix_path()),
        ("coincident", coincident_path()),
    ]:
        print(f"{name}: {pts.shape}")
