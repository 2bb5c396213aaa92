"""
windows - 端点虚拟点与分段控制点窗口

开曲线在首尾各补一个虚拟点，使每段都有完整的 4 点窗口；
闭曲线不补点，按下标取模循环。
"""

from typing import Iterator

import numpy as np


def pad_open_path(points: np.ndarray, endpoint_mode: str = "duplicate") -> np.ndarray:
    """
    为开曲线生成首尾虚拟点。

    - duplicate: 虚拟点与首/末点重合 (端点切线平坦)
    - extrapolate: 沿首/末弦线性外推, p_-1 = p_0 + (p_0 - p_1)

    Args:
        points: (N, D) 控制点, N >= 2
        endpoint_mode: "duplicate" 或 "extrapolate"

    Returns:
        padded: (N + 2, D) 补点后的控制点
    """
    if endpoint_mode == "duplicate":
        first = points[0]
        last = points[-1]
    elif endpoint_mode == "extrapolate":
        first = points[0] + (points[0] - points[1])
        last = points[-1] + (points[-1] - points[-2])
    else:
        raise ValueError(f"Unknown endpoint mode {endpoint_mode!r}")
    return np.vstack([first, points, last])


def segment_count(n: int, closed: bool) -> int:
    """闭曲线 n 段，开曲线 n - 1 段。"""
    return n if closed else n - 1


def segment_window(points: np.ndarray, i: int, closed: bool) -> np.ndarray:
    """
    取第 i 段的 4 点窗口 (p0, p1, p2, p3)，曲线位于 p1 与 p2 之间。

    Args:
        points: 闭曲线为 (N, D) 原始点；开曲线为 (N + 2, D) 补点后的点
        i: 段号
        closed: 是否闭合

    Returns:
        window: (4, D)
    """
    if closed:
        n = len(points)
        return points[[(i - 1) % n, i % n, (i + 1) % n, (i + 2) % n]]
    return points[i : i + 4]


def iter_segment_windows(
    points: np.ndarray, closed: bool = False, endpoint_mode: str = "duplicate"
) -> Iterator[tuple[int, np.ndarray]]:
    """依次产生 (段号, 窗口)。开曲线先补虚拟点。"""
    source = points if closed else pad_open_path(points, endpoint_mode)
    for i in range(segment_count(len(points), closed)):
        yield i, segment_window(source, i, closed)
