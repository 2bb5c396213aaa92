"""
geometry - 几何计算工具函数

提供欧氏距离、带时间参数的线性插值以及点/路径的类型判断。
"""

from numbers import Real

import numpy as np


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """
    计算两点间欧氏距离，只使用两者共有的坐标。

    Args:
        a: (D1,) 点坐标
        b: (D2,) 点坐标

    Returns:
        距离值
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    dim = min(a.shape[-1], b.shape[-1])
    return float(np.linalg.norm(b[..., :dim] - a[..., :dim]))


def lerp_timed(
    a: np.ndarray,
    b: np.ndarray,
    ta: float,
    tb: float,
    t: float | np.ndarray,
    epsilon: float,
) -> np.ndarray:
    """
    在时间区间 [ta, tb] 上对 a, b 逐坐标线性插值。

        u = (t - ta) / (tb - ta)
        (1 - u) * a + u * b

    区间长度小于 epsilon 时视为退化，直接返回 a。

    Args:
        a: (D,) 或 (S, D) 起点
        b: (D,) 或 (S, D) 终点
        ta: 起点时间
        tb: 终点时间
        t: 标量或 (S, 1) 目标时间
        epsilon: 退化区间容差

    Returns:
        插值结果，形状按广播规则确定
    """
    denom = tb - ta
    if abs(denom) < epsilon:
        return a
    u = (t - ta) / denom
    return (1 - u) * a + u * b


def is_point(value, min_dim: int = 2) -> bool:
    """判断 value 是否为至少 min_dim 个实数组成的序列。"""
    if isinstance(value, np.ndarray):
        return value.ndim == 1 and np.issubdtype(value.dtype, np.number) and len(value) >= min_dim
    if isinstance(value, (str, bytes)):
        return False
    try:
        coords = list(value)
    except TypeError:
        return False
    return len(coords) >= min_dim and all(isinstance(x, Real) and not isinstance(x, bool) for x in coords)


def is_path(value, min_dim: int = 2) -> bool:
    """判断 value 是否为点序列，每个点至少 min_dim 维。"""
    if isinstance(value, np.ndarray):
        return value.ndim == 2 and np.issubdtype(value.dtype, np.number) and value.shape[1] >= min_dim
    if isinstance(value, (str, bytes)):
        return False
    try:
        points = list(value)
    except TypeError:
        return False
    return all(is_point(p, min_dim) for p in points)


if __name__ == "__main__":
    print("=== 几何工具测试 ===")

    p = np.array([0.0, 0.0])
    q = np.array([3.0, 4.0])
    print(f"distance({p}, {q}) = {distance(p, q):.4f}")
    print(f"lerp_timed 中点: {lerp_timed(p, q, 0.0, 2.0, 1.0, 1e-9)}")
    print(f"退化区间: {lerp_timed(p, q, 1.0, 1.0, 1.0, 1e-9)}")
    print(f"is_path([[0, 0], [1, 2]]) = {is_path([[0, 0], [1, 2]])}")
