"""
segment - 单段 Catmull-Rom 求值

基于 Barry-Goldman 金字塔算法：三层带时间参数的线性插值，
与非均匀三次 Catmull-Rom 基函数求值等价。
"""

import numpy as np

from ..utils.geometry import lerp_timed
from .knots import compute_knot_times


def catmull_rom_at(
    window: np.ndarray,
    knots: np.ndarray,
    t: float | np.ndarray,
    epsilon: float,
) -> np.ndarray:
    """
    在目标时间 t ∈ [t1, t2] 处求曲线点。

        A1 = lerp(p0, p1; t0, t1)   A2 = lerp(p1, p2; t1, t2)   A3 = lerp(p2, p3; t2, t3)
        B1 = lerp(A1, A2; t0, t2)   B2 = lerp(A2, A3; t1, t3)
        C  = lerp(B1, B2; t1, t2)

    Args:
        window: (4, D) 局部控制点
        knots: (4,) 局部节点
        t: 标量或 (S,) 目标时间
        epsilon: 退化区间容差

    Returns:
        标量 t 返回 (D,)，数组 t 返回 (S, D)
    """
    p0, p1, p2, p3 = window
    t0, t1, t2, t3 = knots
    scalar_input = np.ndim(t) == 0
    tt = np.atleast_1d(np.asarray(t, dtype=float))[:, np.newaxis]

    A1 = lerp_timed(p0, p1, t0, t1, tt, epsilon)
    A2 = lerp_timed(p1, p2, t1, t2, tt, epsilon)
    A3 = lerp_timed(p2, p3, t2, t3, tt, epsilon)

    B1 = lerp_timed(A1, A2, t0, t2, tt, epsilon)
    B2 = lerp_timed(A2, A3, t1, t3, tt, epsilon)

    C = lerp_timed(B1, B2, t1, t2, tt, epsilon)

    # 退化区间会直接返回控制点，需广播回 (S, D)
    C = np.broadcast_to(C, (len(tt), window.shape[1])).copy()
    return C[0] if scalar_input else C


def sample_parameters(knots: np.ndarray, samples: int) -> tuple[np.ndarray, np.ndarray]:
    """
    生成段内采样时间。

    s = 1..samples, t = t1 + s * (t2 - t1) / samples。
    从 s=1 开始，相邻段共享的边界点只输出一次。

    Returns:
        t: (samples,) 目标时间
        u: (samples,) 段内归一化参数
    """
    t1, t2 = knots[1], knots[2]
    s = np.arange(1, samples + 1)
    t = t1 + s * (t2 - t1) / samples
    # t2 - t1 可能因浮点精度为 0，u 直接由 s 得到
    u = s / samples
    return t, u


def sample_segment(
    window: np.ndarray, alpha: float, samples: int, epsilon: float
) -> tuple[np.ndarray, np.ndarray]:
    """
    对单段进行采样。

    Args:
        window: (4, D) 局部控制点
        alpha: 参数化指数
        samples: 采样点数
        epsilon: 退化容差

    Returns:
        points: (samples, D) 采样点
        u: (samples,) 段内归一化参数
    """
    knots = compute_knot_times(window, alpha, epsilon)
    t, u = sample_parameters(knots, samples)
    return catmull_rom_at(window, knots, t, epsilon), u
