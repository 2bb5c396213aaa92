"""
knots - 节点参数化

实现:
1. 参数化方式到指数 alpha 的映射
2. 单段 4 个局部节点 t0..t3 的计算 (带退化保护)
"""

import numpy as np

from ..utils.geometry import distance

PARAMETRIZATION_ALPHA = {
    "uniform": 0.0,
    "chordal": 1.0,
    "centripetal": 0.5,
}


def resolve_alpha(parametrization: str = "centripetal", alpha: float | None = None) -> float:
    """
    确定节点间距使用的指数 alpha。

    显式 alpha 优先；否则按名称映射，未知名称按向心参数化处理。
    alpha 越大，对长弦越敏感；0.5 可避免均匀参数化常见的尖点和自交。

    Args:
        parametrization: "uniform" / "chordal" / "centripetal"
        alpha: 显式指数

    Returns:
        alpha 值
    """
    if alpha is not None:
        return float(alpha)
    return PARAMETRIZATION_ALPHA.get(parametrization, PARAMETRIZATION_ALPHA["centripetal"])


def compute_knot_times(window: np.ndarray, alpha: float, epsilon: float) -> np.ndarray:
    """
    计算单段的局部节点 [t0, t1, t2, t3]。

        t0 = 0
        t_k = t_{k-1} + |p_k - p_{k-1}|^alpha

    相邻节点间隔小于 epsilon 时，后一个节点被推到前一个节点 + epsilon。
    保护按顺序进行，每一步使用已修正的前一个节点。

    Args:
        window: (4, D) 局部控制点 p0..p3
        alpha: 参数化指数
        epsilon: 最小节点间隔

    Returns:
        knots: (4,) 单调递增的节点
    """
    raw = np.zeros(4)
    for k in range(1, 4):
        # 0.0 ** 0.0 == 1.0，均匀参数化不受重合点影响
        raw[k] = raw[k - 1] + distance(window[k - 1], window[k]) ** alpha

    knots = raw.copy()
    for k in range(1, 4):
        if raw[k] - knots[k - 1] < epsilon:
            knots[k] = knots[k - 1] + epsilon
    return knots
