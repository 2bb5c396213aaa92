"""
algorithm - Catmull-Rom 样条采样主算法

对有序 N 维控制点序列生成平滑的稠密采样路径。
无状态：每次调用独立分配输出，不修改输入。
"""

import logging
from typing import Sequence

import numpy as np

from .core.exceptions import DimensionError
from .core.knots import resolve_alpha
from .core.options import CatmullRomOptions, CatmullRomResult, SampleMeta
from .core.segment import sample_segment
from .core.windows import iter_segment_windows, segment_count
from .utils.geometry import is_point

logger = logging.getLogger(__name__)


def _clamp_points(path: Sequence[Sequence[float]], dimension: int | None) -> np.ndarray:
    """校验每个点的类型与坐标数并截取到有效维度。"""
    for i, p in enumerate(path):
        if not is_point(p, min_dim=0):
            raise TypeError(f"Point {i} is not a sequence of real numbers")
    dim = dimension if dimension is not None else len(path[0])
    rows = []
    for i, p in enumerate(path):
        coords = np.asarray(p, dtype=float)
        if len(coords) < dim:
            raise DimensionError(i, len(coords), dim)
        rows.append(coords[:dim])
    return np.array(rows, dtype=float).reshape(len(rows), dim)


def catmull_rom(
    path: Sequence[Sequence[float]] | np.ndarray,
    options: CatmullRomOptions | None = None,
) -> CatmullRomResult:
    """
    对控制点路径进行 Catmull-Rom 插值采样。

    Args:
        path: (N, D) 控制点，各点坐标数可以不同，但不得少于有效维度
        options: 采样配置，默认 CatmullRomOptions()

    Returns:
        CatmullRomResult
        - 开曲线输出 (N - 1) * samples 个点，include_original 时再加 2
        - 闭曲线输出 N * samples 个点，接缝处不重复

    Raises:
        DimensionError: 某点坐标数少于有效维度
        TypeError: 某点不是实数序列
    """
    if options is None:
        options = CatmullRomOptions()
    include_meta = options.include_meta

    # 少于 2 个点：原样返回
    if len(path) < 2:
        return CatmullRomResult(
            points=np.array(path, dtype=float),
            meta=[] if include_meta else None,
            segment_start_indices=[0] if include_meta else None,
        )

    pts = _clamp_points(path, options.dimension)
    n, dim = pts.shape
    alpha = resolve_alpha(options.parametrization, options.alpha)
    closed = options.closed
    with_original = options.include_original and not closed
    n_segments = segment_count(n, closed)

    logger.debug(
        "Catmull-Rom: n=%d dim=%d alpha=%.3f closed=%s segments=%d",
        n, dim, alpha, closed, n_segments,
    )

    chunks: list[np.ndarray] = []
    meta: list[SampleMeta] | None = [] if include_meta else None
    starts: list[int] | None = [] if include_meta else None
    written = 0

    if with_original:
        chunks.append(pts[:1].copy())
        if include_meta:
            meta.append(SampleMeta(0, 0.0))
            starts.append(written)
        written += 1

    for i, window in iter_segment_windows(pts, closed, options.endpoint_mode):
        seg_points, u = sample_segment(window, alpha, options.samples, options.epsilon)
        if include_meta:
            starts.append(written)
            meta.extend(SampleMeta(i, float(ui)) for ui in u)
        chunks.append(seg_points)
        written += len(seg_points)

    if with_original:
        chunks.append(pts[-1:].copy())
        if include_meta:
            meta.append(SampleMeta(n_segments - 1, 1.0))
        written += 1

    points = np.vstack(chunks)
    logger.debug("Catmull-Rom: %d output points", written)

    return CatmullRomResult(points=points, meta=meta, segment_start_indices=starts)


class SplineEvaluator:
    """
    无状态的 Catmull-Rom 求值器。

    仅持有不可变配置，可在多个调用 (或线程) 间共享。

    Attributes:
        options: 采样配置
        alpha: 解析后的参数化指数
    """

    def __init__(self, options: CatmullRomOptions | None = None):
        """
        Args:
            options: 采样配置，默认 CatmullRomOptions()
        """
        self.options = options if options is not None else CatmullRomOptions()
        self.alpha = resolve_alpha(self.options.parametrization, self.options.alpha)

    def evaluate(self, path: Sequence[Sequence[float]] | np.ndarray) -> CatmullRomResult:
        """对 path 采样，见 catmull_rom。"""
        return catmull_rom(path, self.options)

    def __call__(self, path: Sequence[Sequence[float]] | np.ndarray) -> CatmullRomResult:
        return self.evaluate(path)

    def __repr__(self) -> str:
        kind = "closed" if self.options.closed else "open"
        return f"SplineEvaluator(alpha={self.alpha:.2f}, samples={self.options.samples}, {kind})"


if __name__ == "__main__":
    from catmull_rom.datasets import diamond_loop, zigzag_path

    print("=== Catmull-Rom 采样测试 ===")

    path = zigzag_path()
    result = catmull_rom(path, CatmullRomOptions(samples=10))
    print(f"输入点数: {len(path)}")
    print(f"输出点数: {len(result.points)}")

    loop = diamond_loop()
    evaluator = SplineEvaluator(CatmullRomOptions(closed=True, include_meta=True))
    result = evaluator(loop)
    print(f"\n{evaluator}")
    print(f"闭合输出点数: {len(result.points)}")
    print(f"段起始下标: {result.segment_start_indices}")
    print(f"接缝距离: {np.linalg.norm(result.points[-1] - result.points[0]):.4f}")
