"""
options - 插值配置与结果类型

CatmullRomOptions 在一次调用内不可变，字段与默认值全部显式列出。
"""

from dataclasses import dataclass

import numpy as np

DEFAULT_EPSILON = 1e-9

PARAMETRIZATIONS = ("uniform", "chordal", "centripetal")
ENDPOINT_MODES = ("duplicate", "extrapolate")


@dataclass(frozen=True)
class CatmullRomOptions:
    """
    Catmull-Rom 样条采样配置。

    Attributes:
        samples: 每段生成的采样点数
        parametrization: 节点参数化方式 "uniform" / "chordal" / "centripetal"
        alpha: 显式指数，优先于 parametrization，取值 [0, 1]
        closed: 是否首尾相连形成闭合曲线
        dimension: 每个点使用的坐标数，默认取第一个点的长度
        endpoint_mode: 开曲线端点虚拟点策略 "duplicate" / "extrapolate"
        epsilon: 节点间隔与插值分母的最小容差
        include_original: 开曲线时在输出首尾加入原始端点
        include_meta: 输出每个采样点的段号与段内参数
    """

    samples: int = 16
    parametrization: str = "centripetal"
    alpha: float | None = None
    closed: bool = False
    dimension: int | None = None
    endpoint_mode: str = "duplicate"
    epsilon: float = DEFAULT_EPSILON
    include_original: bool = False
    include_meta: bool = False

    def __post_init__(self):
        if int(self.samples) != self.samples or self.samples < 1:
            raise ValueError(f"samples must be a positive integer, got {self.samples}")
        if self.alpha is not None and not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must lie in [0, 1], got {self.alpha}")
        if self.dimension is not None and (int(self.dimension) != self.dimension or self.dimension < 1):
            raise ValueError(f"dimension must be a positive integer, got {self.dimension}")
        if self.endpoint_mode not in ENDPOINT_MODES:
            raise ValueError(f"Unknown endpoint mode {self.endpoint_mode!r}")
        if not self.epsilon > 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")


@dataclass(frozen=True)
class SampleMeta:
    """采样点元数据：段号 (从 0 开始) 与段内归一化参数 u ∈ [0, 1]。"""

    segment: int
    u: float


@dataclass
class CatmullRomResult:
    """
    一次插值调用的结果。

    Attributes:
        points: (M, D) 采样点
        meta: 与 points 等长的元数据，仅 include_meta 时给出
        segment_start_indices: 每段首个采样点在 points 中的下标，仅 include_meta 时给出
    """

    points: np.ndarray
    meta: list[SampleMeta] | None = None
    segment_start_indices: list[int] | None = None

    def __len__(self) -> int:
        return len(self.points)
