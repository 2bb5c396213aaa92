"""
windows 模块单元测试
"""

import numpy as np
import pytest

from catmull_rom.core.windows import (
    iter_segment_windows,
    pad_open_path,
    segment_count,
    segment_window,
)


@pytest.fixture
def points():
    return np.array([[0.0, 0.0], [1.0, 2.0], [2.0, 1.0], [3.0, 3.0]])


class TestPadOpenPath:
    """端点虚拟点测试"""

    def test_duplicate(self, points):
        """测试重复端点"""
        padded = pad_open_path(points, "duplicate")
        assert padded.shape == (6, 2)
        np.testing.assert_array_equal(padded[0], points[0])
        np.testing.assert_array_equal(padded[-1], points[-1])
        np.testing.assert_array_equal(padded[1:-1], points)

    def test_extrapolate(self, points):
        """测试线性外推端点"""
        padded = pad_open_path(points, "extrapolate")
        np.testing.assert_allclose(padded[0], [-1.0, -2.0])
        np.testing.assert_allclose(padded[-1], [4.0, 5.0])
        np.testing.assert_array_equal(padded[1:-1], points)

    def test_two_points(self):
        """测试两点路径"""
        pts = np.array([[0.0, 0.0], [1.0, 1.0]])
        padded = pad_open_path(pts, "extrapolate")
        np.testing.assert_allclose(padded, [[-1, -1], [0, 0], [1, 1], [2, 2]])

    def test_unknown_mode(self, points):
        """测试未知端点策略"""
        with pytest.raises(ValueError):
            pad_open_path(points, "mirror")

    def test_input_not_modified(self, points):
        """测试不修改输入"""
        before = points.copy()
        pad_open_path(points, "extrapolate")
        np.testing.assert_array_equal(points, before)


class TestSegmentWindow:
    """分段窗口测试"""

    def test_segment_count(self):
        """测试段数"""
        assert segment_count(4, closed=False) == 3
        assert segment_count(4, closed=True) == 4
        assert segment_count(2, closed=False) == 1

    def test_closed_wraparound(self, points):
        """测试闭曲线首段取模"""
        window = segment_window(points, 0, closed=True)
        np.testing.assert_array_equal(window, points[[3, 0, 1, 2]])

    def test_closed_last_segment(self, points):
        """测试闭曲线末段回到首点"""
        window = segment_window(points, 3, closed=True)
        np.testing.assert_array_equal(window, points[[2, 3, 0, 1]])

    def test_closed_two_points(self):
        """测试两点闭曲线"""
        pts = np.array([[0.0, 0.0], [1.0, 0.0]])
        window = segment_window(pts, 0, closed=True)
        np.testing.assert_array_equal(window, pts[[1, 0, 1, 0]])

    def test_open_sequential(self, points):
        """测试开曲线按顺序取补点后的窗口"""
        padded = pad_open_path(points)
        window = segment_window(padded, 1, closed=False)
        np.testing.assert_array_equal(window, points)

    def test_iter_windows_open(self, points):
        """测试开曲线窗口迭代"""
        windows = list(iter_segment_windows(points, closed=False))
        assert [i for i, _ in windows] == [0, 1, 2]
        # 每段位于真实点 i 与 i+1 之间
        for i, window in windows:
            assert window.shape == (4, 2)
            np.testing.assert_array_equal(window[1], points[i])
            np.testing.assert_array_equal(window[2], points[i + 1])

    def test_iter_windows_closed(self, points):
        """测试闭曲线窗口迭代"""
        windows = list(iter_segment_windows(points, closed=True))
        assert len(windows) == 4
        np.testing.assert_array_equal(windows[-1][1][2], points[0])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
