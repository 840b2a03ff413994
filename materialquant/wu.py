"""Wu's color quantizer: recursive box splitting on a 3-D color histogram."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Sequence

from materialquant.utils import argb_from_rgb, blue_from_int, green_from_int, red_from_int

_INDEX_BITS = 5
_INDEX_COUNT = (1 << _INDEX_BITS) + 1
_TOTAL_SIZE = _INDEX_COUNT * _INDEX_COUNT * _INDEX_COUNT
_MAX_COLORS = 256


def _index(r: int, g: int, b: int) -> int:
    return (r << (_INDEX_BITS * 2)) + (r << (_INDEX_BITS + 1)) + (g << _INDEX_BITS) + r + g + b


@dataclass
class _Box:
    r0: int = 0
    r1: int = 0
    g0: int = 0
    g1: int = 0
    b0: int = 0
    b1: int = 0
    vol: int = 0


class _Direction(enum.Enum):
    RED = enum.auto()
    GREEN = enum.auto()
    BLUE = enum.auto()


class _Histogram:
    """Cumulative color moments over the quantization grid."""

    def __init__(self, pixels: Sequence[int]) -> None:
        self.weights = [0] * _TOTAL_SIZE
        self.m_r = [0] * _TOTAL_SIZE
        self.m_g = [0] * _TOTAL_SIZE
        self.m_b = [0] * _TOTAL_SIZE
        self.moments = [0] * _TOTAL_SIZE
        shift = 8 - _INDEX_BITS
        for pixel in pixels:
            red = red_from_int(pixel)
            green = green_from_int(pixel)
            blue = blue_from_int(pixel)
            index = _index((red >> shift) + 1, (green >> shift) + 1, (blue >> shift) + 1)
            self.weights[index] += 1
            self.m_r[index] += red
            self.m_g[index] += green
            self.m_b[index] += blue
            self.moments[index] += red * red + green * green + blue * blue
        self._accumulate()

    def _accumulate(self) -> None:
        tables = (self.weights, self.m_r, self.m_g, self.m_b, self.moments)
        for r in range(1, _INDEX_COUNT):
            areas = [[0] * _INDEX_COUNT for _ in tables]
            for g in range(1, _INDEX_COUNT):
                lines = [0] * len(tables)
                for b in range(1, _INDEX_COUNT):
                    index = _index(r, g, b)
                    previous = _index(r - 1, g, b)
                    for k, table in enumerate(tables):
                        lines[k] += table[index]
                        areas[k][b] += lines[k]
                        table[index] = table[previous] + areas[k][b]

    @staticmethod
    def vol(cube: _Box, moment: Sequence[int]) -> int:
        return (
            moment[_index(cube.r1, cube.g1, cube.b1)]
            - moment[_index(cube.r1, cube.g1, cube.b0)]
            - moment[_index(cube.r1, cube.g0, cube.b1)]
            + moment[_index(cube.r1, cube.g0, cube.b0)]
            - moment[_index(cube.r0, cube.g1, cube.b1)]
            + moment[_index(cube.r0, cube.g1, cube.b0)]
            + moment[_index(cube.r0, cube.g0, cube.b1)]
            - moment[_index(cube.r0, cube.g0, cube.b0)]
        )

    @staticmethod
    def _top(cube: _Box, direction: _Direction, position: int, moment: Sequence[int]) -> int:
        if direction is _Direction.RED:
            return (
                moment[_index(position, cube.g1, cube.b1)]
                - moment[_index(position, cube.g1, cube.b0)]
                - moment[_index(position, cube.g0, cube.b1)]
                + moment[_index(position, cube.g0, cube.b0)]
            )
        if direction is _Direction.GREEN:
            return (
                moment[_index(cube.r1, position, cube.b1)]
                - moment[_index(cube.r1, position, cube.b0)]
                - moment[_index(cube.r0, position, cube.b1)]
                + moment[_index(cube.r0, position, cube.b0)]
            )
        return (
            moment[_index(cube.r1, cube.g1, position)]
            - moment[_index(cube.r1, cube.g0, position)]
            - moment[_index(cube.r0, cube.g1, position)]
            + moment[_index(cube.r0, cube.g0, position)]
        )

    @staticmethod
    def _bottom(cube: _Box, direction: _Direction, moment: Sequence[int]) -> int:
        if direction is _Direction.RED:
            return (
                -moment[_index(cube.r0, cube.g1, cube.b1)]
                + moment[_index(cube.r0, cube.g1, cube.b0)]
                + moment[_index(cube.r0, cube.g0, cube.b1)]
                - moment[_index(cube.r0, cube.g0, cube.b0)]
            )
        if direction is _Direction.GREEN:
            return (
                -moment[_index(cube.r1, cube.g0, cube.b1)]
                + moment[_index(cube.r1, cube.g0, cube.b0)]
                + moment[_index(cube.r0, cube.g0, cube.b1)]
                - moment[_index(cube.r0, cube.g0, cube.b0)]
            )
        return (
            -moment[_index(cube.r1, cube.g1, cube.b0)]
            + moment[_index(cube.r1, cube.g0, cube.b0)]
            + moment[_index(cube.r0, cube.g1, cube.b0)]
            - moment[_index(cube.r0, cube.g0, cube.b0)]
        )

    def variance(self, cube: _Box) -> float:
        dr = float(self.vol(cube, self.m_r))
        dg = float(self.vol(cube, self.m_g))
        db = float(self.vol(cube, self.m_b))
        xx = float(self.vol(cube, self.moments))
        volume = float(self.vol(cube, self.weights))
        if volume == 0.0:
            return 0.0
        return xx - (dr * dr + dg * dg + db * db) / volume

    def _maximize(
        self,
        cube: _Box,
        direction: _Direction,
        first: int,
        last: int,
        whole: tuple[int, int, int, int],
    ) -> tuple[float, int]:
        whole_w, whole_r, whole_g, whole_b = whole
        bottom_r = self._bottom(cube, direction, self.m_r)
        bottom_g = self._bottom(cube, direction, self.m_g)
        bottom_b = self._bottom(cube, direction, self.m_b)
        bottom_w = self._bottom(cube, direction, self.weights)

        best = 0.0
        cut = -1
        for position in range(first, last):
            half_r = bottom_r + self._top(cube, direction, position, self.m_r)
            half_g = bottom_g + self._top(cube, direction, position, self.m_g)
            half_b = bottom_b + self._top(cube, direction, position, self.m_b)
            half_w = bottom_w + self._top(cube, direction, position, self.weights)
            if half_w == 0:
                continue
            temp = (
                float(half_r) * half_r + float(half_g) * half_g + float(half_b) * half_b
            ) / float(half_w)

            half_r = whole_r - half_r
            half_g = whole_g - half_g
            half_b = whole_b - half_b
            half_w = whole_w - half_w
            if half_w == 0:
                continue
            temp += (
                float(half_r) * half_r + float(half_g) * half_g + float(half_b) * half_b
            ) / float(half_w)

            if temp > best:
                best = temp
                cut = position
        return best, cut

    def cut(self, box: _Box) -> tuple[_Box, _Box] | None:
        """Split a box in two along its best plane, or return None if it cannot be split."""
        whole = (
            self.vol(box, self.weights),
            self.vol(box, self.m_r),
            self.vol(box, self.m_g),
            self.vol(box, self.m_b),
        )
        max_r, cut_r = self._maximize(box, _Direction.RED, box.r0 + 1, box.r1, whole)
        max_g, cut_g = self._maximize(box, _Direction.GREEN, box.g0 + 1, box.g1, whole)
        max_b, cut_b = self._maximize(box, _Direction.BLUE, box.b0 + 1, box.b1, whole)

        if max_r >= max_g and max_r >= max_b:
            if cut_r < 0:
                return None
            first = replace(box, r1=cut_r)
            second = _Box(r0=cut_r, r1=box.r1, g0=box.g0, g1=box.g1, b0=box.b0, b1=box.b1)
        elif max_g >= max_r and max_g >= max_b:
            first = replace(box, g1=cut_g)
            second = _Box(r0=box.r0, r1=box.r1, g0=cut_g, g1=box.g1, b0=box.b0, b1=box.b1)
        else:
            first = replace(box, b1=cut_b)
            second = _Box(r0=box.r0, r1=box.r1, g0=box.g0, g1=box.g1, b0=cut_b, b1=box.b1)

        for half in (first, second):
            half.vol = (half.r1 - half.r0) * (half.g1 - half.g0) * (half.b1 - half.b0)
        return first, second


def quantize_wu(pixels: Sequence[int], max_colors: int) -> list[int]:
    """Reduce ARGB pixels to at most ``max_colors`` representative colors.

    Returns an empty list when ``max_colors`` is outside 1..256 or there are no pixels.
    """
    if max_colors <= 0 or max_colors > _MAX_COLORS or not pixels:
        return []

    histogram = _Histogram(pixels)
    cubes = [_Box() for _ in range(_MAX_COLORS)]
    last = _INDEX_COUNT - 1
    cubes[0] = _Box(r1=last, g1=last, b1=last)
    variances = [0.0] * _MAX_COLORS

    def box_variance(box: _Box) -> float:
        return histogram.variance(box) if box.vol > 1 else 0.0

    next_box = 0
    i = 1
    while i < max_colors:
        halves = histogram.cut(cubes[next_box])
        if halves is not None:
            cubes[next_box], cubes[i] = halves
            variances[next_box] = box_variance(cubes[next_box])
            variances[i] = box_variance(cubes[i])
        else:
            variances[next_box] = 0.0
            i -= 1

        next_box = max(range(i + 1), key=variances.__getitem__)
        if variances[next_box] <= 0.0:
            max_colors = i + 1
            break
        i += 1

    colors = []
    for cube in cubes[:max_colors]:
        weight = histogram.vol(cube, histogram.weights)
        if weight > 0:
            red = histogram.vol(cube, histogram.m_r) // weight
            green = histogram.vol(cube, histogram.m_g) // weight
            blue = histogram.vol(cube, histogram.m_b) // weight
            colors.append(argb_from_rgb(red, green, blue))
    return colors