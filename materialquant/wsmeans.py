"""Weighted k-means quantization in L*a*b* space."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Sequence

from materialquant.lab import Lab, int_from_lab, lab_from_int

_MAX_ITERATIONS = 100
_MIN_DELTA_E = 3.0
_SEED = 42688
_MAX_COLORS = 256


@dataclass
class QuantizerResult:
    """Cluster colors with their populations, and each input color's cluster."""

    color_to_count: dict[int, int] = field(default_factory=dict)
    input_pixel_to_cluster_pixel: dict[int, int] = field(default_factory=dict)


class _GlibcRandom:
    """The additive feedback generator behind the C library's rand()."""

    RAND_MAX = 2147483647

    def __init__(self, seed: int) -> None:
        seed &= 0xFFFFFFFF
        if seed == 0:
            seed = 1
        state = [seed]
        for _ in range(30):
            state.append((16807 * state[-1]) % 2147483647)
        state.extend(state[:3])
        self._state = deque(state, maxlen=34)
        for _ in range(310):
            self._step()

    def _step(self) -> int:
        value = (self._state[-31] + self._state[-3]) & 0xFFFFFFFF
        self._state.append(value)
        return value

    def rand(self) -> int:
        return self._step() >> 1

    def uniform(self) -> float:
        return self.rand() / float(self.RAND_MAX)


def quantize_wsmeans(
    input_pixels: Sequence[int],
    starting_clusters: Sequence[int],
    max_colors: int,
) -> QuantizerResult:
    """Cluster ARGB pixels into at most ``max_colors`` colors with weighted k-means."""
    if max_colors <= 0 or not input_pixels:
        return QuantizerResult()
    max_colors = min(max_colors, _MAX_COLORS)

    pixel_to_count: dict[int, int] = {}
    for pixel in input_pixels:
        pixel_to_count[pixel] = pixel_to_count.get(pixel, 0) + 1
    pixels = list(pixel_to_count)
    counts = [pixel_to_count[pixel] for pixel in pixels]
    points = [lab_from_int(pixel) for pixel in pixels]

    cluster_count = min(max_colors, len(points))
    if starting_clusters:
        cluster_count = min(cluster_count, len(starting_clusters))

    clusters = [lab_from_int(argb) for argb in starting_clusters]
    rng = _GlibcRandom(_SEED)
    if not starting_clusters:
        for _ in range(cluster_count - len(clusters)):
            lightness = rng.uniform() * 100.0
            a = rng.uniform() * 200.0 - 100.0
            b = rng.uniform() * 200.0 - 100.0
            clusters.append(Lab(lightness, a, b))

    rng = _GlibcRandom(_SEED)
    cluster_indices = [rng.rand() % cluster_count for _ in points]
    populations = [0] * cluster_count

    for iteration in range(_MAX_ITERATIONS):
        active = clusters[:cluster_count]
        distances = [[ci.delta_e(cj) for cj in active] for ci in active]

        color_moved = False
        for i, point in enumerate(points):
            previous_index = cluster_indices[i]
            previous_distance = point.delta_e(clusters[previous_index])
            minimum_distance = previous_distance
            new_index = -1
            for j, cluster in enumerate(active):
                if distances[previous_index][j] >= 4 * previous_distance:
                    continue
                distance = point.delta_e(cluster)
                if distance < minimum_distance:
                    minimum_distance = distance
                    new_index = j
            if new_index != -1:
                change = abs(math.sqrt(minimum_distance) - math.sqrt(previous_distance))
                if change > _MIN_DELTA_E:
                    color_moved = True
                    cluster_indices[i] = new_index

        if not color_moved and iteration != 0:
            break

        sums_l = [0.0] * cluster_count
        sums_a = [0.0] * cluster_count
        sums_b = [0.0] * cluster_count
        populations = [0] * cluster_count
        for index, point, count in zip(cluster_indices, points, counts):
            populations[index] += count
            sums_l[index] += point.l * count
            sums_a[index] += point.a * count
            sums_b[index] += point.b * count

        for i, count in enumerate(populations):
            if count == 0:
                clusters[i] = Lab(0.0, 0.0, 0.0)
            else:
                clusters[i] = Lab(sums_l[i] / count, sums_a[i] / count, sums_b[i] / count)

    swatches: dict[int, int] = {}
    cluster_argbs = []
    for cluster, count in zip(clusters[:cluster_count], populations):
        argb = int_from_lab(cluster)
        cluster_argbs.append(argb)
        if count == 0:
            continue
        swatches[argb] = swatches.get(argb, 0) + count

    color_to_count = dict(sorted(swatches.items()))
    pixel_to_cluster = dict(
        sorted((pixel, cluster_argbs[index]) for pixel, index in zip(pixels, cluster_indices))
    )
    return QuantizerResult(color_to_count, pixel_to_cluster)