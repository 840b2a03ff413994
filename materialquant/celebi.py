"""Image quantization: Wu's quantizer seeding weighted k-means."""

from __future__ import annotations

from typing import Sequence

from materialquant.utils import is_opaque
from materialquant.wsmeans import QuantizerResult, quantize_wsmeans
from materialquant.wu import quantize_wu

_MAX_COLORS = 256


def quantize_celebi(pixels: Sequence[int], max_colors: int) -> QuantizerResult:
    """Quantize ARGB pixels to at most ``max_colors`` colors.

    Transparent pixels are ignored. Wu's quantizer picks the starting clusters
    that weighted k-means then refines. ``max_colors`` above 256 is capped.
    """
    if max_colors <= 0 or not pixels:
        return QuantizerResult()
    max_colors = min(max_colors, _MAX_COLORS)

    opaque_pixels = [pixel for pixel in pixels if is_opaque(pixel)]
    starting_clusters = quantize_wu(opaque_pixels, max_colors)
    return quantize_wsmeans(opaque_pixels, starting_clusters, max_colors)