"""Color math helpers: ARGB packing, linear RGB, L*, degrees and vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

PI = 3.141592653589793
WHITE_POINT_D65 = (95.047, 100.0, 108.883)

_MASK32 = 0xFFFFFFFF


@dataclass
class Vec3:
    """A vector with three floating-point components."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def red_from_int(argb: int) -> int:
    """Return the red component of an ARGB color."""
    return (argb & 0x00FF0000) >> 16


def green_from_int(argb: int) -> int:
    """Return the green component of an ARGB color."""
    return (argb & 0x0000FF00) >> 8


def blue_from_int(argb: int) -> int:
    """Return the blue component of an ARGB color."""
    return argb & 0x000000FF


def alpha_from_int(argb: int) -> int:
    """Return the alpha component of an ARGB color."""
    return (argb & 0xFF000000) >> 24


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """Pack RGB components into an opaque ARGB color."""
    return 0xFF000000 | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def argb_from_linrgb(linrgb: Vec3) -> int:
    """Convert linear RGB components (0..100) to an opaque ARGB color."""
    return argb_from_rgb(
        delinearized(linrgb.a), delinearized(linrgb.b), delinearized(linrgb.c)
    )


def is_opaque(argb: int) -> bool:
    """Return whether the color is fully opaque."""
    return alpha_from_int(argb) == 255


def sanitize_degrees_int(degrees: int) -> int:
    """Bring an integer angle into the range [0, 360)."""
    degrees = int(degrees)
    if degrees < 0:
        return int(math.fmod(degrees, 360)) + 360
    if degrees >= 360:
        return degrees % 360
    return degrees


def sanitize_degrees_double(degrees: float) -> float:
    """Bring a floating-point angle into the range [0.0, 360.0)."""
    if degrees < 0.0:
        return math.fmod(degrees, 360.0) + 360
    if degrees >= 360.0:
        return math.fmod(degrees, 360.0)
    return degrees


def diff_degrees(a: float, b: float) -> float:
    """Distance between two angles on a circle, in degrees."""
    return 180.0 - abs(abs(a - b) - 180.0)


def rotation_direction(start: float, end: float) -> float:
    """Sign of the shortest rotation from one angle to another; 1.0 on ties."""
    increasing_difference = sanitize_degrees_double(end - start)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def linearized(rgb_component: int) -> float:
    """Convert an sRGB channel (0..255) to linear RGB (0..100)."""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return math.pow((normalized + 0.055) / 1.055, 2.4) * 100.0


def delinearized(rgb_component: float) -> int:
    """Convert a linear RGB channel (0..100) to sRGB (0..255)."""
    normalized = rgb_component / 100
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return max(0, min(255, _round_half_away(value * 255.0)))


def y_from_lstar(lstar: float) -> float:
    """Convert L* to relative luminance Y."""
    if lstar > 8.0:
        cube_root = (lstar + 16.0) / 116.0
        return cube_root * cube_root * cube_root * 100.0
    return lstar / (24389.0 / 27.0) * 100.0


def lstar_from_y(y: float) -> float:
    """Convert relative luminance Y to L*."""
    y_normalized = y / 100.0
    if y_normalized <= 216.0 / 24389.0:
        return (24389.0 / 27.0) * y_normalized
    return 116.0 * math.pow(y_normalized, 1.0 / 3.0) - 16.0


def lstar_from_argb(argb: int) -> float:
    """Return the L* of an ARGB color."""
    y = (
        0.2126 * linearized(red_from_int(argb))
        + 0.7152 * linearized(green_from_int(argb))
        + 0.0722 * linearized(blue_from_int(argb))
    )
    return lstar_from_y(y)


def int_from_lstar(lstar: float) -> int:
    """Return the gray ARGB color with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


def hex_from_argb(argb: int) -> str:
    """Lowercase eight-digit hex of an ARGB color, e.g. 'ff012345'."""
    return f"{argb & _MASK32:08x}"


def rgb_hex_from_argb(argb: int) -> str:
    """Lowercase six-digit hex of the RGB part of a color, e.g. '012345'."""
    return f"{argb & 0x00FFFFFF:06x}"


def signum(num: float) -> int:
    """Return 1 if num > 0, -1 if num < 0 and 0 otherwise."""
    if num < 0:
        return -1
    if num == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation between start and stop."""
    return (1.0 - amount) * start + amount * stop


def matrix_multiply(vector: Vec3, matrix: Sequence[Sequence[float]]) -> Vec3:
    """Multiply a 3x3 matrix by a three-component vector."""
    x, y, z = vector.a, vector.b, vector.c
    rows = [row[0] * x + row[1] * y + row[2] * z for row in matrix]
    return Vec3(*rows)