"""Theme value types and their textual representations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable

from materialquant.utils import rgb_hex_from_argb


class Variant(enum.Enum):
    """Style of a dynamic color scheme."""

    MONOCHROME = 0
    NEUTRAL = 1
    TONALSPOT = 2
    VIBRANT = 3
    EXPRESSIVE = 4
    FIDELITY = 5
    CONTENT = 6
    RAINBOW = 7
    FRUITSALAD = 8

    def __repr__(self) -> str:
        return variant_repr(self)


def argb_repr(argb: int) -> str:
    """Quoted '#rrggbb' form of an ARGB color."""
    return '"#' + rgb_hex_from_argb(argb) + '"'


def bool_repr(value: bool) -> str:
    """'True' or 'False'."""
    return "True" if value else "False"


def variant_repr(variant: Variant) -> str:
    """'Variant.NAME' form of a variant."""
    return "Variant." + variant.name


@dataclass(repr=False)
class CustomColor:
    """A named color to add to a theme, optionally harmonized with the source."""

    value: int = 0
    name: str = ""
    blend: bool = False

    def __repr__(self) -> str:
        return (
            f"CustomColor(value={argb_repr(self.value)}, name={self.name}, "
            f"blend={bool_repr(self.blend)})"
        )


@dataclass(repr=False)
class ColorGroup:
    """A color with its on-color, container and on-container roles."""

    color: int = 0
    on_color: int = 0
    color_container: int = 0
    on_color_container: int = 0

    def __repr__(self) -> str:
        return (
            f"ColorGroup(color={argb_repr(self.color)}, "
            f"on_color={argb_repr(self.on_color)}, "
            f"color_container={argb_repr(self.color_container)}, "
            f"on_color_container={argb_repr(self.on_color_container)})"
        )


@dataclass(repr=False)
class CustomColorGroup:
    """A custom color with its resolved value and light and dark color groups."""

    color: CustomColor = field(default_factory=CustomColor)
    value: int = 0
    light: ColorGroup = field(default_factory=ColorGroup)
    dark: ColorGroup = field(default_factory=ColorGroup)

    def __repr__(self) -> str:
        return (
            f"CustomColorGroup(color={self.color!r}, value={argb_repr(self.value)}, "
            f"light={self.light!r}, dark={self.dark!r})"
        )


def custom_colors_repr(groups: Iterable[CustomColorGroup]) -> str:
    """Bracketed list of custom color groups, each followed by ', '."""
    return "[" + "".join(f"{group!r}, " for group in groups) + "]"