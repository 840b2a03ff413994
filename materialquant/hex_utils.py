"""Parsing of hex color codes."""

from __future__ import annotations

_HEX_DIGITS = "0123456789abcdefABCDEF"


def _parse_int_hex(value: str) -> int:
    """Parse the leading hexadecimal number of a string; 0 if there is none."""
    text = value.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if ch not in _HEX_DIGITS:
            break
        digits += ch
    if not digits:
        return 0
    return sign * int(digits, 16)


def argb_from_hex(hex_code: str) -> int:
    """Convert a 3, 6 or 8 digit hex code, with or without '#', to opaque ARGB.

    An 8-digit code's leading alpha pair is ignored; the result is always opaque.
    """
    code = hex_code[1:] if hex_code.startswith("#") else hex_code

    if len(code) == 3:
        parts = [ch * 2 for ch in code]
    elif len(code) == 6:
        parts = [code[0:2], code[2:4], code[4:6]]
    elif len(code) == 8:
        parts = [code[2:4], code[4:6], code[6:8]]
    else:
        raise ValueError(f"Unexpected hex {code}")

    r, g, b = (_parse_int_hex(part) & 0xFF for part in parts)
    return (0xFF << 24) | (r << 16) | (g << 8) | b