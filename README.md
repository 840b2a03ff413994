# materialquant

Pure-Python color utilities and palette extraction, with the value types
used to describe a color theme. No third-party dependencies.

## Installation

```
pip install materialquant
```

## Modules

- `materialquant.utils`: ARGB integer helpers (`argb_from_rgb`,
  `red_from_int`, `green_from_int`, `blue_from_int`, `alpha_from_int`,
  `is_opaque`), sRGB linearization (`linearized`, `delinearized`,
  `argb_from_linrgb` with the `Vec3` type), L* conversions
  (`lstar_from_argb`, `y_from_lstar`, `lstar_from_y`, `int_from_lstar`),
  hex formatting (`hex_from_argb` gives `"ff012345"`, `rgb_hex_from_argb`
  gives `"012345"`), angle helpers (`sanitize_degrees_int`,
  `sanitize_degrees_double`, `diff_degrees`, `rotation_direction`) and
  small math helpers (`signum`, `lerp`, `matrix_multiply`).
- `materialquant.hex_utils.argb_from_hex`: parses 3, 6 or 8 digit hex
  codes, with or without a leading `#`. For 8-digit codes the leading
  alpha pair is ignored; the result is always opaque. Any other length
  raises `ValueError`.
- `materialquant.lab`: the `Lab` dataclass with `delta_e` (squared
  distance), plus `lab_from_int` and `int_from_lab`.
- `materialquant.wu.quantize_wu(pixels, max_colors)`: Wu's
  variance-minimizing box-splitting quantizer. Returns a list of ARGB
  colors; an empty list when `max_colors` is outside 1..256 or there are
  no pixels.
- `materialquant.wsmeans.quantize_wsmeans(input_pixels, starting_clusters, max_colors)`:
  weighted k-means in L*a*b*, returning a `QuantizerResult`. With no
  starting clusters it starts from a fixed-seed random set, so results are
  repeatable.
- `materialquant.celebi.quantize_celebi(pixels, max_colors)`: drops
  non-opaque pixels, seeds k-means with Wu's result, and caps
  `max_colors` at 256.
- `materialquant.theme`: theme value types (`Variant`, `CustomColor`,
  `ColorGroup`, `CustomColorGroup`) whose `repr` prints colors as
  `"#rrggbb"`, and the helpers `argb_repr`, `bool_repr`, `variant_repr`
  and `custom_colors_repr`.

## Example

```python
from materialquant.hex_utils import argb_from_hex
from materialquant.utils import hex_from_argb
from materialquant.celebi import quantize_celebi

pixels = [argb_from_hex("#ff0000")] * 10 + [argb_from_hex("#0000ff")] * 5
result = quantize_celebi(pixels, 128)

for argb, count in result.color_to_count.items():
    print(hex_from_argb(argb), count)
```

`result.color_to_count` maps each cluster color to the number of pixels
it represents. `result.input_pixel_to_cluster_pixel` maps each distinct
input color to its cluster color.

## What it does not do

The package does not generate themes. It has no HCT color space, tonal
palettes or dynamic schemes, so it cannot turn a source color into light
and dark schemes or fill in a `ColorGroup` for you. It does not load or
decode images either: pass it ARGB integers you have read yourself. The
`theme` module only provides data types and their text forms.

## Running the tests

```
pip install materialquant[test]
pytest
```