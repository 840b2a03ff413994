from materialquant.utils import blue_from_int, green_from_int, is_opaque, red_from_int
from materialquant.wsmeans import QuantizerResult, _GlibcRandom, quantize_wsmeans

RED = 0xFFFF0000
BLUE = 0xFF0000FF


def _channels(argb):
    return red_from_int(argb), green_from_int(argb), blue_from_int(argb)


def test_empty_input_gives_empty_result():
    result = quantize_wsmeans([], [], 16)
    assert result == QuantizerResult()
    assert result.color_to_count == {}


def test_zero_max_colors_gives_empty_result():
    result = quantize_wsmeans([RED, BLUE], [], 0)
    assert result.input_pixel_to_cluster_pixel == {}


def test_random_generator_matches_c_library_sequence():
    rng = _GlibcRandom(1)
    assert rng.rand() == 1804289383


def test_single_color_forms_single_cluster():
    result = quantize_wsmeans([RED] * 5, [RED], 4)
    assert list(result.color_to_count.values()) == [5]
    (cluster,) = result.color_to_count
    assert all(
        abs(x - y) <= 1 for x, y in zip(_channels(cluster), _channels(RED))
    )
    assert result.input_pixel_to_cluster_pixel == {RED: cluster}


def test_two_colors_with_starting_clusters():
    pixels = [RED] * 3 + [BLUE] * 7
    result = quantize_wsmeans(pixels, [RED, BLUE], 2)
    assert sorted(result.color_to_count.values()) == [3, 7]
    mapping = result.input_pixel_to_cluster_pixel
    assert mapping[RED] != mapping[BLUE]
    assert result.color_to_count[mapping[RED]] == 3
    assert result.color_to_count[mapping[BLUE]] == 7


def test_invariants_without_starting_clusters():
    pixels = [0xFF000000 | (i * 2654435761 & 0xFFFFFF) for i in range(200)]
    pixels += pixels[:50]
    result = quantize_wsmeans(pixels, [], 8)
    assert sum(result.color_to_count.values()) == len(pixels)
    assert len(result.color_to_count) <= 8
    assert set(result.input_pixel_to_cluster_pixel) == set(pixels)
    assert set(result.input_pixel_to_cluster_pixel.values()) <= set(result.color_to_count)
    assert all(is_opaque(color) for color in result.color_to_count)


def test_keys_are_sorted():
    pixels = [0xFF000000 | (i * 40503 & 0xFFFFFF) for i in range(120)]
    result = quantize_wsmeans(pixels, [], 6)
    assert list(result.color_to_count) == sorted(result.color_to_count)
    mapping_keys = list(result.input_pixel_to_cluster_pixel)
    assert mapping_keys == sorted(mapping_keys)


def test_doubling_every_pixel_doubles_the_counts():
    pixels = [0xFF000000 | (i * 977 & 0xFFFFFF) for i in range(150)]
    base = quantize_wsmeans(pixels, [], 5)
    doubled = quantize_wsmeans(pixels * 2, [], 5)
    assert doubled.input_pixel_to_cluster_pixel == base.input_pixel_to_cluster_pixel
    assert doubled.color_to_count == {
        color: 2 * count for color, count in base.color_to_count.items()
    }


def test_max_colors_is_capped_at_256():
    pixels = [0xFF000000 | (i * 7919 & 0xFFFFFF) for i in range(60)]
    assert quantize_wsmeans(pixels, [], 300) == quantize_wsmeans(pixels, [], 256)


def test_cluster_count_limited_by_starting_clusters():
    pixels = [RED, BLUE, 0xFF00FF00, 0xFFFFFFFF]
    result = quantize_wsmeans(pixels, [RED], 4)
    assert len(result.color_to_count) == 1
    assert sum(result.color_to_count.values()) == 4