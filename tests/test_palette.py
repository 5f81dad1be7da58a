import pytest

from deskx import palette


@pytest.mark.parametrize(
    "color, index",
    [(0x000000, 0x00), (0x800000, 0x01), (0xC0C0C0, 0x07), (0x0000FF, 0x0C), (0x808080, 0x08)],
)
def test_to8_known_colors(color, index):
    assert palette.to8(color) == index


@pytest.mark.parametrize(
    "index, color",
    [(0x10, 0x000000), (0x15, 0x0000FF), (0x7C, 0xAF0000), (0xE7, 0xFFFFFF), (0xF1, 0x606060), (0xFF, 0xEEEEEE)],
)
def test_to24_known_indices(index, color):
    assert palette.to24(index) == color


def test_every_index_maps_back_to_its_color():
    for index in range(256):
        color = palette.to24(index)
        first = palette.to8(color)
        assert first <= index
        assert palette.to24(first) == color


def test_unknown_color():
    assert palette.to8(0x123456) is None


@pytest.mark.parametrize("index", [-1, 256])
def test_to24_out_of_range(index):
    with pytest.raises(ValueError):
        palette.to24(index)