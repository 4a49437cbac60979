import pytest

from raymaze.image import Image


def test_new_image_is_black():
    image = Image(5, 4)
    assert all(image.get_pixel(x, y) == 0 for x in range(5) for y in range(4))
    assert len(image.data) == image.size_line * 4


def test_rows_are_padded_to_32_bits():
    assert Image(3, 1, bpp=24).size_line == 12
    assert Image(3, 1, bpp=32).size_line == 12
    image = Image(7, 2, bpp=8)
    assert image.size_line % 4 == 0
    assert image.size_line >= 7


def test_little_endian_layout():
    image = Image(2, 1, bpp=32, byte_order=0)
    image.put_pixel(0, 0, 0x112233)
    assert bytes(image.data[:4]) == b"\x33\x22\x11\x00"


def test_big_endian_layout():
    image = Image(2, 1, bpp=32, byte_order=1)
    image.put_pixel(1, 0, 0x112233)
    assert bytes(image.data[4:8]) == b"\x00\x11\x22\x33"


@pytest.mark.parametrize("byte_order", [0, 1])
def test_pixel_round_trip(byte_order):
    image = Image(4, 3, byte_order=byte_order)
    image.put_pixel(3, 2, 0xABCDEF)
    image.put_pixel(0, 1, 0x010203)
    assert image.get_pixel(3, 2) == 0xABCDEF
    assert image.get_pixel(0, 1) == 0x010203
    assert image.get_pixel(1, 1) == 0


def test_value_is_masked_to_pixel_size():
    image = Image(1, 1, bpp=32)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF
    small = Image(1, 1, bpp=16)
    small.put_pixel(0, 0, 0x123456)
    assert small.get_pixel(0, 0) == 0x3456


def test_colour_map_fill_round_trip():
    width = height = 42
    image = Image(width, height)
    expected = {}
    for y in range(height):
        for x in range(width):
            color = (x * 255) // width + ((((width - x) * 255) // width) << 16) + (((y * 255) // height) << 8)
            image.put_pixel(x, y, color)
            expected[x, y] = color
    assert all(image.get_pixel(x, y) == c for (x, y), c in expected.items())


def test_clear_resets_pixels():
    image = Image(3, 3)
    image.put_pixel(1, 1, 0xFFFFFF)
    size = len(image.data)
    image.clear()
    assert image.get_pixel(1, 1) == 0
    assert len(image.data) == size
    assert not any(image.data)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_range_pixel(x, y):
    image = Image(3, 2)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize(
    "args",
    [(0, 1), (1, 0), (2, 2, 12), (2, 2, 0), (2, 2, 32, 2)],
)
def test_invalid_construction(args):
    with pytest.raises(ValueError):
        Image(*args)