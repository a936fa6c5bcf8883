import numpy as np
import pytest
from bmpr import Canvas, Color, InvalidDimensionError

RED = Color(255, 0, 0)


def test_new_canvas_is_black():
    canvas = Canvas(4, 3)
    assert canvas.width == 4
    assert canvas.height == 3
    assert canvas.pixels.shape == (3, 4, 3)
    assert not canvas.pixels.any()


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 5), (5, -3), (2.5, 2), (True, 2)])
def test_invalid_dimensions_fail_fast(width, height):
    with pytest.raises(InvalidDimensionError):
        Canvas(width, height)


def test_invalid_dimension_is_value_error():
    with pytest.raises(ValueError):
        Canvas(0, 0)


def test_numpy_integer_dimensions():
    canvas = Canvas(np.int32(3), np.int64(2))
    assert (canvas.width, canvas.height) == (3, 2)


def test_set_then_get_for_every_pixel(gradient):
    canvas = gradient(5, 4)
    for y in range(4):
        for x in range(5):
            assert canvas.get(x, y) == Color(x * 10, y * 10, 7)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2), (100, 100)])
def test_unchecked_access_out_of_bounds_raises(x, y):
    canvas = Canvas(3, 2)
    with pytest.raises(IndexError):
        canvas.set(x, y, RED)
    with pytest.raises(IndexError):
        canvas.get(x, y)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2), (-50, 80)])
def test_set_safe_outside_is_noop(gradient, x, y):
    canvas = gradient(3, 2)
    before = canvas.to_bytes()
    canvas.set_safe(x, y, RED)
    assert canvas.to_bytes() == before


def test_set_safe_inside_writes():
    canvas = Canvas(3, 2)
    canvas.set_safe(2, 1, RED)
    assert canvas.get(2, 1) == RED


def test_clear():
    canvas = Canvas(3, 3)
    canvas.clear(Color.gray(9))
    assert (canvas.pixels == 9).all()


def test_invert():
    canvas = Canvas(2, 1)
    canvas.set(0, 0, Color(10, 20, 30))
    canvas.invert()
    assert canvas.get(0, 0) == Color(245, 235, 225)
    assert canvas.get(1, 0) == Color(255, 255, 255)


def test_invert_is_self_inverse(gradient):
    canvas = gradient(4, 3)
    original = canvas.to_bytes()
    canvas.invert()
    canvas.invert()
    assert canvas.to_bytes() == original


def test_rotate180_moves_pixels(gradient):
    canvas = gradient(3, 2)
    reference = gradient(3, 2)
    canvas.rotate180()
    for y in range(2):
        for x in range(3):
            assert canvas.get(x, y) == reference.get(2 - x, 1 - y)


def test_rotate180_is_self_inverse(gradient):
    canvas = gradient(5, 3)
    canvas.rotate180()
    canvas.rotate180()
    assert canvas == gradient(5, 3)


def test_flip_horizontal_keeps_middle_column(gradient):
    canvas = gradient(5, 2)
    reference = gradient(5, 2)
    canvas.flip_horizontal()
    for y in range(2):
        assert canvas.get(2, y) == reference.get(2, y)
        assert canvas.get(0, y) == reference.get(4, y)
        assert canvas.get(1, y) == reference.get(3, y)


@pytest.mark.parametrize("width", [1, 2, 3, 4, 7])
def test_flip_horizontal_twice_restores(gradient, width):
    canvas = gradient(width, 3)
    canvas.flip_horizontal()
    canvas.flip_horizontal()
    assert canvas == gradient(width, 3)


def test_flip_vertical(gradient):
    canvas = gradient(2, 3)
    reference = gradient(2, 3)
    canvas.flip_vertical()
    for x in range(2):
        assert canvas.get(x, 0) == reference.get(x, 2)
        assert canvas.get(x, 1) == reference.get(x, 1)
        assert canvas.get(x, 2) == reference.get(x, 0)


@pytest.mark.parametrize("height", [1, 2, 5])
def test_flip_vertical_twice_restores(gradient, height):
    canvas = gradient(3, height)
    canvas.flip_vertical()
    canvas.flip_vertical()
    assert canvas == gradient(3, height)


def test_pixels_view_is_read_only():
    canvas = Canvas(2, 2)
    with pytest.raises(ValueError):
        canvas.pixels[0, 0] = (1, 2, 3)


def test_to_bytes_is_row_major_rgb():
    canvas = Canvas(2, 2)
    canvas.set(1, 0, Color(1, 2, 3))
    data = canvas.to_bytes()
    assert len(data) == 2 * 2 * 3
    assert data[3:6] == bytes([1, 2, 3])


def test_equality():
    assert Canvas(2, 2) == Canvas(2, 2)
    assert Canvas(2, 2) != Canvas(2, 3)
    other = Canvas(2, 2)
    other.set(0, 0, RED)
    assert Canvas(2, 2) != other


def test_pixels_snapshot_does_not_alias_canvas():
    canvas = Canvas(2, 2)
    snapshot = canvas.pixels
    snapshot.flags.writeable = True
    snapshot[0, 0] = (9, 9, 9)
    assert canvas.get(0, 0) == Color()


def test_set_then_get_with_numpy_channels():
    canvas = Canvas(1, 1)
    color = Color(np.uint8(1), np.int64(2), 3)
    canvas.set(0, 0, color)
    assert canvas.get(0, 0) == color
