import numpy as np
import pytest

from drawing_canvas import (CanvasError, ColorCanvas, InvalidDimension,
                            InvalidRange, MonochromeCanvas, OutOfBounds)
from drawing_canvas.validation import check_bounds, check_height, check_width


def test_error_hierarchy():
    assert issubclass(InvalidDimension, CanvasError)
    assert issubclass(InvalidRange, CanvasError)
    assert issubclass(OutOfBounds, CanvasError)
    assert issubclass(OutOfBounds, IndexError)
    assert issubclass(CanvasError, ValueError)


@pytest.mark.parametrize('width', [31, 1025, 33, 0, -32, 2048])
def test_mono_rejects_width(width):
    with pytest.raises(InvalidDimension, match='divisible by 32'):
        MonochromeCanvas(width, 32)


@pytest.mark.parametrize('width', [31, 1025, 0])
def test_color_rejects_width(width):
    with pytest.raises(InvalidDimension,
                       match=r'Width should be in range \[32 \.\.\. 1024\]\.'):
        ColorCanvas(width, 32)


def test_color_accepts_width_not_divisible_by_32():
    c = ColorCanvas(33, 32)
    assert c.width == 33


@pytest.mark.parametrize('height', [16, 2000, 31, 1025])
def test_rejects_height(height):
    with pytest.raises(InvalidDimension, match='Invalid height!'):
        MonochromeCanvas(32, height)
    with pytest.raises(InvalidDimension, match='Invalid height!'):
        ColorCanvas(32, height)


def test_width_checked_before_height():
    with pytest.raises(InvalidDimension, match='Invalid width!'):
        ColorCanvas(16, 16)


@pytest.mark.parametrize('value', [32.0, '32', None, True])
def test_rejects_non_integer_dimensions(value):
    with pytest.raises(InvalidDimension):
        check_width(value)
    with pytest.raises(InvalidDimension):
        check_height(value)


def test_check_bounds_limits():
    check_bounds(0, 0, 32, 64)
    check_bounds(31, 63, 32, 64)
    with pytest.raises(OutOfBounds, match=r'Column should be in range \[0 \.\.\. 63\]'):
        check_bounds(0, 64, 32, 64)
    with pytest.raises(OutOfBounds, match=r'Row should be in range \[0 \.\.\. 31\]'):
        check_bounds(32, 0, 32, 64)


def test_check_bounds_reports_column_first():
    with pytest.raises(OutOfBounds, match='Invalid column!'):
        check_bounds(-1, -1, 32, 32)


def test_error_classes_are_documented():
    for cls in (CanvasError, InvalidDimension, OutOfBounds, InvalidRange):
        assert cls.__doc__


@pytest.mark.parametrize('width', [np.int64(64), np.int32(64), np.uint16(64)])
def test_accepts_numpy_integer_dimensions(width):
    mono = MonochromeCanvas(width, np.int64(32))
    color = ColorCanvas(width, np.int32(40))
    assert mono.width == 64 and type(mono.width) is int
    assert type(mono.height) is int
    assert color.width == 64 and color.height == 40
    assert mono.col_count == 2
    assert repr(color) == 'ColorCanvas(width=64, height=40)'


def test_numpy_dimensions_still_range_checked():
    with pytest.raises(InvalidDimension, match='Invalid width!'):
        MonochromeCanvas(np.int64(33), 32)
    with pytest.raises(InvalidDimension, match='Invalid height!'):
        ColorCanvas(32, np.int64(2000))


def test_check_bounds_returns_ints():
    row, col = check_bounds(np.int64(3), np.int32(7), 32, 32)
    assert (row, col) == (3, 7)
    assert type(row) is int and type(col) is int


@pytest.mark.parametrize('row, col, message', [
    (0, 0.5, 'Invalid column!'),
    (0, '1', 'Invalid column!'),
    (0, True, 'Invalid column!'),
    (1.0, 0, 'Invalid row!'),
    (None, 0, 'Invalid row!'),
])
def test_check_bounds_rejects_non_integer_coordinates(row, col, message):
    with pytest.raises(OutOfBounds, match=message):
        check_bounds(row, col, 32, 32)


def test_canvases_reject_non_integer_coordinates():
    mono = MonochromeCanvas(32, 32)
    color = ColorCanvas(32, 32)
    for c in (mono, color):
        with pytest.raises(OutOfBounds):
            c.get_pixel(0, 0.5)
        with pytest.raises(OutOfBounds):
            c.get_pixel(1.5, 0)
    with pytest.raises(OutOfBounds):
        mono.draw_horizontal_line(0, 0.5, 4, 0)
