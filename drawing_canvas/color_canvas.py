import string
from dataclasses import dataclass

import numpy as np

from .rasterizer import plot_line, truncated_midpoint
from .validation import (BYTES_PER_PIXEL, check_bounds, check_height,
                         check_width)


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(
                    f'Channel {name} should be in range [0 ... 255], '
                    f'got {value}.')

    @classmethod
    def from_hex(cls, hex_str):
        """Parse '#RRGGBB' or 'RRGGBB' (case-insensitive)."""
        val = str(hex_str).strip()
        if val.startswith('#'):
            val = val[1:]
        if len(val) != 6 or any(ch not in string.hexdigits for ch in val):
            raise ValueError(f'Invalid hex color: {hex_str!r}')
        return cls(int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16))

    def inverted(self):
        return Color(255 - self.r, 255 - self.g, 255 - self.b)

    def to_hex(self):
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)


class ColorCanvas:
    """
    24-bit canvas storing each row as WIDTH * 3 bytes, column C at
    bytes [3C, 3C + 1, 3C + 2] in R, G, B order.

    Horizontal and vertical lines stop before their end coordinate and do
    no upfront checks: a line running off the canvas paints its in-range
    part and then raises OutOfBounds from set_pixel.
    """
    BYTES_PER_PIXEL = BYTES_PER_PIXEL
    BACKGROUND = 0xFF

    def __init__(self, width, height):
        width = check_width(width)
        height = check_height(height)
        self._width = width
        self._height = height
        self.pixels = np.zeros((height, width * self.BYTES_PER_PIXEL),
                               dtype=np.uint8)
        self.fill_all()

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def fill_all(self):
        """Reset every channel of every pixel to 0xFF (white)."""
        self.pixels[:] = self.BACKGROUND

    def invert_all(self):
        np.invert(self.pixels, out=self.pixels)

    def get_pixel(self, row, col):
        row, col = self._check_bounds(row, col)
        idx = col * self.BYTES_PER_PIXEL
        red, green, blue = self.pixels[row, idx:idx + self.BYTES_PER_PIXEL]
        return Color(int(red), int(green), int(blue))

    def set_pixel(self, row, col, color):
        row, col = self._check_bounds(row, col)
        idx = col * self.BYTES_PER_PIXEL
        self.pixels[row, idx] = color.r
        self.pixels[row, idx + 1] = color.g
        self.pixels[row, idx + 2] = color.b

    def draw_horizontal_line(self, row, start_col, end_col, color):
        for col in range(start_col, end_col):
            self.set_pixel(row, col, color)

    def draw_vertical_line(self, col, start_row, end_row, color):
        for row in range(start_row, end_row):
            self.set_pixel(row, col, color)

    def draw_diagonal_line(self, start_col, start_row, end_col, end_row,
                           color):
        plot_line(lambda x, y: self.set_pixel(y, x, color),
                  start_col, start_row, end_col, end_row)

    def draw_rectangle(self, start_row, start_col, end_row, end_col, color):
        self.draw_horizontal_line(start_row, start_col, end_col, color)
        self.draw_horizontal_line(end_row, start_col, end_col, color)
        self.draw_vertical_line(start_col, start_row, end_row, color)
        self.draw_vertical_line(end_col, start_row, end_row, color)

    def draw_triangle(self, start_row, start_col, end_row, end_col, color):
        # apex at the bottom middle, base along start_row
        mid_col = truncated_midpoint(start_col, end_col)

        self.draw_diagonal_line(start_col, start_row, mid_col, end_row, color)
        self.draw_diagonal_line(mid_col, end_row, end_col, start_row, color)
        self.draw_diagonal_line(end_col, start_row, start_col, start_row,
                                color)

    def duplicate(self):
        clone = ColorCanvas(self.width, self.height)
        np.copyto(clone.pixels, self.pixels)
        return clone

    def __copy__(self):
        return self.duplicate()

    def __deepcopy__(self, memo):
        return self.duplicate()

    def to_array(self):
        """Return a (height, width, 3) uint8 RGB image."""
        return self.pixels.reshape(
            (self.height, self.width, self.BYTES_PER_PIXEL)).copy()

    def _check_bounds(self, row, col):
        return check_bounds(row, col, self.height, self.width)

    def __eq__(self, other):
        if not isinstance(other, ColorCanvas):
            return NotImplemented
        return self.pixels.shape == other.pixels.shape\
            and np.array_equal(self.pixels, other.pixels)

    __hash__ = None

    def __repr__(self):
        return f'ColorCanvas(width={self.width}, height={self.height})'


if __name__ == '__main__':
    c = ColorCanvas(32, 32)
    c.draw_triangle(2, 2, 29, 29, RED)
    c.draw_diagonal_line(0, 31, 31, 0, BLUE)
    symbols = {WHITE: '.', RED: 'r', BLUE: 'b'}
    for row in range(c.height):
        print(''.join(symbols.get(c.get_pixel(row, col), '?')
                      for col in range(c.width)))
