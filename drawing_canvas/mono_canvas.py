from enum import IntEnum

import numpy as np

from .errors import InvalidRange
from .validation import (WORD_BITS, check_bounds, check_height,
                         check_width)


class PixelColor(IntEnum):
    BLACK = 0
    WHITE = 1

    def inverted(self):
        return PixelColor.BLACK if self is PixelColor.WHITE\
            else PixelColor.WHITE


class MonochromeCanvas:
    """
    Two-color canvas packing one pixel per bit into rows of 32-bit words.
    Bit B of word W in a row is column W * 32 + B; a set bit is white.
    """
    WORD_BITS = WORD_BITS
    WORD_MASK = (1 << WORD_BITS) - 1

    def __init__(self, width, height):
        width = check_width(width, self.WORD_BITS)
        height = check_height(height)
        self._width = width
        self._height = height
        self.pixels = np.zeros((height, width // self.WORD_BITS),
                               dtype=np.uint32)
        self.fill_all(PixelColor.WHITE)

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def row_count(self):
        return self.pixels.shape[0]

    @property
    def col_count(self):
        """Number of words per row."""
        return self.pixels.shape[1]

    def fill_all(self, color):
        color = PixelColor(color)
        mask = 0 if color is PixelColor.BLACK else self.WORD_MASK
        self.pixels[:] = mask

    def invert_all(self):
        np.invert(self.pixels, out=self.pixels)

    def get_pixel(self, row, col):
        row, col = self._check_bounds(row, col)
        word_idx, bit_idx = divmod(col, self.WORD_BITS)
        bit_value = (int(self.pixels[row, word_idx]) >> bit_idx) & 1
        return PixelColor.WHITE if bit_value == 1 else PixelColor.BLACK

    def set_pixel(self, row, col, color):
        row, col = self._check_bounds(row, col)
        word_idx, bit_idx = divmod(col, self.WORD_BITS)
        mask = 1 << bit_idx
        if PixelColor(color) is PixelColor.WHITE:
            self.pixels[row, word_idx] |= np.uint32(mask)
        else:
            self.pixels[row, word_idx] &= np.uint32(~mask & self.WORD_MASK)

    def draw_horizontal_line(self, row, start_col, end_col, color):
        self._check_bounds(row, start_col)
        self._check_bounds(row, end_col)
        if start_col > end_col:
            raise InvalidRange(
                'start_col should be less than or equal to end_col.')

        for col in range(start_col, end_col + 1):
            self.set_pixel(row, col, color)

    def draw_vertical_line(self, col, start_row, end_row, color):
        self._check_bounds(start_row, col)
        self._check_bounds(end_row, col)
        if start_row > end_row:
            raise InvalidRange(
                'start_row should be less than or equal to end_row.')

        for row in range(start_row, end_row + 1):
            self.set_pixel(row, col, color)

    def draw_rectangle(self, start_row, start_col, end_row, end_col, color):
        self._check_bounds(start_row, start_col)
        self._check_bounds(end_row, end_col)
        if start_row > end_row:
            raise InvalidRange(
                'start_row should be less than or equal to end_row.')
        if start_col > end_col:
            raise InvalidRange(
                'start_col should be less than or equal to end_col.')

        self.draw_horizontal_line(start_row, start_col, end_col, color)
        self.draw_horizontal_line(end_row, start_col, end_col, color)
        self.draw_vertical_line(start_col, start_row, end_row, color)
        self.draw_vertical_line(end_col, start_row, end_row, color)

    def duplicate(self):
        clone = MonochromeCanvas(self.width, self.height)
        np.copyto(clone.pixels, self.pixels)
        return clone

    def __copy__(self):
        return self.duplicate()

    def __deepcopy__(self, memo):
        return self.duplicate()

    def to_array(self):
        """
        Unpack the words into a (height, width) uint8 image,
        255 for white and 0 for black.
        """
        shifts = np.arange(self.WORD_BITS, dtype=np.uint32)
        bits = (self.pixels[:, :, np.newaxis] >> shifts) & np.uint32(1)
        return (bits.reshape((self.height, self.width)) * 255)\
            .astype(np.uint8)

    def _check_bounds(self, row, col):
        return check_bounds(row, col, self.height, self.width)

    def __eq__(self, other):
        if not isinstance(other, MonochromeCanvas):
            return NotImplemented
        return self.pixels.shape == other.pixels.shape\
            and np.array_equal(self.pixels, other.pixels)

    __hash__ = None

    def __repr__(self):
        return f'MonochromeCanvas(width={self.width}, height={self.height})'


if __name__ == '__main__':
    c = MonochromeCanvas(32, 32)
    c.draw_rectangle(4, 4, 27, 27, PixelColor.BLACK)
    c.draw_rectangle(10, 10, 21, 21, PixelColor.BLACK)
    for line in c.to_array():
        print(''.join('.' if px else '#' for px in line))
