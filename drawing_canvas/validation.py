import operator

from .errors import InvalidDimension, OutOfBounds

MIN_DIMENSION = 32
MAX_DIMENSION = 1024
WORD_BITS = 32
BYTES_PER_PIXEL = 3


def _as_int(value):
    """VALUE as a plain int, or None when it is not an integer (bools included)."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def check_width(width, word_bits=None):
    """
    Validate a canvas width and return it as an int. When WORD_BITS is given
    the width must also pack into whole words.
    """
    value = _as_int(width)
    valid = value is not None and MIN_DIMENSION <= value <= MAX_DIMENSION
    if word_bits is not None:
        valid = valid and value % word_bits == 0
        if not valid:
            raise InvalidDimension(
                f'Invalid width! Width should be in range '
                f'[{MIN_DIMENSION} ... {MAX_DIMENSION}] and should be '
                f'divisible by {word_bits}.')
    if not valid:
        raise InvalidDimension(
            f'Invalid width! Width should be in range '
            f'[{MIN_DIMENSION} ... {MAX_DIMENSION}].')
    return value


def check_height(height):
    value = _as_int(height)
    if value is None or not MIN_DIMENSION <= value <= MAX_DIMENSION:
        raise InvalidDimension(
            f'Invalid height! Height should be in range '
            f'[{MIN_DIMENSION} ... {MAX_DIMENSION}].')
    return value


def check_bounds(row, col, height, width):
    """Return (row, col) as ints, or raise OutOfBounds."""
    max_col = width - 1
    col = _as_int(col)
    if col is None or col < 0 or col > max_col:
        raise OutOfBounds(
            f'Invalid column! Column should be in range [0 ... {max_col}].')
    max_row = height - 1
    row = _as_int(row)
    if row is None or row < 0 or row > max_row:
        raise OutOfBounds(
            f'Invalid row! Row should be in range [0 ... {max_row}].')
    return row, col
