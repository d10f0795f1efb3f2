from .errors import CanvasError, InvalidDimension, OutOfBounds, InvalidRange
from .mono_canvas import MonochromeCanvas, PixelColor
from .color_canvas import ColorCanvas, Color

__version__ = '0.1.0'
