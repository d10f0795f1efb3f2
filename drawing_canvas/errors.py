class CanvasError(ValueError):
    """Base class for every canvas failure."""


class InvalidDimension(CanvasError):
    """Raised when a canvas is constructed with an unsupported width or height."""


class OutOfBounds(CanvasError, IndexError):
    """Raised when a row or column falls outside the canvas."""


class InvalidRange(CanvasError):
    """Raised when a line or rectangle is given a start past its end."""
