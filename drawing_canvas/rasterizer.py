"""
Integer-only line plotting.

PLOT is any callable taking (x, y); ColorCanvas passes a closure around its
own set_pixel so bounds are enforced per pixel as the line is drawn.
"""


def plot_line(plot, x0, y0, x1, y1):
    """
    Bresenham line from (x0, y0) to (x1, y1), both ends included.
    Steps along whichever axis changes more, always in increasing order, so
    swapping the endpoints visits the same pixels.
    """
    if abs(y1 - y0) <= abs(x1 - x0):
        if x0 > x1:
            _plot_line_low(plot, x1, y1, x0, y0)
        else:
            _plot_line_low(plot, x0, y0, x1, y1)
    else:
        if y0 > y1:
            _plot_line_high(plot, x1, y1, x0, y0)
        else:
            _plot_line_high(plot, x0, y0, x1, y1)


def _plot_line_low(plot, x0, y0, x1, y1):
    dx = x1 - x0
    dy = y1 - y0
    yi = 1
    if dy < 0:
        yi = -1
        dy = -dy
    D = 2 * dy - dx
    y = y0

    for x in range(x0, x1 + 1):
        plot(x, y)
        if D > 0:
            y += yi
            D -= 2 * dx
        D += 2 * dy


def _plot_line_high(plot, x0, y0, x1, y1):
    dx = x1 - x0
    dy = y1 - y0
    xi = 1
    if dx < 0:
        xi = -1
        dx = -dx
    D = 2 * dx - dy
    x = x0

    for y in range(y0, y1 + 1):
        plot(x, y)
        if D > 0:
            x += xi
            D -= 2 * dy
        D += 2 * dx


def truncated_midpoint(a, b):
    """Integer midpoint of A and B, rounded toward zero."""
    total = a + b
    if total < 0:
        return -(-total // 2)
    return total // 2
