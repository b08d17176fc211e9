"""Four-connected flood fill on ARGB images."""


def flood_fill(image, seed, old_color, new_color):
    """Repaint the region of `old_color` reachable from `seed` with `new_color`.

    Returns the number of pixels repainted.
    """
    if old_color == new_color:
        raise ValueError("old and new colours must differ")
    height, width = image.shape
    stack = [(seed[0], seed[1])]
    filled = 0
    while stack:
        x, y = stack.pop()
        if not (0 <= x < width and 0 <= y < height):
            continue
        if image[y, x] != old_color:
            continue
        image[y, x] = new_color
        filled += 1
        stack.extend(((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)))
    return filled