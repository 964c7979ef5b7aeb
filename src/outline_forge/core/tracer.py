"""Moore-neighbour boundary tracing over a raster mask.

Only the first boundary found in row-major order is traced. A mask with
several disconnected foreground regions yields the outline of the region
containing the topmost, leftmost boundary cell.
"""

import logging

from outline_forge.domain import Point, RasterMask

logger = logging.getLogger(__name__)

# Clockwise on screen, starting east.
NEIGHBORS: tuple[tuple[int, int], ...] = (
    (1, 0),    # E
    (1, 1),    # SE
    (0, 1),    # S
    (-1, 1),   # SW
    (-1, 0),   # W
    (-1, -1),  # NW
    (0, -1),   # N
    (1, -1),   # NE
)

WEST = 4


def has_background_neighbor(mask: RasterMask, x: int, y: int) -> bool:
    """Check whether a foreground cell touches background or the mask edge."""
    if not mask.is_foreground(x, y):
        return False
    return any(not mask.is_foreground(x + dx, y + dy) for dx, dy in NEIGHBORS)


def find_boundary_start(mask: RasterMask) -> Point | None:
    """Find the first boundary cell in row-major order.

    Returns:
        Lattice point of the first foreground cell with a background
        8-neighbour, or None when the mask has no such cell
    """
    for y in range(mask.height):
        for x in range(mask.width):
            if has_background_neighbor(mask, x, y):
                return Point(x, y)
    return None


def trace_boundary(mask: RasterMask, max_iterations: int | None = None) -> list[Point]:
    """Trace the outer boundary of the first foreground region.

    The walk keeps a backtrack direction, initially west. At each cell it
    probes the eight neighbours clockwise starting just after the
    backtrack, steps to the first foreground one and sets the backtrack to
    the reverse of that step. It stops on returning to the start cell, at
    a dead end, or once the iteration cap is exceeded; the last two
    return whatever was collected so far.

    Args:
        mask: Mask to trace
        max_iterations: Step cap; defaults to 4 * width * height

    Returns:
        Visited lattice points in walk order, start not repeated at the
        end. Empty when the mask has no boundary cell.

    Examples:
        >>> mask = RasterMask.from_rows(["##", "##"])
        >>> [p.to_tuple() for p in trace_boundary(mask)]
        [(0, 0), (1, 0), (1, 1), (0, 1)]
    """
    start = find_boundary_start(mask)
    if start is None:
        return []

    if max_iterations is None:
        max_iterations = mask.width * mask.height * 4

    boundary: list[Point] = []
    x, y = int(start.x), int(start.y)
    backtrack = WEST
    iterations = 0

    while True:
        boundary.append(Point(x, y))
        for step in range(8):
            direction = (backtrack + 1 + step) % 8
            dx, dy = NEIGHBORS[direction]
            if mask.is_foreground(x + dx, y + dy):
                x, y = x + dx, y + dy
                backtrack = (direction + 4) % 8
                break
        else:
            logger.debug("Boundary trace hit a dead end at (%d, %d)", x, y)
            break

        iterations += 1
        if iterations > max_iterations:
            logger.warning(
                "Boundary tracing aborted after %d iterations on %dx%d mask",
                iterations,
                mask.width,
                mask.height,
            )
            break

        if x == start.x and y == start.y:
            break

    return boundary
