"""Path construction for rounded rectangles and polygons."""

from outline_forge.domain import (
    ArcTo,
    ClosePath,
    CornerRadii,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    Path,
    Point,
    Rect,
    VerticalLineTo,
)


def build_rounded_rect_path(rect: Rect, radii: CornerRadii) -> Path:
    """Build a clockwise rounded-rectangle path.

    The path starts where the top edge leaves the top-left arc and walks
    the edges clockwise, drawing each corner as a quarter ellipse. A
    corner with zero radius emits no arc, leaving a sharp corner.

    Radii are expected to be resolved already (see `resolve_corner_radii`).

    Args:
        rect: Outline box
        radii: Resolved corner radii

    Returns:
        Closed Path of line and arc commands
    """
    x, y, width, height = rect.x, rect.y, rect.width, rect.height
    tl, tr, br, bl = radii.corners()

    commands = [MoveTo(x + tl.x, y), HorizontalLineTo(x + width - tr.x)]
    if not tr.is_zero():
        commands.append(ArcTo(tr.x, tr.y, x + width, y + tr.y))
    commands.append(VerticalLineTo(y + height - br.y))
    if not br.is_zero():
        commands.append(ArcTo(br.x, br.y, x + width - br.x, y + height))
    commands.append(HorizontalLineTo(x + bl.x))
    if not bl.is_zero():
        commands.append(ArcTo(bl.x, bl.y, x, y + height - bl.y))
    commands.append(VerticalLineTo(y + tl.y))
    if not tl.is_zero():
        commands.append(ArcTo(tl.x, tl.y, x + tl.x, y))
    commands.append(ClosePath())
    return Path(commands)


def build_polygon_path(points: list[Point] | tuple[Point, ...]) -> Path:
    """Build a closed path through polygon vertices.

    Returns:
        Move to the first vertex, a line to each following vertex, then
        close; an empty Path for no vertices
    """
    if not points:
        return Path()
    first, *rest = points
    commands = [MoveTo(first.x, first.y)]
    commands.extend(LineTo(point.x, point.y) for point in rest)
    commands.append(ClosePath())
    return Path(commands)
