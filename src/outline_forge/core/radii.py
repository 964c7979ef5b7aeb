"""Corner radius resolution for rounded rectangles."""

from outline_forge.domain import CornerRadii, Rect


def _local_scale(dimension: float, total: float) -> float:
    return dimension / total if total > dimension else 1.0


def radii_scale_factor(rect: Rect, radii: CornerRadii) -> float:
    """Uniform factor that keeps adjacent corner arcs from overlapping.

    Each side's two adjacent radii must fit within that side: the top and
    bottom horizontal radii within the width, the left and right vertical
    radii within the height. The tightest side wins.

    Returns:
        Factor in (0, 1]; 1.0 when the radii already fit
    """
    tl, tr, br, bl = radii.corners()
    return min(
        1.0,
        _local_scale(rect.width, tl.x + tr.x),
        _local_scale(rect.width, bl.x + br.x),
        _local_scale(rect.height, tl.y + bl.y),
        _local_scale(rect.height, tr.y + br.y),
    )


def resolve_corner_radii(rect: Rect, radii: CornerRadii) -> CornerRadii:
    """Scale corner radii so no two adjacent arcs overlap.

    All eight components are scaled by one factor, preserving the ratio
    between corners. Radii that already fit are returned unchanged.

    Args:
        rect: Box the radii belong to
        radii: Requested radii, already inflated by any outline margin

    Returns:
        New CornerRadii; all zero when the rect has no area

    Examples:
        >>> resolve_corner_radii(Rect(0, 0, 100, 50), CornerRadii.uniform(40)).top_left
        CornerRadius(x=25.0, y=25.0)
    """
    if rect.width <= 0 or rect.height <= 0:
        return CornerRadii()

    factor = radii_scale_factor(rect, radii)
    if factor < 1:
        return radii.scaled(factor)
    return radii
