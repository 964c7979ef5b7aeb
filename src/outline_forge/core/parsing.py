"""Parsers for CSS-like geometry and length strings.

Every parser is lenient: malformed tokens coerce to 0 and unusable
descriptions yield None, so callers can always fall back to plain
rectangle geometry.
"""

import math
import re

from outline_forge.domain import CornerRadius, Point, Rect

NUMBER_RE = re.compile(r"-?\d*\.?\d+")
LEADING_NUMBER_RE = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
POLYGON_RE = re.compile(r"polygon\((.+)\)", re.IGNORECASE)
FILL_RULE_RE = re.compile(r"^(?:nonzero|evenodd)", re.IGNORECASE)

KEYWORD_LENGTHS: dict[str, float] = {
    "thin": 1.0,
    "medium": 3.0,
    "thick": 5.0,
}


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def parse_length(token: str | None, relative: float) -> float:
    """Parse a length token.

    A `%` suffix makes the value a percentage of `relative`, which must
    lead the token; any other token contributes its first number and
    ignores the unit.

    Examples:
        >>> parse_length("50%", 80)
        40.0
        >>> parse_length("12px", 80)
        12.0
        >>> parse_length("calc(10px + 50%)", 80)
        0.0
    """
    if not token:
        return 0.0
    trimmed = token.strip()
    if not trimmed:
        return 0.0

    if trimmed.endswith("%"):
        match = LEADING_NUMBER_RE.match(trimmed)
        if not match:
            return 0.0
        return _finite(float(match.group(0)) / 100 * relative)

    match = NUMBER_RE.search(trimmed)
    if not match:
        return 0.0
    return _finite(float(match.group(0)))


def parse_corner_radius(text: str | None, width: float, height: float) -> CornerRadius | None:
    """Parse a `"<horizontal> [<vertical>]"` corner radius.

    The vertical radius defaults to the horizontal one. Percentages refer
    to the box width and height respectively; negative values clamp to 0.

    Returns:
        CornerRadius, or None when the text holds no number
    """
    if not text or not NUMBER_RE.search(text):
        return None
    parts = text.split()
    horizontal = parse_length(parts[0], width)
    vertical = parse_length(parts[1] if len(parts) > 1 else parts[0], height)
    return CornerRadius(horizontal, vertical)


def parse_clip_polygon(text: str | None, rect: Rect) -> list[Point] | None:
    """Parse a `polygon(...)` clip description into screen points.

    A leading `nonzero` or `evenodd` fill rule is skipped. Each vertex is
    two lengths; percentages refer to the rect width and height, and the
    rect origin is added. Vertices missing a coordinate are skipped.

    Returns:
        Points in screen coordinates, or None when fewer than 3 remain

    Examples:
        >>> parse_clip_polygon("polygon(50% 0%, 100% 100%, 0% 100%)", Rect(50, 75, 80, 80))
        [Point(x=90.0, y=75.0), Point(x=130.0, y=155.0), Point(x=50.0, y=155.0)]
    """
    if not text:
        return None
    match = POLYGON_RE.search(text)
    if not match:
        return None
    content = match.group(1).strip()
    if not content:
        return None

    if FILL_RULE_RE.match(content):
        comma = content.find(",")
        if comma == -1:
            return None
        content = content[comma + 1 :].strip()

    points: list[Point] = []
    for raw in content.split(","):
        coords = raw.split()
        if len(coords) < 2:
            continue
        x = rect.x + parse_length(coords[0], rect.width)
        y = rect.y + parse_length(coords[1], rect.height)
        points.append(Point(x, y))

    return points if len(points) >= 3 else None


def parse_css_length(raw: str | None) -> float:
    """Parse an absolute CSS length such as an outline width.

    Takes the leading number, ignoring units, or one of the keywords
    thin, medium and thick. Anything else is 0.

    Examples:
        >>> parse_css_length("4px")
        4.0
        >>> parse_css_length("medium")
        3.0
    """
    if not raw:
        return 0.0
    match = LEADING_NUMBER_RE.match(raw)
    if match:
        return _finite(float(match.group(0)))
    return KEYWORD_LENGTHS.get(raw.strip().lower(), 0.0)


def has_positive_length(text: str | None) -> bool:
    """Check whether any number in the text is greater than zero."""
    if not text:
        return False
    return any(float(value) > 0 for value in NUMBER_RE.findall(text))
