"""Outline style resolution from materialized style records."""

from outline_forge.config import OutlineConfig
from outline_forge.core.parsing import has_positive_length, parse_css_length
from outline_forge.domain import ComputedStyle, OutlineOverrides, OutlineSpec, OutlineStyle

INHERITED_COLORS = ("invert", "currentcolor")


def _resolve_overrides(overrides: OutlineOverrides, fallback_color: str) -> OutlineSpec | None:
    width = parse_css_length(overrides.width)
    if width <= 0:
        return None
    return OutlineSpec(
        width=width,
        offset=parse_css_length(overrides.offset),
        color=overrides.color or fallback_color,
        style=OutlineStyle.parse(overrides.style),
    )


def resolve_outline_style(
    style: ComputedStyle,
    overrides: OutlineOverrides | None = None,
    config: OutlineConfig | None = None,
) -> OutlineSpec | None:
    """Work out how an element's outline is drawn.

    Overrides with a positive width take precedence over the computed
    style. From the computed style, `auto` counts as solid, while a missing
    or `none` style or a non-positive width means no outline. Colors
    `invert` and `currentcolor` fall back to the element's text color.

    Args:
        style: Computed style record of the element
        overrides: Optional per-element outline attributes
        config: Outline settings (fallback color)

    Returns:
        OutlineSpec, or None when nothing should be drawn
    """
    config = config or OutlineConfig()

    if overrides is not None:
        resolved = _resolve_overrides(overrides, config.fallback_color)
        if resolved is not None:
            return resolved

    outline_style = OutlineStyle.parse(style.outline_style, default=OutlineStyle.NONE)
    if outline_style is OutlineStyle.NONE:
        return None

    width = parse_css_length(style.outline_width)
    if width <= 0:
        return None

    color = style.outline_color or config.fallback_color
    if color.strip().lower() in INHERITED_COLORS:
        color = style.color or config.fallback_color

    return OutlineSpec(
        width=width,
        offset=parse_css_length(style.outline_offset),
        color=color,
        style=outline_style,
    )


def uses_element_geometry(style: ComputedStyle) -> bool:
    """Check whether the element's own shape differs from its box.

    True when the element has a clip path or any rounded corner.
    """
    if style.effective_clip_path is not None:
        return True
    return any(has_positive_length(radius) for radius in style.border_radii())
