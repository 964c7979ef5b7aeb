"""Materialized style records read from a rendered element.

The engine never inspects a live element. Whoever owns the element reads
its computed style and hands over these plain records.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ComputedStyle:
    """Computed visual style of an element, as raw CSS-like strings.

    Attributes:
        outline_style: e.g. "solid", "auto", "none"
        outline_width: e.g. "2px", "thin"
        outline_offset: e.g. "4px", "-2px"
        outline_color: e.g. "rgb(30, 60, 90)", "currentcolor"
        color: Foreground color, used for `currentcolor` outlines
        clip_path: e.g. "polygon(50% 0%, 100% 100%, 0% 100%)" or "none"
        border_top_left_radius: e.g. "12px" or "10% 20%"
        border_top_right_radius: Same syntax as top-left
        border_bottom_right_radius: Same syntax as top-left
        border_bottom_left_radius: Same syntax as top-left
    """

    outline_style: str | None = None
    outline_width: str | None = None
    outline_offset: str | None = None
    outline_color: str | None = None
    color: str | None = None
    clip_path: str | None = None
    border_top_left_radius: str | None = None
    border_top_right_radius: str | None = None
    border_bottom_right_radius: str | None = None
    border_bottom_left_radius: str | None = None

    @property
    def effective_clip_path(self) -> str | None:
        """Clip path text, or None when absent or `none`."""
        if not self.clip_path:
            return None
        clip = self.clip_path.strip()
        if not clip or clip.lower() == "none":
            return None
        return clip

    def border_radii(self) -> tuple[str | None, str | None, str | None, str | None]:
        """Border radius strings, clockwise from the top-left corner."""
        return (
            self.border_top_left_radius,
            self.border_top_right_radius,
            self.border_bottom_right_radius,
            self.border_bottom_left_radius,
        )


@dataclass(frozen=True)
class OutlineOverrides:
    """Per-element outline attributes that win over the computed style.

    A set width greater than zero switches the whole outline to these
    values; otherwise the overrides are ignored.
    """

    width: str | None = None
    offset: str | None = None
    color: str | None = None
    style: str | None = None
