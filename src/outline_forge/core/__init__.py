"""Core outline geometry algorithms.

This module contains the algorithms for:

- Raster pipeline (boundary tracing, simplification, clip polygon output)
- Corner radius resolution and rounded-rectangle paths
- Polygon offsetting
- Outline path resolution and spotlight masks

All functions are:
- Pure (no side effects beyond logging)
- Deterministic for the same input
- Lenient with degenerate input (empty results instead of exceptions)

Key functions:
- trace_boundary: Moore-neighbour tracing of the first mask boundary
- simplify_polyline: Iterative Douglas-Peucker simplification
- to_clip_polygon: Percentage `polygon(...)` formatting
- resolve_corner_radii: Scale radii so corner arcs never overlap
- build_rounded_rect_path: Rounded rectangle path
- offset_polygon: Miter-style polygon inflation
- resolve_outline_path: Outline path around element geometry

Key classes:
- ClipPathExtractor: Mask to clip polygon pipeline
- OutlinePathResolver: Outline path plus stroke metadata
- OutlineEngine: Configured facade with logging and statistics
"""

from outline_forge.core.engine import OutlineEngine
from outline_forge.core.extractor import ClipPathExtractor, ExtractionResult
from outline_forge.core.geometry import (
    edge_normal,
    line_intersection,
    remove_sequential_duplicates,
    signed_area,
    squared_segment_distance,
)
from outline_forge.core.normalizer import to_clip_polygon
from outline_forge.core.offset import offset_polygon
from outline_forge.core.parsing import (
    parse_clip_polygon,
    parse_corner_radius,
    parse_css_length,
    parse_length,
)
from outline_forge.core.path_builder import build_polygon_path, build_rounded_rect_path
from outline_forge.core.radii import resolve_corner_radii
from outline_forge.core.resolver import (
    OutlinePathResolver,
    resolve_element_geometry,
    resolve_outline_path,
)
from outline_forge.core.simplify import simplify_polyline
from outline_forge.core.stage import (
    resolve_spotlight_mask_path,
    resolve_stage_hole_path,
    resolve_viewport_path,
)
from outline_forge.core.style import resolve_outline_style, uses_element_geometry
from outline_forge.core.tracer import find_boundary_start, trace_boundary

__all__ = [
    # Raster pipeline
    "ClipPathExtractor",
    "ExtractionResult",
    "find_boundary_start",
    "simplify_polyline",
    "to_clip_polygon",
    "trace_boundary",
    # Rect and polygon pipeline
    "OutlinePathResolver",
    "build_polygon_path",
    "build_rounded_rect_path",
    "offset_polygon",
    "resolve_corner_radii",
    "resolve_element_geometry",
    "resolve_outline_path",
    # Styles and parsing
    "parse_clip_polygon",
    "parse_corner_radius",
    "parse_css_length",
    "parse_length",
    "resolve_outline_style",
    "uses_element_geometry",
    # Spotlight
    "resolve_spotlight_mask_path",
    "resolve_stage_hole_path",
    "resolve_viewport_path",
    # Facade
    "OutlineEngine",
    # Geometry functions
    "edge_normal",
    "line_intersection",
    "remove_sequential_duplicates",
    "signed_area",
    "squared_segment_distance",
]
