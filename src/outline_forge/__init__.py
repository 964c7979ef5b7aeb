"""Outline Forge - outline ring geometry for UI inspection and tour overlays.

Outline Forge turns element geometry into drawable outline paths. It traces
a closed boundary out of an alpha mask and simplifies it into a compact
clip polygon, and it inflates rectangles with rounded corners or arbitrary
clip polygons by an outline's offset and width.

Example:
    $ outline-forge outline 20,40,120,80 --radius 30px --width 4 --offset 6

This prints the rounded outline path `M 50.00 32.00 H ...` together with
the resolved stroke metadata.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
