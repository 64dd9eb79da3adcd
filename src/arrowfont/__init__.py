"""Arrowfont - Stroke outlines for arrow and chevron glyphs.

Arrowfont computes closed polygon outlines for stroked glyph shapes. Its core
is the chevron outliner: a ">" centerline of two segments meeting at a tip is
thickened into a single 6-point polygon with butt caps at the open ends and
a mitered join at the tip.

Example:
    $ arrowfont outline --size 300 --angle 45 --width 75

This prints the six outline points of a 45 degree chevron stroked at 75 units.
"""

__version__ = "0.1.0"
__author__ = "Arrowfont Contributors"

__all__ = ["__author__", "__version__"]
