"""SVG web optimizer: recolor, de-bloat and minify SVG icons for inline embedding."""

__version__ = "0.1.0"
