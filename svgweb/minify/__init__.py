"""SVG minification: scour engine and web-embedding adapter."""

from svgweb.minify.base import Minifier, minify
from svgweb.minify.engine import ScourMinifier

__all__ = ["Minifier", "ScourMinifier", "minify"]
