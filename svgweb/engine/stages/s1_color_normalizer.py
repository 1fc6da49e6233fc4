"""S1: Color Normalizer.

Rewrites every ``fill`` attribute and every inline-style ``fill`` declaration to
the color token so the icon inherits the surrounding CSS color. Plain regex on
the style string, not a CSS parser; ``stroke`` and ``stop-color`` are left alone.
"""

from __future__ import annotations

import re

from svgweb.engine.context import DocumentContext
from svgweb.engine.registry import stage
from svgweb.svg.document import iter_elements

# "fill", optional spaces, ":", then everything up to the next ";"
_STYLE_FILL_RE = re.compile(r"fill\s*:[^;]*", re.IGNORECASE)


def rewrite_style_fill(style: str, token: str = "currentColor") -> str:
    """Replace each ``fill:<value>`` declaration in a style string with ``fill:<token>``."""
    return _STYLE_FILL_RE.sub(lambda _: f"fill:{token}", style)


@stage(
    id="S1.color_normalizer",
    description="Set fill attributes and inline-style fills to the color token",
)
def normalize_colors(ctx: DocumentContext) -> None:
    token = ctx.config.color_token
    for el in iter_elements(ctx.root):
        if el.get("fill") is not None:
            el.set("fill", token)
            ctx.bump("fills_rewritten")

        style = el.get("style")
        if style is not None:
            new_style = rewrite_style_fill(style, token)
            if new_style != style:
                el.set("style", new_style)
                ctx.bump("style_fills_rewritten")
