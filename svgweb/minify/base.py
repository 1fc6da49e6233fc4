"""Minifier adapter: the fixed web-embedding rule set applied through a pluggable minifier."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from svgweb.config import WEB_EMBED_RULES
from svgweb.models.minify import MinifyConfig


class Minifier(Protocol):
    """Text in, minified text out. Raises MalformedInputError on bad markup."""

    def optimize(self, text: str, config: MinifyConfig, path: Path | str | None = None) -> str: ...


def default_minifier() -> Minifier:
    from svgweb.minify.engine import ScourMinifier

    return ScourMinifier()


def minify(
    text: str,
    minifier: Minifier | None = None,
    path: Path | str | None = None,
) -> str:
    """Minify serialized SVG with the web-embedding rules."""
    return (minifier or default_minifier()).optimize(text, WEB_EMBED_RULES, path)
