"""Scour-backed SVG minifier.

Rules scour implements become its command-line options. The few it lacks
run afterwards as an lxml pass over its output (see ``cleanup``).
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from xml.parsers.expat import ExpatError

from scour import scour

from svgweb.errors import MalformedInputError
from svgweb.minify.cleanup import CLEANUP_RULES, run_cleanup
from svgweb.models.minify import MinifyConfig

logger = logging.getLogger(__name__)

# Single-line output
BASE_OPTIONS = ["--no-line-breaks", "--indent=none"]

# rule -> (options when active, options when inactive); None means scour cannot do it
SCOUR_RULES: dict[str, tuple[list[str] | None, list[str]]] = {
    "removeXMLProcInst": (["--strip-xml-prolog"], []),
    "removeComments": (["--enable-comment-stripping"], []),
    "removeMetadata": (["--remove-metadata"], []),
    "removeTitle": (["--remove-titles"], []),
    "removeDesc": (["--remove-descriptions"], []),
    "removeUselessDefs": ([], ["--keep-unreferenced-defs"]),
    "removeEditorsNSData": ([], ["--keep-editor-data"]),
    "convertColors": ([], ["--disable-simplify-colors"]),
    "removeViewBox": (None, []),
}


def scour_arguments(config: MinifyConfig) -> list[str]:
    """Translate a rule list into scour options. Unknown or unsupported rules raise ValueError."""
    args = list(BASE_OPTIONS)
    for setting in config.plugins:
        if setting.name in CLEANUP_RULES:
            continue
        if setting.name not in SCOUR_RULES:
            raise ValueError(f"Unknown minify rule: {setting.name}")
        when_active, when_inactive = SCOUR_RULES[setting.name]
        if not setting.active:
            args.extend(when_inactive)
        elif when_active is None:
            raise ValueError(f"Minify rule not supported: {setting.name}")
        else:
            args.extend(when_active)
    return args


class ScourMinifier:
    """Runs scour with the options a MinifyConfig maps to, then the lxml cleanup rules."""

    def optimize(self, text: str, config: MinifyConfig, path: Path | str | None = None) -> str:
        options = scour.parse_args(scour_arguments(config))
        cleanup = [p.name for p in config.active_plugins() if p.name in CLEANUP_RULES]

        start = time.perf_counter()
        try:
            out = scour.scourString(text, options)
        except ExpatError as e:
            raise MalformedInputError(f"Malformed markup: {e}", path) from e
        if cleanup:
            out = run_cleanup(out, cleanup, path)
        out = out.strip()

        logger.debug(
            "Minified %d -> %d chars (%d cleanup rules) in %.1fms",
            len(text),
            len(out),
            len(cleanup),
            (time.perf_counter() - start) * 1000,
        )
        return out
