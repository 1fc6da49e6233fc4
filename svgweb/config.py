"""Optimizer configuration.

There is no config file and no environment lookup: the values below are the
contract of the tool.
"""

from __future__ import annotations

from dataclasses import dataclass

from svgweb.models.minify import MinifyConfig


@dataclass(frozen=True)
class OptimizerConfig:
    """Fixed settings for a batch run."""

    # Output lands in <cwd>/<output_dir_name>/<basename>
    output_dir_name: str = "optimized"
    # Discovery pattern used when no paths are given (case-sensitive)
    discovery_pattern: str = "*.svg"
    encoding: str = "utf-8"

    # Color normalization
    color_token: str = "currentColor"

    # Editor metadata stripping (qualified-name prefixes and tags)
    vendor_attr_prefixes: tuple[str, ...] = ("inkscape:", "sodipodi:")
    vendor_elements: tuple[str, ...] = ("sodipodi:namedview", "inkscape:grid")

    log_level: str = "INFO"


DEFAULT_CONFIG = OptimizerConfig()


# Rule set for web embedding. viewBox must survive for responsive scaling, and
# color conversion would fight the currentColor normalization.
WEB_EMBED_RULES = MinifyConfig(
    plugins=[
        "removeXMLProcInst",
        "removeComments",
        "removeMetadata",
        "removeTitle",
        "removeDesc",
        "removeUselessDefs",
        "removeEditorsNSData",
        "removeEmptyAttrs",
        "removeHiddenElems",
        "removeEmptyText",
        "removeEmptyContainers",
        {"name": "removeViewBox", "active": False},
        {"name": "convertColors", "active": False},
    ]
)
