"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgweb.engine.context import DocumentContext
from svgweb.engine.pipeline import register_stages
from svgweb.svg.document import parse_document

INKSCAPE_NS = "http://www.inkscape.org/namespaces/inkscape"


# A typical Inkscape save: editor attributes, namedview/grid, RDF metadata
INKSCAPE_SVG = '''<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!-- Created with Inkscape (http://www.inkscape.org/) -->
<svg
   xmlns="http://www.w3.org/2000/svg"
   xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape"
   xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd"
   xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
   xmlns:cc="http://creativecommons.org/ns#"
   xmlns:dc="http://purl.org/dc/elements/1.1/"
   width="24"
   height="24"
   viewBox="0 0 24 24"
   inkscape:version="1.3 (0e150ed6c4, 2023-07-21)"
   sodipodi:docname="star.svg"
   id="svg1">
  <title>Star</title>
  <desc>A five-pointed star</desc>
  <sodipodi:namedview id="namedview1" pagecolor="#ffffff" inkscape:zoom="8">
    <inkscape:grid id="grid1" type="xygrid" />
  </sodipodi:namedview>
  <metadata id="metadata1">
    <rdf:RDF>
      <cc:Work rdf:about="">
        <dc:format>image/svg+xml</dc:format>
      </cc:Work>
    </rdf:RDF>
  </metadata>
  <defs id="defs1" />
  <g inkscape:label="Layer 1" inkscape:groupmode="layer" id="layer1">
    <path
       d="M12 2l3 7h7l-6 4 2 7-6-4-6 4 2-7-6-4h7z"
       fill="#ff0000"
       style="stroke:red;fill:#ff0000;opacity:0.5"
       sodipodi:nodetypes="ccccccccccc"
       id="star" />
    <circle cx="12" cy="12" r="2" fill="none" stroke="#000000" inkscape:label="dot" />
  </g>
</svg>
'''

# Lucide-style stroke icon, already clean
CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

FILLED_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
  <circle cx="50" cy="50" r="20" fill="#FF6B6B" style="FILL : #FF6B6B;stroke:#333"/>
  <linearGradient id="g1"><stop offset="0" stop-color="#123456"/></linearGradient>
</svg>'''

# Vendor elements nested deeper than the root's children
NESTED_VENDOR_SVG = '''<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape"
     xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd"
     viewBox="0 0 10 10">
  <g id="outer" inkscape:label="outer">
    <g id="inner" sodipodi:insensitive="true">
      <inkscape:grid id="stray-grid" />
      <rect id="r" width="1" height="1" sodipodi:role="line" />
    </g>
    <sodipodi:namedview id="nv"><inkscape:grid id="g" /></sodipodi:namedview>
  </g>
</svg>'''

MALFORMED_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><g><path d="M0 0"></g></svg>'


def make_ctx(svg: str) -> DocumentContext:
    return DocumentContext(root=parse_document(svg))


@pytest.fixture(scope="session", autouse=True)
def _stages_registered() -> None:
    register_stages()


@pytest.fixture
def inkscape_svg() -> str:
    return INKSCAPE_SVG


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def filled_rect_svg() -> str:
    return FILLED_RECT_SVG
