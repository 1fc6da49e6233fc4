"""SVG document facade over lxml.

Parsing, serialization and the few tree helpers the stages need. Tags and
attribute names come back from lxml in Clark notation (``{uri}local``);
``qualified_name`` maps them back to the ``prefix:local`` form the editors use.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from lxml import etree

from svgweb.errors import MalformedInputError

logger = logging.getLogger(__name__)

_DECLARATION_RE = re.compile(r"\ufeff?\s*(<\?xml\s[^>]*?\?>)")

SVG_NS = "http://www.w3.org/2000/svg"
XML_NS = "http://www.w3.org/XML/1998/namespace"

_PARSER_OPTIONS = {
    "resolve_entities": False,
    "no_network": True,
    "remove_blank_text": False,
    "strip_cdata": False,
}


def make_parser(**overrides) -> etree.XMLParser:
    """Build a non-resolving XML parser."""
    return etree.XMLParser(**{**_PARSER_OPTIONS, **overrides})


def split_declaration(text: str) -> tuple[str, str]:
    """Split a leading ``<?xml ...?>`` declaration off already-decoded text."""
    match = _DECLARATION_RE.match(text)
    if not match:
        return "", text
    return match.group(1), text[match.end():]


def parse_document(text: str, path: Path | str | None = None) -> etree._Element:
    """Parse SVG markup into a mutable tree and return its root element."""
    # lxml rejects str input that still carries an encoding declaration
    _, body = split_declaration(text)
    if not body.strip():
        raise MalformedInputError("Malformed markup: document is empty", path)
    try:
        root = etree.fromstring(body, make_parser())
    except etree.XMLSyntaxError as e:
        raise MalformedInputError(f"Malformed markup: {e}", path) from e
    logger.debug("Parsed document: root <%s>", qualified_name(root, root.tag))
    return root


def serialize_document(root: etree._Element) -> str:
    """Serialize the root element (no XML declaration, no siblings outside the root)."""
    return etree.tostring(root, encoding="unicode")


def qualified_name(element: etree._Element, name: str) -> str:
    """Return ``prefix:local`` for a Clark-notation name, using the element's in-scope prefixes.

    Names in the default namespace (or in a namespace with no declared prefix)
    come back as the bare local name.
    """
    if not name.startswith("{"):
        return name
    uri, local = name[1:].split("}", 1)
    if uri == XML_NS:
        return f"xml:{local}"
    for prefix, ns in element.nsmap.items():
        if ns == uri and prefix:
            return f"{prefix}:{local}"
    return local


def local_name(name: str) -> str:
    return name.split("}", 1)[1] if name.startswith("{") else name


def iter_elements(root: etree._Element) -> Iterator[etree._Element]:
    """Depth-first pre-order walk over elements only (comments and PIs skipped)."""
    return root.iter(etree.Element)


def child_elements(element: etree._Element) -> list[etree._Element]:
    return [child for child in element if isinstance(child.tag, str)]


def remove_element(node: etree._Element) -> None:
    """Detach a node from its parent, keeping its tail text in the document."""
    parent = node.getparent()
    if parent is None:
        raise ValueError("Cannot remove the root element")
    if node.tail:
        previous = node.getprevious()
        if previous is not None:
            previous.tail = (previous.tail or "") + node.tail
        else:
            parent.text = (parent.text or "") + node.tail
    parent.remove(node)
