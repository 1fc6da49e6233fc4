"""lxml cleanup rules run over scour's output.

Scour has no switch for these, so they run as a second pass on the already
scoured markup. Names follow SVGO's plugin names like the rest of the rule list.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable

from lxml import etree

from svgweb.svg.document import (
    SVG_NS,
    iter_elements,
    local_name,
    parse_document,
    remove_element,
    serialize_document,
)

XLINK_HREF = "{http://www.w3.org/1999/xlink}href"

CONTAINER_ELEMENTS = {
    "a", "defs", "foreignObject", "g", "glyph", "marker", "mask",
    "missing-glyph", "pattern", "svg", "switch", "symbol",
}

# Empty values on these carry meaning (they disable rendering)
CONDITIONAL_ATTRS = {"requiredExtensions", "requiredFeatures", "systemLanguage"}

_DISPLAY_NONE_RE = re.compile(r"(?:^|;)\s*display\s*:\s*none\s*(?:;|$)", re.IGNORECASE)
_URL_REF_RE = re.compile(r"url\(\s*['\"]?#([^'\")\s]+)['\"]?\s*\)")


def _is_svg(el: etree._Element, *names: str) -> bool:
    qname = etree.QName(el)
    return qname.namespace in (SVG_NS, None) and qname.localname in names


def _is_zero(value: str | None) -> bool:
    if value is None:
        return False
    try:
        return float(value.strip().removesuffix("px")) == 0
    except ValueError:
        return False


def referenced_ids(root: etree._Element) -> set[str]:
    """Ids referenced through ``url(#id)`` or ``href="#id"`` anywhere in the tree."""
    ids: set[str] = set()
    for el in iter_elements(root):
        for name, value in el.attrib.items():
            if name in ("href", XLINK_HREF) and value.startswith("#"):
                ids.add(value[1:])
            ids.update(_URL_REF_RE.findall(value))
        if local_name(el.tag) == "style" and el.text:
            ids.update(_URL_REF_RE.findall(el.text))
    return ids


def remove_empty_attrs(root: etree._Element) -> None:
    for el in iter_elements(root):
        for name, value in list(el.attrib.items()):
            if value == "" and local_name(name) not in CONDITIONAL_ATTRS:
                del el.attrib[name]


def _is_hidden(el: etree._Element) -> bool:
    if el.get("display") == "none" or _DISPLAY_NONE_RE.search(el.get("style", "")):
        return True
    if _is_zero(el.get("opacity")) and not any(_is_svg(a, "clipPath") for a in el.iterancestors()):
        return True
    if el.get("visibility") == "hidden":
        return not any(d.get("visibility") == "visible" for d in iter_elements(el))
    if _is_svg(el, "circle"):
        return _is_zero(el.get("r"))
    if _is_svg(el, "ellipse"):
        return _is_zero(el.get("rx")) or _is_zero(el.get("ry"))
    if _is_svg(el, "rect"):
        return len(el) == 0 and (_is_zero(el.get("width")) or _is_zero(el.get("height")))
    return False


def _remove_where(root: etree._Element, predicate: Callable[[etree._Element], bool]) -> None:
    """Remove matching elements; a removed element's subtree is not visited."""
    stack = list(root)
    while stack:
        el = stack.pop()
        if not isinstance(el.tag, str):
            continue
        if predicate(el):
            remove_element(el)
        else:
            stack.extend(el)


def remove_hidden_elems(root: etree._Element) -> None:
    referenced = referenced_ids(root)
    _remove_where(root, lambda el: el.get("id") not in referenced and _is_hidden(el))


def remove_empty_text(root: etree._Element) -> None:
    def empty(el: etree._Element) -> bool:
        if _is_svg(el, "text", "tspan"):
            return len(el) == 0 and not el.text
        if _is_svg(el, "tref"):
            return el.get("href") is None and el.get(XLINK_HREF) is None
        return False

    _remove_where(root, empty)


def _keep_empty_container(el: etree._Element) -> bool:
    if _is_svg(el, "svg"):
        return True
    if _is_svg(el, "pattern") and len(el.attrib) > 0:
        return True
    if _is_svg(el, "mask") and el.get("id") is not None:
        return True
    return _is_svg(el, "g") and el.get("filter") is not None


def remove_empty_containers(root: etree._Element) -> None:
    referenced = referenced_ids(root)
    # Reverse pre-order visits children before parents, so emptied parents go too
    for el in reversed(list(iter_elements(root))):
        if el is root or not _is_svg(el, *CONTAINER_ELEMENTS):
            continue
        if len(el) or (el.text or "").strip():
            continue
        if _keep_empty_container(el) or el.get("id") in referenced:
            continue
        remove_element(el)


CLEANUP_RULES: dict[str, Callable[[etree._Element], None]] = {
    "removeEmptyAttrs": remove_empty_attrs,
    "removeHiddenElems": remove_hidden_elems,
    "removeEmptyText": remove_empty_text,
    "removeEmptyContainers": remove_empty_containers,
}


def run_cleanup(text: str, names: list[str], path: Path | str | None = None) -> str:
    """Apply the named cleanup rules in order. Only the root element is written back."""
    root = parse_document(text, path)
    for name in names:
        CLEANUP_RULES[name](root)
    return serialize_document(root)
