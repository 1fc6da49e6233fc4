"""S2: Editor-Metadata Stripper.

Depth-first, pre-order walk from the root. At the root the vendor
attributes go first, then every vendor element below it in one pruned pass,
and only then do we descend, so removed subtrees are never visited.
"""

from __future__ import annotations

from lxml import etree

from svgweb.engine.context import DocumentContext
from svgweb.engine.registry import stage
from svgweb.svg.document import child_elements, qualified_name, remove_element


def strip_vendor_attributes(el: etree._Element, prefixes: tuple[str, ...]) -> int:
    """Drop attributes whose qualified name starts with one of the prefixes (case-sensitive)."""
    doomed = [name for name in el.attrib if qualified_name(el, name).startswith(prefixes)]
    for name in doomed:
        del el.attrib[name]
    return len(doomed)


def remove_vendor_elements(el: etree._Element, tags: tuple[str, ...]) -> int:
    """Remove every descendant whose qualified tag is one of ``tags``.

    A matched subtree leaves whole and is not searched further.
    """
    removed = 0
    stack = child_elements(el)
    while stack:
        node = stack.pop()
        if qualified_name(node, node.tag) in tags:
            remove_element(node)
            removed += 1
        else:
            stack.extend(child_elements(node))
    return removed


def walk(el: etree._Element, ctx: DocumentContext, prune: bool = True) -> None:
    config = ctx.config
    ctx.bump("vendor_attrs_removed", strip_vendor_attributes(el, config.vendor_attr_prefixes))
    if prune:
        # Clears the whole subtree, so descendants have nothing left to remove
        ctx.bump("vendor_elements_removed", remove_vendor_elements(el, config.vendor_elements))
    for child in child_elements(el):
        walk(child, ctx, prune=False)


@stage(
    id="S2.editor_stripper",
    dependencies=["S1.color_normalizer"],
    description="Strip inkscape:/sodipodi: attributes and editor-only elements",
)
def strip_editor_metadata(ctx: DocumentContext) -> None:
    walk(ctx.root, ctx)
