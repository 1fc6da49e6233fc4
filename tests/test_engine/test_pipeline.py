"""Tests for the pipeline orchestrator."""

import pytest

from svgweb.engine.context import DocumentContext
from svgweb.engine.pipeline import Pipeline, create_pipeline
from svgweb.engine.registry import StageRegistry, StageSpec
from svgweb.svg.document import iter_elements, qualified_name
from tests.conftest import INKSCAPE_SVG, make_ctx


def test_pipeline_runs_stages_in_order():
    reg = StageRegistry()
    results = []

    def s1(ctx: DocumentContext) -> None:
        results.append("s1")

    def s2(ctx: DocumentContext) -> None:
        results.append("s2")

    reg.register(StageSpec(id="S2", fn=s2, dependencies=["S1"]))
    reg.register(StageSpec(id="S1", fn=s1))

    ctx = make_ctx("<svg/>")
    Pipeline(registry=reg).run(ctx)

    assert results == ["s1", "s2"]
    assert ctx.completed_stages == ["S1", "S2"]


def test_pipeline_propagates_stage_errors():
    reg = StageRegistry()

    def fail(ctx: DocumentContext) -> None:
        raise ValueError("test error")

    reg.register(StageSpec(id="S1", fn=fail))

    ctx = make_ctx("<svg/>")
    with pytest.raises(ValueError, match="test error"):
        Pipeline(registry=reg).run(ctx)
    assert ctx.completed_stages == []


def test_builtin_pipeline_on_inkscape_file():
    ctx = make_ctx(INKSCAPE_SVG)
    create_pipeline().run(ctx)

    assert ctx.completed_stages == ["S1.color_normalizer", "S2.editor_stripper"]
    assert ctx.stats["fills_rewritten"] == 2
    assert ctx.stats["style_fills_rewritten"] == 1
    assert ctx.stats["vendor_elements_removed"] == 1
    for el in iter_elements(ctx.root):
        assert not qualified_name(el, el.tag).startswith(("inkscape:", "sodipodi:"))
