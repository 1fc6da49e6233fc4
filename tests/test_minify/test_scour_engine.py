"""Tests for the scour-backed minifier."""

import pytest
from scour import scour

from svgweb.config import WEB_EMBED_RULES
from svgweb.errors import MalformedInputError
from svgweb.minify.engine import BASE_OPTIONS, ScourMinifier, scour_arguments
from svgweb.models.minify import MinifyConfig

NS = 'xmlns="http://www.w3.org/2000/svg"'


def _run(svg: str, *plugins) -> str:
    return ScourMinifier().optimize(svg, MinifyConfig(plugins=list(plugins)))


def test_web_rules_map_to_scour_options():
    options = scour.parse_args(scour_arguments(WEB_EMBED_RULES))
    assert options.strip_xml_prolog
    assert options.strip_comments
    assert options.remove_metadata
    assert options.remove_titles
    assert options.remove_descriptions
    assert not options.keep_defs
    assert not options.keep_editor_data
    assert not options.simple_colors
    assert not options.newlines
    assert options.indent_type == "none"


def test_no_rules_only_base_options():
    assert scour_arguments(MinifyConfig()) == BASE_OPTIONS


def test_inactive_rules_keep_scour_defaults_off():
    config = MinifyConfig(plugins=[
        {"name": "removeUselessDefs", "active": False},
        {"name": "removeEditorsNSData", "active": False},
    ])
    assert scour_arguments(config) == [*BASE_OPTIONS, "--keep-unreferenced-defs", "--keep-editor-data"]


def test_cleanup_rules_add_no_scour_options():
    config = MinifyConfig(plugins=["removeEmptyAttrs", "removeHiddenElems"])
    assert scour_arguments(config) == BASE_OPTIONS


def test_unknown_rule_rejected():
    with pytest.raises(ValueError, match="Unknown minify rule"):
        scour_arguments(MinifyConfig(plugins=["removeEverything"]))


def test_active_view_box_removal_unsupported():
    with pytest.raises(ValueError, match="not supported"):
        scour_arguments(MinifyConfig(plugins=["removeViewBox"]))


def test_output_is_single_line():
    out = _run(f'<svg {NS}>\n  <g>\n    <path d="M0 0L1 1"/>\n  </g>\n</svg>\n')
    assert "\n" not in out
    assert out.startswith("<")
    assert out.endswith("</svg>")


def test_xml_declaration_and_comments_stripped():
    svg = f'<?xml version="1.0" encoding="UTF-8"?>\n<!-- top --><svg {NS}><!-- in --><path d="M0 0L1 1"/></svg>'
    out = _run(svg, "removeXMLProcInst", "removeComments")
    assert "<?xml" not in out
    assert "<!--" not in out
    assert "<path" in out


@pytest.mark.parametrize("rule, tag", [
    ("removeMetadata", "metadata"),
    ("removeTitle", "title"),
    ("removeDesc", "desc"),
])
def test_descriptive_elements_removed(rule, tag):
    out = _run(f"<svg {NS}><{tag}>x</{tag}><path d='M0 0L1 1'/></svg>", rule)
    assert f"<{tag}" not in out
    assert "<path" in out


def test_cleanup_runs_after_scour():
    out = _run(f'<svg {NS}><path d="M0 0L1 1" class=""/><rect width="0" height="5"/></svg>',
               "removeEmptyAttrs", "removeHiddenElems")
    assert "class=" not in out
    assert "<rect" not in out
    assert "<path" in out


@pytest.mark.parametrize("svg", ["", "   ", "not xml", '<svg xmlns="http://www.w3.org/2000/svg"><g></svg>'])
def test_malformed_input_raises(svg):
    with pytest.raises(MalformedInputError) as exc:
        ScourMinifier().optimize(svg, WEB_EMBED_RULES, "bad.svg")
    assert exc.value.path.name == "bad.svg"
