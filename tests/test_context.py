"""Unit tests for :class:`RenderContext` derivation and :class:`GlobalData`.

Usage
-----
Run ``pytest tests/test_context.py -v``.

Examples
--------
- ``test_child_width_is_clamped_to_parent`` checks a derived context never
  grows wider than the one it came from.
- ``test_media_query_first_write_wins`` checks repeated registrations keep the
  original CSS.
"""

from __future__ import annotations

import pytest

from mjml_compiler.config import RenderOptions
from mjml_compiler.renderer.context import AttributeCascade, GlobalData, RenderContext


def _context(width: int = 600) -> RenderContext:
    return RenderContext(container_width=width)


def test_child_width_is_clamped_to_parent() -> None:
    parent = _context(600)

    assert parent.derive_child({"container_width": 800}).container_width == 600
    assert parent.derive_child({"container_width": 520}).container_width == 520


def test_root_context_is_exempt_from_clamping() -> None:
    root = RenderContext.create_root()

    child = root.derive_child({"container_width": 800})

    assert root.is_root
    assert child.container_width == 800
    assert not child.is_root, "only the compile's first context is the root"


def test_width_stays_positive_and_numeric() -> None:
    parent = _context(600)

    assert parent.derive_child({"container_width": -5}).container_width == 1
    assert parent.derive_child({"container_width": "wide"}).container_width == 600
    assert parent.derive_child({"container_width": "320"}).container_width == 320


def test_derived_contexts_share_global_data() -> None:
    parent = _context()

    child = parent.derive_child({"title": "x"})
    child.global_data.add_error("boom")

    assert child.global_data is parent.global_data
    assert parent.global_data.errors == ["boom"]


def test_global_data_cannot_be_replaced() -> None:
    with pytest.raises(ValueError, match="global data"):
        _context().derive_child({"global_data": GlobalData()})


def test_component_data_merges_without_touching_parent() -> None:
    parent = _context().derive_child({"component_data": {"gap": "10px"}})

    child = parent.derive_child({"component_data": {"navbar": "settings"}})

    assert child.read_component_data("gap") == "10px"
    assert child.read_component_data("navbar") == "settings"
    assert parent.read_component_data("navbar") is None
    assert child.read_component_data("missing") is None


def test_inherited_defaults_merge_per_tag() -> None:
    parent = _context().derive_child(
        {"inherited_defaults": {"mj-text": {"color": "red", "font-size": "12px"}}}
    )

    child = parent.derive_child({"inherited_defaults": {"mj-text": {"color": "blue"}}})

    assert child.inherited_defaults["mj-text"] == {"color": "blue", "font-size": "12px"}
    assert parent.inherited_defaults["mj-text"]["color"] == "red"


def test_create_root_copies_option_fonts() -> None:
    options = RenderOptions(fonts={"Lato": "https://example.test/lato.css"})

    root = RenderContext.create_root(options)
    root.fonts["Other"] = "https://example.test/other.css"

    assert root.options is options
    assert "Other" not in options.fonts


def test_media_query_first_write_wins() -> None:
    data = GlobalData()

    data.add_media_query("mj-column-per-50", 50, "%")
    data.add_media_query("mj-column-px-200", 200)
    data.add_media_query("mj-column-per-50", 75, "%")

    assert data.media_queries == {
        "mj-column-per-50": "{ width:50% !important; max-width: 50%; }",
        "mj-column-px-200": "{ width:200px !important; max-width: 200px; }",
    }


def test_keyed_head_styles_are_deduplicated() -> None:
    data = GlobalData()

    data.add_head_style("mj-image", "a {}")
    data.add_head_style("mj-navbar", "b {}")
    data.add_head_style("mj-image", "a {}")

    assert list(data.head_styles) == ["mj-image", "mj-navbar"]


def test_html_attributes_merge_per_selector() -> None:
    data = GlobalData()

    data.add_html_attributes(".a", {"data-x": "1"})
    data.add_html_attributes(".a", {"data-y": "2"})

    assert data.html_attributes == {".a": {"data-x": "1", "data-y": "2"}}


def test_font_usage_is_case_and_quote_insensitive() -> None:
    data = GlobalData()

    data.record_font_usage(" 'Open Sans'")

    assert data.is_font_used("open sans")
    assert not data.is_font_used("Lato")


def test_attribute_cascade_merges_classes_in_order() -> None:
    cascade = AttributeCascade(
        classes={"a": {"color": "red", "padding": "0"}, "b": {"color": "blue"}},
        class_defaults={"a": {"mj-text": {"color": "green"}}},
    )

    assert cascade.for_classes(["a", "b", "missing"]) == {"color": "blue", "padding": "0"}
    assert cascade.nested_defaults(["a"]) == {"mj-text": {"color": "green"}}
    assert cascade.for_tag("mj-text") == {}
