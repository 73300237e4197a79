"""Unit tests for the box-model width helpers.

These tests cover CSS shorthand parsing, border width extraction, and the
container-width arithmetic that layout components use to size their children.

Usage
-----
Run ``pytest tests/test_box.py -v``. No fixtures are required.
"""

from __future__ import annotations

import pytest

from mjml_compiler.components.box import (
    BoxModel,
    ParsedWidth,
    leading_int,
    parse_border_width,
    parse_shorthand,
    parse_width,
    width_class_name,
)


@pytest.mark.parametrize(
    ("value", "side", "expected"),
    [
        ("10px", "left", 10),
        ("10px 25px", "top", 10),
        ("10px 25px", "left", 25),
        ("1px 2px 3px", "left", 2),
        ("1px 2px 3px", "bottom", 3),
        ("1px 2px 3px 4px", "left", 4),
        ("1px 2px 3px 4px", "right", 2),
        ("", "left", 0),
        ("1px 2px 3px 4px 5px", "left", 0),
    ],
)
def test_parse_shorthand_picks_the_side(value: str, side: str, expected: int) -> None:
    assert parse_shorthand(value, side) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2px solid #000", 2),
        ("solid 3px red", 3),
        ("none", 0),
        ("0", 0),
        ("dashed red", 0),
        (None, 0),
    ],
)
def test_parse_border_width(value: str | None, expected: int) -> None:
    assert parse_border_width(value) == expected


def test_parse_width_defaults_unknown_units_to_pixels() -> None:
    assert parse_width("50%") == ParsedWidth(50.0, "%")
    assert parse_width("200") == ParsedWidth(200.0, "px")
    assert parse_width("12em") == ParsedWidth(12.0, "px")
    assert parse_width("auto") is None, "non-numeric widths should not parse"


def test_leading_int_ignores_units_and_fractions() -> None:
    assert leading_int("12.9px") == 12
    assert leading_int(None) == 0
    assert leading_int("px") == 0


def test_explicit_side_padding_overrides_shorthand() -> None:
    box = BoxModel({"padding": "10px", "padding-left": "30px"}, 600)

    assert box.horizontal_paddings() == 40


def test_widths_subtract_paddings_and_borders() -> None:
    box = BoxModel({"padding": "0 40px", "border": "1px solid red"}, 600)

    widths = box.widths()

    assert widths.content == 518
    assert widths.paddings == 80
    assert widths.borders == 2


def test_declared_width_splits_evenly_without_width() -> None:
    box = BoxModel({}, 600)

    assert box.pixel_width(3) == 200
    assert box.declared_width_percent(3) == ParsedWidth(33.0, "%")


def test_unparseable_width_falls_back_to_even_split() -> None:
    box = BoxModel({"width": "auto"}, 600)

    assert box.pixel_width(2) == 300


@pytest.mark.parametrize("siblings", [1, 2, 3, 4, 5, 6, 7])
def test_even_split_never_overflows_the_parent(siblings: int) -> None:
    box = BoxModel({}, 600)

    assert box.pixel_width(siblings) * siblings <= 600


def test_content_width_handles_percent_and_extra_borders() -> None:
    percent = BoxModel({"width": "50%"}, 600)
    bordered = BoxModel(
        {"width": "200px", "padding": "0 10px", "inner-border": "2px solid"}, 600
    )

    assert percent.content_width(2) == 300
    assert bordered.content_width(2, extra_border_attributes=("inner-border",)) == 176


def test_mobile_width_converts_pixels_to_percent() -> None:
    assert BoxModel({"width": "150px"}, 600).mobile_width(1) == "25%"
    assert BoxModel({"width": "40%"}, 600).mobile_width(1) == "40%"
    assert BoxModel({}, 600).mobile_width(4) == "25%"


@pytest.mark.parametrize(
    ("parsed", "expected"),
    [
        (ParsedWidth(50.0, "%"), "mj-column-per-50"),
        (ParsedWidth(33.5, "%"), "mj-column-per-33-5"),
        (ParsedWidth(200.0, "px"), "mj-column-px-200"),
    ],
)
def test_width_class_name(parsed: ParsedWidth, expected: str) -> None:
    assert width_class_name(parsed) == expected
