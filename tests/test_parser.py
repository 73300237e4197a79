"""Unit tests for the MJML parser.

These tests check that structural tags become immutable :class:`Node` trees
while ending-tag content survives verbatim, even when it is not valid XHTML.

Usage
-----
Run ``pytest tests/test_parser.py -v``.
"""

from __future__ import annotations

import dataclasses as dc

import pytest

from mjml_compiler.parser import MjmlParser, Node, ParserError, parse


def _column(source: str) -> Node:
    root = parse(f"<mjml><mj-body><mj-section><mj-column>{source}</mj-column></mj-section></mj-body></mjml>")
    body = root.find_child("mj-body")
    assert body is not None, "mj-body should be parsed"
    return body.children[0].children[0]


def test_ending_tag_content_is_kept_verbatim() -> None:
    column = _column("<mj-text>Hi <b>there</b> & <br> friend</mj-text>")

    text = column.children[0]

    assert text.tag_name == "mj-text"
    assert text.content == "Hi <b>there</b> & <br> friend"
    assert text.children == (), "ending tags should not expose inner markup as nodes"


def test_attributes_are_preserved_and_first_duplicate_wins() -> None:
    column = _column('<mj-image src="a.png" alt="A &amp; B" /><mj-divider width="1px" width="2px" />')

    image, divider = column.children

    assert image.attributes == {"src": "a.png", "alt": "A & B"}
    assert divider.attributes["width"] == "1px"


def test_comments_and_whitespace_are_ignored_between_tags() -> None:
    root = parse("<mjml>\n  <!-- note -->\n  <mj-body>\n  </mj-body>\n</mjml>")

    assert [child.tag_name for child in root.children] == ["mj-body"]
    assert root.content == ""


def test_find_children_returns_every_match_in_order() -> None:
    root = parse(
        "<mjml><mj-head><mj-font name='A' href='a'/><mj-title>T</mj-title>"
        "<mj-font name='B' href='b'/></mj-head></mjml>"
    )
    head = root.find_child("mj-head")

    assert head is not None
    assert [font.attributes["name"] for font in head.find_children("mj-font")] == ["A", "B"]
    assert root.find_child("mj-body") is None


def test_missing_root_raises_parser_error() -> None:
    with pytest.raises(ParserError, match="no root element"):
        parse("<div>not mjml</div>")


def test_nodes_are_immutable() -> None:
    node = parse("<mjml></mjml>")

    with pytest.raises(dc.FrozenInstanceError):
        node.tag_name = "other"  # type: ignore[misc]


def test_custom_ending_tags_change_what_is_protected() -> None:
    parser = MjmlParser(ending_tags=())
    root = parser.parse("<mjml><mj-text>Hi <b>there</b></mj-text></mjml>")

    text = root.children[0]

    assert [child.tag_name for child in text.children] == ["b"]


def test_ending_tag_content_is_trimmed_but_inner_whitespace_kept() -> None:
    column = _column("<mj-raw>\n  <pre>a  \n  b</pre>\n  </mj-raw>")

    raw = column.children[0]

    assert raw.content == "<pre>a  \n  b</pre>"


def test_social_and_carousel_children_are_ending_tags() -> None:
    column = _column(
        '<mj-social><mj-social-element name="web">Site <b>here</b></mj-social-element></mj-social>'
        '<mj-carousel><mj-carousel-image src="a.png" /></mj-carousel>'
    )

    social, carousel = column.children

    assert social.children[0].content == "Site <b>here</b>"
    assert social.children[0].children == ()
    assert carousel.children[0].attributes == {"src": "a.png"}
