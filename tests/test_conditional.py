"""Unit tests for Outlook conditional-comment helpers."""

from __future__ import annotations

from mjml_compiler.components.conditional import (
    conditional_tag,
    merge_outlook_conditionals,
    mso_conditional_tag,
    strip_comments,
    suffix_css_classes,
)


def test_conditional_tag_wraps_for_outlook_and_others() -> None:
    assert conditional_tag("<td>") == "<!--[if mso | IE]><td><![endif]-->"
    assert (
        conditional_tag("<input />", negation=True)
        == "<!--[if !mso | IE]><!--><input /><!--<![endif]-->"
    )
    assert mso_conditional_tag("<b>") == "<!--[if mso]><b><![endif]-->"


def test_adjacent_conditionals_are_merged() -> None:
    html = conditional_tag("<table><tr>") + "\n  " + conditional_tag("<td>")

    assert merge_outlook_conditionals(html) == "<!--[if mso | IE]><table><tr><td><![endif]-->"


def test_strip_comments_keeps_conditional_markers() -> None:
    negated = conditional_tag("<p>hi</p>", negation=True)
    html = f"<!-- plain --><div>{negated}</div>{conditional_tag('<td>')}<!--x-->"

    stripped = strip_comments(html)

    assert stripped == f"<div>{negated}</div>{conditional_tag('<td>')}"


def test_suffix_css_classes() -> None:
    assert suffix_css_classes("a b", "outlook") == "a-outlook b-outlook"
    assert suffix_css_classes(None, "outlook") == ""
