"""Behaviour tests for head tags feeding the document skeleton.

``head_settings.feature`` checks that ``mj-title`` and ``mj-breakpoint`` reach
the rendered ``<head>`` and that a broken ``mj-html-attributes`` selector is
reported in the compile result rather than raised.

Usage
-----
Run ``pytest tests/bdd/test_head_settings.py -v``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from mjml_compiler.renderer.compiler import Compiler

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "head_settings.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(
    parsers.parse(
        'an MJML document with the title "{title}" and a {breakpoint} breakpoint'
    )
)
def given_titled_document(scenario_state: ScenarioState, title: str, breakpoint: str) -> None:
    """Store a document whose head sets a title and breakpoint."""
    scenario_state["source"] = (
        "<mjml><mj-head>"
        f"<mj-title>{title}</mj-title>"
        f'<mj-breakpoint width="{breakpoint}" />'
        "</mj-head><mj-body><mj-section><mj-column></mj-column></mj-section>"
        "</mj-body></mjml>"
    )


@given(parsers.parse('an MJML document with an html-attributes selector "{selector}"'))
def given_bad_selector(scenario_state: ScenarioState, selector: str) -> None:
    """Store a document whose ``mj-html-attributes`` block targets ``selector``."""
    scenario_state["source"] = (
        "<mjml><mj-head><mj-html-attributes>"
        f'<mj-selector path="{selector}">'
        '<mj-html-attribute name="data-x">1</mj-html-attribute>'
        "</mj-selector>"
        "</mj-html-attributes></mj-head><mj-body></mj-body></mjml>"
    )


@when("the document is compiled")
def when_compiled(scenario_state: ScenarioState) -> None:
    """Compile the stored source and keep the :class:`RenderResult`."""
    scenario_state["result"] = Compiler().render(scenario_state["source"])


@then(parsers.parse('the HTML title is "{title}"'))
def then_title(scenario_state: ScenarioState, title: str) -> None:
    """Assert the ``<title>`` text and the article label both equal ``title``."""
    soup = BeautifulSoup(scenario_state["result"].html, "html.parser")
    assert soup.title is not None
    assert soup.title.string == title
    article = soup.find("div", attrs={"role": "article"})
    assert article is not None
    assert article["aria-label"] == title


@then(parsers.parse("the desktop media query starts at {breakpoint}"))
def then_breakpoint(scenario_state: ScenarioState, breakpoint: str) -> None:
    """Assert both responsive style blocks use ``breakpoint``."""
    html = scenario_state["result"].html
    assert f"@media only screen and (min-width:{breakpoint})" in html
    assert f'<style media="screen and (min-width:{breakpoint})">' in html


@then(parsers.parse('one compile error mentions "{text}"'))
def then_one_error(scenario_state: ScenarioState, text: str) -> None:
    """Assert exactly one error was collected and that it contains ``text``."""
    errors = scenario_state["result"].errors
    assert len(errors) == 1, errors
    assert text in errors[0]
