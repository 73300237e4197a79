"""Post-render passes over the assembled HTML document.

``mj-style inline="inline"`` rules are copied into the ``style`` attribute of
every element their selector matches, and ``mj-html-attributes`` selectors
receive their extra attributes. Both passes share one BeautifulSoup tree and
are skipped entirely when the head declared neither, so documents without them
are returned byte-for-byte. When a pass does run, attributes keep their source
order and character references in text keep their authored spelling.

A selector that soupsieve cannot compile is skipped and reported through the
``errors`` list; the rest of the pass continues.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import re
import typing as typ

import soupsieve
from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

logger = logging.getLogger(__name__)

CSS_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)
CSS_RULE_PATTERN = re.compile(r"([^{}]+)\{([^}]*)\}", re.DOTALL)
DOCTYPE_PATTERN = re.compile(r"^\s*<!doctype[^>]*>\s*", re.IGNORECASE)
MARKUP_PATTERN = re.compile(r"(<[^>]*>)")
# stands in for "&" in text so html.parser leaves character references alone
AMPERSAND_GUARD = "\ue000"


@dc.dataclass(frozen=True, slots=True)
class CssRule:
    """One selector with the declarations to inline into its matches."""

    selector: str
    declarations: str


def parse_css_rules(css: str) -> list[CssRule]:
    """Split ``css`` into one :class:`CssRule` per comma-separated selector.

    At-rules such as ``@media`` cannot be inlined and are dropped.

    >>> parse_css_rules(".a, p { color: red }")
    [CssRule(selector='.a', declarations='color: red'), CssRule(selector='p', declarations='color: red')]
    """
    rules: list[CssRule] = []
    for match in CSS_RULE_PATTERN.finditer(CSS_COMMENT_PATTERN.sub("", css)):
        selectors, declarations = match.group(1), match.group(2).strip()
        if not declarations or selectors.strip().startswith("@"):
            continue
        rules.extend(
            CssRule(selector.strip(), declarations)
            for selector in selectors.split(",")
            if selector.strip()
        )
    return rules


def parse_declarations(declarations: str) -> dict[str, str]:
    """Parse ``prop: value`` pairs, skipping malformed or empty entries."""
    result: dict[str, str] = {}
    for part in declarations.split(";"):
        prop, sep, value = part.partition(":")
        prop, value = prop.strip(), value.strip()
        if sep and prop and value:
            result[prop] = value
    return result


def merge_styles(existing: str, new: str) -> str:
    """Add ``new`` declarations to ``existing`` without overriding any of them.

    >>> merge_styles("color: blue", "color: red; margin: 0")
    'color: blue; margin: 0;'
    """
    merged = {**parse_declarations(new), **parse_declarations(existing)}
    # existing properties keep their original position
    ordered = {
        **{prop: merged[prop] for prop in parse_declarations(existing)},
        **merged,
    }
    return "; ".join(f"{prop}: {value}" for prop, value in ordered.items()) + ";"


def _select(
    soup: BeautifulSoup, selector: str, tag: str, errors: list[str]
) -> list[Tag]:
    try:
        return soup.select(selector)
    except (soupsieve.SelectorSyntaxError, NotImplementedError, ValueError) as exc:
        message = f'{tag}: Invalid CSS selector "{selector}" - {exc}'
        logger.debug("%s", message)
        errors.append(message)
        return []


def inline_css(soup: BeautifulSoup, css_blocks: cabc.Iterable[str], errors: list[str]) -> None:
    """Copy each rule's declarations into the ``style`` of matching elements."""
    for css in css_blocks:
        for rule in parse_css_rules(css):
            for element in _select(soup, rule.selector, "mj-style inline", errors):
                existing = element.get("style") or ""
                element["style"] = merge_styles(str(existing), rule.declarations)


def apply_html_attributes(
    soup: BeautifulSoup,
    html_attributes: cabc.Mapping[str, cabc.Mapping[str, str]],
    errors: list[str],
) -> None:
    """Set the collected attributes on every element matching their selector."""
    for selector, attributes in html_attributes.items():
        for element in _select(soup, selector, "mj-html-attributes", errors):
            for name, value in attributes.items():
                element[name] = value


class SourceOrderFormatter(HTMLFormatter):
    """Minimal-escaping formatter that writes attributes in document order.

    BeautifulSoup's stock formatters sort attributes alphabetically, which
    would reorder every tag the post-render passes touch.
    """

    def __init__(self) -> None:
        super().__init__(entity_substitution=EntitySubstitution.substitute_xml)

    def attributes(self, tag: Tag) -> list[tuple[str, typ.Any]]:
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


def _guard_text(html: str) -> str:
    parts = MARKUP_PATTERN.split(html)
    # even indexes are text between tags
    parts[::2] = [part.replace("&", AMPERSAND_GUARD) for part in parts[::2]]
    return "".join(parts)


def _unguard_text(html: str) -> str:
    return html.replace(AMPERSAND_GUARD, "&")


def post_process(
    html: str,
    *,
    inline_rules: cabc.Sequence[str],
    html_attributes: cabc.Mapping[str, cabc.Mapping[str, str]],
    errors: list[str],
) -> str:
    """Run the inliner then the attribute applier over ``html``.

    Parameters
    ----------
    html : str
        The assembled document.
    inline_rules : Sequence[str]
        CSS blocks from ``mj-style inline="inline"``.
    html_attributes : Mapping[str, Mapping[str, str]]
        Attributes keyed by CSS selector from ``mj-html-attributes``.
    errors : list[str]
        Receives one message per selector that could not be compiled.

    Returns
    -------
    str
        The processed document, or ``html`` unchanged when there is nothing
        to apply.
    """
    if not inline_rules and not html_attributes:
        return html
    # the doctype is carried over verbatim; html.parser would re-case it
    doctype = DOCTYPE_PATTERN.match(html)
    preamble = doctype.group(0) if doctype else ""
    soup = BeautifulSoup(
        _guard_text(html[len(preamble) :]), "html.parser", multi_valued_attributes=None
    )
    inline_css(soup, inline_rules, errors)
    apply_html_attributes(soup, html_attributes, errors)
    return preamble + _unguard_text(soup.decode(formatter=SourceOrderFormatter()))


__all__ = [
    "CssRule",
    "SourceOrderFormatter",
    "apply_html_attributes",
    "inline_css",
    "merge_styles",
    "parse_css_rules",
    "parse_declarations",
    "post_process",
]
