"""Outlook conditional-comment helpers used while rendering components."""

from __future__ import annotations

import re

from .._constants import (
    END_CONDITIONAL_TAG,
    END_NEGATION_CONDITIONAL_TAG,
    START_CONDITIONAL_TAG,
    START_MSO_CONDITIONAL_TAG,
    START_MSO_NEGATION_CONDITIONAL_TAG,
    START_NEGATION_CONDITIONAL_TAG,
)

ADJACENT_CONDITIONALS = re.compile(
    re.escape(END_CONDITIONAL_TAG) + r"\s*" + re.escape(START_CONDITIONAL_TAG)
)
PLAIN_COMMENT = re.compile(r"<!--(?!\[if |<!\[endif\]|>).*?-->", re.DOTALL)


def conditional_tag(content: str, *, negation: bool = False) -> str:
    """Wrap ``content`` so only Outlook/IE (or everything else) sees it."""
    if negation:
        return f"{START_NEGATION_CONDITIONAL_TAG}{content}{END_NEGATION_CONDITIONAL_TAG}"
    return f"{START_CONDITIONAL_TAG}{content}{END_CONDITIONAL_TAG}"


def mso_conditional_tag(content: str, *, negation: bool = False) -> str:
    """Like :func:`conditional_tag` but targeting ``mso`` only."""
    if negation:
        return f"{START_MSO_NEGATION_CONDITIONAL_TAG}{content}{END_NEGATION_CONDITIONAL_TAG}"
    return f"{START_MSO_CONDITIONAL_TAG}{content}{END_CONDITIONAL_TAG}"


def merge_outlook_conditionals(html: str) -> str:
    """Collapse back-to-back ``mso | IE`` blocks into a single block.

    >>> merge_outlook_conditionals("<!--[if mso | IE]><a><![endif]-->\\n<!--[if mso | IE]></a><![endif]-->")
    '<!--[if mso | IE]><a></a><![endif]-->'
    """
    return ADJACENT_CONDITIONALS.sub("", html)


def strip_comments(html: str) -> str:
    """Remove HTML comments except Outlook conditional markers.

    >>> strip_comments("<p><!-- note -->x</p><!--[if mso]><b><![endif]-->")
    '<p>x</p><!--[if mso]><b><![endif]-->'
    """
    return PLAIN_COMMENT.sub("", html)


def suffix_css_classes(classes: str | None, suffix: str) -> str:
    """Append ``-suffix`` to every class name in ``classes``.

    >>> suffix_css_classes("hero wide", "outlook")
    'hero-outlook wide-outlook'
    """
    if not classes:
        return ""
    return " ".join(f"{name}-{suffix}" for name in classes.split())


__all__ = [
    "conditional_tag",
    "merge_outlook_conditionals",
    "mso_conditional_tag",
    "strip_comments",
    "suffix_css_classes",
]
