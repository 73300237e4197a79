"""Parse MJML source text into an immutable tag tree.

Structural parsing is delegated to BeautifulSoup's ``html.parser`` builder.
Before the markup reaches it, the content of every ending tag (``mj-text``,
``mj-raw`` and friends) is swapped for an opaque placeholder so arbitrary,
possibly invalid, HTML inside those tags survives verbatim.

Examples
--------
>>> from mjml_compiler.parser import parse
>>> root = parse("<mjml><mj-body><mj-text>Hi <b>there</b></mj-text></mj-body></mjml>")
>>> root.find_child("mj-body").children[0].content
'Hi <b>there</b>'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import re
import typing as typ

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

logger = logging.getLogger(__name__)

DEFAULT_ENDING_TAGS: frozenset[str] = frozenset(
    {
        "mj-accordion-text",
        "mj-accordion-title",
        "mj-button",
        "mj-carousel-image",
        "mj-html-attribute",
        "mj-navbar-link",
        "mj-preview",
        "mj-raw",
        "mj-social-element",
        "mj-style",
        "mj-table",
        "mj-text",
        "mj-title",
    }
)

PLACEHOLDER_TEMPLATE = "__MJML_RAW_{index}__"
PLACEHOLDER_PATTERN = re.compile(r"__MJML_RAW_(\d+)__")


class ParserError(ValueError):
    """Raised when MJML source has no usable root element."""


@dc.dataclass(frozen=True, slots=True)
class Node:
    """A single element of the parsed MJML tree."""

    tag_name: str
    attributes: cabc.Mapping[str, str] = dc.field(default_factory=dict)
    children: tuple[Node, ...] = ()
    content: str = ""

    def find_child(self, tag_name: str) -> Node | None:
        """Return the first direct child named ``tag_name``."""
        return next(
            (child for child in self.children if child.tag_name == tag_name), None
        )

    def find_children(self, tag_name: str) -> list[Node]:
        """Return every direct child named ``tag_name`` in document order."""
        return [child for child in self.children if child.tag_name == tag_name]


class MjmlParser:
    """Turn MJML markup into :class:`Node` trees."""

    def __init__(self, ending_tags: cabc.Iterable[str] | None = None) -> None:
        self.ending_tags = frozenset(
            DEFAULT_ENDING_TAGS if ending_tags is None else ending_tags
        )

    def parse(self, source: str) -> Node:
        """Parse ``source`` and return the ``mjml`` root node.

        Parameters
        ----------
        source : str
            Raw MJML document text.

        Returns
        -------
        Node
            The root ``mjml`` node with its descendants.

        Raises
        ------
        ParserError
            If the document does not contain an ``mjml`` root element.
        """
        protected, raw_chunks = self._protect_ending_tags(source)
        soup = BeautifulSoup(
            protected,
            "html.parser",
            multi_valued_attributes=None,
            on_duplicate_attribute="ignore",
        )
        root = soup.find("mjml")
        if not isinstance(root, Tag):
            msg = "Invalid MJML: no root element found"
            raise ParserError(msg)
        return self._build_node(root, raw_chunks)

    def _protect_ending_tags(self, source: str) -> tuple[str, list[str]]:
        """Replace ending-tag bodies with placeholders, returning the chunks."""
        if not self.ending_tags:
            return source, []
        names = "|".join(
            re.escape(name) for name in sorted(self.ending_tags, key=len, reverse=True)
        )
        pattern = re.compile(
            rf"<({names})(\s[^>]*?)?(?<!/)>(.*?)</\1\s*>",
            re.DOTALL | re.IGNORECASE,
        )
        chunks: list[str] = []

        def _repl(match: re.Match[str]) -> str:
            chunks.append(match.group(3))
            placeholder = PLACEHOLDER_TEMPLATE.format(index=len(chunks) - 1)
            return f"<{match.group(1)}{match.group(2) or ''}>{placeholder}</{match.group(1)}>"

        return pattern.sub(_repl, source), chunks

    def _build_node(self, element: Tag, raw_chunks: list[str]) -> Node:
        """Convert ``element`` and its descendants into :class:`Node` objects.

        Content is trimmed of leading and trailing whitespace, as mjml does for
        every tag including ``mj-raw``. Whitespace inside the content is kept.
        """
        children: list[Node] = []
        text_parts: list[str] = []
        for item in element.children:
            match item:
                case Comment():
                    continue
                case Tag():
                    children.append(self._build_node(item, raw_chunks))
                case NavigableString():
                    text_parts.append(str(item))
                case _:
                    logger.debug("Ignoring %r inside <%s>", item, element.name)
        content = _restore_placeholders("".join(text_parts), raw_chunks).strip()
        attributes = {str(key): _attribute_value(value) for key, value in element.attrs.items()}
        return Node(
            tag_name=element.name,
            attributes=attributes,
            children=tuple(children),
            content=content,
        )


def _attribute_value(value: typ.Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(str(part) for part in value)
    return str(value)


def _restore_placeholders(text: str, raw_chunks: list[str]) -> str:
    return PLACEHOLDER_PATTERN.sub(lambda m: raw_chunks[int(m.group(1))], text)


def parse(source: str, *, ending_tags: cabc.Iterable[str] | None = None) -> Node:
    """Parse ``source`` with a default :class:`MjmlParser`."""
    return MjmlParser(ending_tags).parse(source)


__all__ = [
    "DEFAULT_ENDING_TAGS",
    "MjmlParser",
    "Node",
    "ParserError",
    "parse",
]
