"""Components that live in ``mj-head`` and configure the whole compile.

Each one runs once, in document order, before any body component is built.
Later head tags overwrite scalar settings from earlier ones (the last
``mj-title`` wins) and merge into keyed ones (fonts, attribute buckets).
"""

from __future__ import annotations

import logging
import typing as typ

from .base import HeadComponent

if typ.TYPE_CHECKING:
    from ..renderer.context import RenderContext

logger = logging.getLogger(__name__)


class Attributes(HeadComponent):
    """``mj-attributes``: default attributes for tags, classes and everything.

    ``mj-all`` and per-tag entries merge across repeats. A repeated ``mj-class``
    name replaces the earlier definition, nested tag defaults included.
    """

    tag_name = "mj-attributes"

    def handle(self, context: RenderContext) -> None:
        cascade = context.head_attributes
        for child in self.children:
            attrs = dict(child.attributes)
            match child.tag_name:
                case "mj-all":
                    cascade.global_attributes.update(attrs)
                case "mj-class":
                    name = attrs.pop("name", "").strip()
                    if not name:
                        logger.debug("Skipping mj-class without a name")
                        continue
                    cascade.classes[name] = attrs
                    nested: dict[str, dict[str, str]] = {}
                    for grandchild in child.children:
                        nested.setdefault(grandchild.tag_name, {}).update(
                            grandchild.attributes
                        )
                    cascade.class_defaults[name] = nested
                case tag_name:
                    cascade.tag_attributes.setdefault(tag_name, {}).update(attrs)


class Breakpoint(HeadComponent):
    """``mj-breakpoint``: the width at which columns stop stacking."""

    tag_name = "mj-breakpoint"

    def handle(self, context: RenderContext) -> None:
        width = (self.get_attribute("width") or "").strip()
        if width:
            context.breakpoint = width


class Font(HeadComponent):
    """``mj-font``: a web font imported only if the body uses it."""

    tag_name = "mj-font"

    def handle(self, context: RenderContext) -> None:
        name = (self.get_attribute("name") or "").strip()
        href = (self.get_attribute("href") or "").strip()
        if not name or not href:
            logger.debug("Skipping mj-font without both name and href")
            return
        context.fonts[name] = href


class HtmlAttributes(HeadComponent):
    """``mj-html-attributes``: attributes added to elements matching a selector.

    .. code-block:: xml

        <mj-html-attributes>
          <mj-selector path=".custom div">
            <mj-html-attribute name="data-id">42</mj-html-attribute>
          </mj-selector>
        </mj-html-attributes>
    """

    tag_name = "mj-html-attributes"

    def handle(self, context: RenderContext) -> None:
        for selector in self.children:
            if selector.tag_name != "mj-selector":
                continue
            path = (selector.attributes.get("path") or "").strip()
            if not path:
                continue
            collected: dict[str, str] = {}
            for attribute in selector.children:
                if attribute.tag_name != "mj-html-attribute":
                    continue
                name = (attribute.attributes.get("name") or "").strip()
                if name:
                    collected[name] = attribute.content
            if collected:
                context.global_data.add_html_attributes(path, collected)


class Preview(HeadComponent):
    """``mj-preview``: the inbox preview text."""

    tag_name = "mj-preview"
    ending_tag = True

    def handle(self, context: RenderContext) -> None:
        context.preview = self.content


class Style(HeadComponent):
    """``mj-style``: author CSS, either kept in the head or inlined."""

    tag_name = "mj-style"
    ending_tag = True

    def handle(self, context: RenderContext) -> None:
        css = self.content.strip()
        if not css:
            return
        if self.get_attribute("inline") == "inline":
            context.global_data.add_inline_style_rule(css)
        else:
            context.global_data.add_component_head_style(css)


class Title(HeadComponent):
    """``mj-title``: the document ``<title>`` and the body's aria-label."""

    tag_name = "mj-title"
    ending_tag = True

    def handle(self, context: RenderContext) -> None:
        context.title = self.content


HEAD_COMPONENTS: tuple[type[HeadComponent], ...] = (
    Attributes,
    Breakpoint,
    Font,
    HtmlAttributes,
    Preview,
    Style,
    Title,
)

__all__ = [
    "HEAD_COMPONENTS",
    "Attributes",
    "Breakpoint",
    "Font",
    "HtmlAttributes",
    "Preview",
    "Style",
    "Title",
]
