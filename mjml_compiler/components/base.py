"""The component contract shared by every MJML tag.

Two capabilities exist. :class:`HeadComponent` subclasses run once, in
document order, against the root :class:`RenderContext` and record settings
(fonts, breakpoint, attribute defaults) for the whole compile.
:class:`BodyComponent` subclasses resolve their attributes through the head
cascade, describe the context their children should see, and render markup.

The child context is computed by the :meth:`BodyComponent.child_context`
classmethod from resolved attributes, sibling props and the received context
only. The compiler therefore never needs an instance to learn what a
subtree's context will be, and an instance built with no children reports the
same child context as one built with many.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from html import escape

from .._constants import CLASS_DEFAULTS_KEY
from ..renderer.context import RenderContext

if typ.TYPE_CHECKING:
    from ..parser import Node

Attributes = dict[str, str]
StyleMap = dict[str, str | None]
Styles = dict[str, StyleMap]


@dc.dataclass(frozen=True, slots=True)
class SiblingProps:
    """Position of a component among the children of its parent."""

    index: int = 0
    sibling_count: int = 1
    non_raw_sibling_count: int = 1

    @property
    def first(self) -> bool:
        return self.index == 0

    @property
    def last(self) -> bool:
        return self.index == self.sibling_count - 1


def class_names(value: str | None) -> list[str]:
    """Split a space-separated class attribute into names."""
    if not value:
        return []
    return [name for name in value.split() if name and name != CLASS_DEFAULTS_KEY]


class Component:
    """Base for head and body components."""

    tag_name: typ.ClassVar[str] = ""
    ending_tag: typ.ClassVar[bool] = False
    raw_element: typ.ClassVar[bool] = False
    default_attributes: typ.ClassVar[cabc.Mapping[str, str]] = {}

    def __init__(
        self,
        attributes: cabc.Mapping[str, str] | None = None,
        children: cabc.Sequence[typ.Any] = (),
        content: str = "",
        context: RenderContext | None = None,
        props: SiblingProps | None = None,
    ) -> None:
        self.context = context or RenderContext.create_root()
        self.props = props or SiblingProps()
        self.raw_attributes: Attributes = dict(attributes or {})
        self.attributes = self.resolve_attributes(self.raw_attributes, self.context)
        self.children = list(children)
        self.content = content

    @classmethod
    def resolve_attributes(
        cls, explicit: cabc.Mapping[str, str], context: RenderContext
    ) -> Attributes:
        """Return the component defaults overlaid with ``explicit`` attributes."""
        return {**cls.default_attributes, **explicit}

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.tag_name!r}>"


class HeadComponent(Component):
    """A tag inside ``mj-head``; its children are raw :class:`Node` objects."""

    children: list[Node]

    def handle(self, context: RenderContext) -> None:
        """Record this tag's settings on ``context`` or its global data."""
        raise NotImplementedError


class BodyComponent(Component):
    """A tag inside ``mj-body`` that renders HTML."""

    children: list[BodyComponent]

    @classmethod
    def resolve_attributes(
        cls, explicit: cabc.Mapping[str, str], context: RenderContext
    ) -> Attributes:
        """Resolve attributes through the head cascade.

        Precedence from lowest to highest: component defaults, ``mj-all``,
        per-tag defaults, class defaults inherited from an ancestor, the
        element's own ``mj-class`` attributes, explicit attributes.
        """
        cascade = context.head_attributes
        merged: Attributes = dict(cls.default_attributes)
        merged.update(cascade.global_attributes)
        merged.update(cascade.for_tag(cls.tag_name))
        merged.update(context.inherited_defaults.get(cls.tag_name, {}))
        merged.update(cascade.for_classes(class_names(explicit.get("mj-class"))))
        merged.update(explicit)
        return merged

    @classmethod
    def child_context(
        cls,
        attributes: cabc.Mapping[str, str],
        props: SiblingProps,
        context: RenderContext,
    ) -> dict[str, typ.Any]:
        """Return the context overrides this tag gives its children.

        The default passes on nested per-tag defaults from any head class the
        element names through ``mj-class`` or ``css-class``.
        """
        names = class_names(attributes.get("mj-class"))
        names += class_names(attributes.get("css-class"))
        nested = context.head_attributes.nested_defaults(names)
        if nested:
            return {"inherited_defaults": nested}
        return {}

    def get_child_context(self) -> dict[str, typ.Any]:
        return type(self).child_context(self.attributes, self.props, self.context)

    def get_styles(self) -> Styles:
        return {}

    def render(self) -> str:
        raise NotImplementedError

    def get_content(self) -> str:
        """Return the tag content without surrounding whitespace.

        The parser already trims it; components built by hand get the same
        treatment.
        """
        return self.content.strip()

    def styles(self, slot: str) -> str:
        """Return the inline CSS string for one slot of :meth:`get_styles`."""
        return self.inline_styles(self.get_styles().get(slot, {}))

    def inline_styles(self, styles: cabc.Mapping[str, str | None]) -> str:
        """Serialize ``styles`` as ``prop:value;`` pairs, skipping empty values."""
        parts: list[str] = []
        for prop, value in styles.items():
            if value is None or value == "":
                continue
            if prop == "font-family":
                for family in str(value).split(","):
                    self.context.global_data.record_font_usage(family)
            parts.append(f"{prop}:{value};")
        return "".join(parts)

    def html_attributes(self, attributes: cabc.Mapping[str, typ.Any]) -> str:
        """Serialize ``attributes`` with a leading space before each one.

        ``None`` and ``False`` drop the attribute, ``True`` emits it bare, and a
        ``style`` value may be a slot name from :meth:`get_styles` or a mapping.
        """
        parts: list[str] = []
        for name, value in attributes.items():
            if name == "style":
                value = self.styles(value) if isinstance(value, str) else self.inline_styles(value or {})
                if not value:
                    continue
            if value is None or value is False or (name == "class" and not value):
                continue
            if value is True:
                parts.append(f" {name}")
                continue
            parts.append(f' {name}="{escape(str(value), quote=True)}"')
        return "".join(parts)

    def render_children(
        self,
        children: cabc.Iterable[BodyComponent] | None = None,
        *,
        renderer: cabc.Callable[[BodyComponent], str] | None = None,
    ) -> str:
        """Render ``children`` (all by default), optionally through ``renderer``."""
        selected = self.children if children is None else children
        rendered: list[str] = []
        for child in selected:
            if child.raw_element or renderer is None:
                rendered.append(child.render())
            else:
                rendered.append(renderer(child))
        return "".join(rendered)


__all__ = [
    "Attributes",
    "BodyComponent",
    "Component",
    "HeadComponent",
    "SiblingProps",
    "Styles",
    "class_names",
]
