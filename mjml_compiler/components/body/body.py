"""``mj-body``: the root of the rendered markup."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..._constants import DEFAULT_CONTAINER_WIDTH
from ..base import BodyComponent, SiblingProps, Styles
from ..box import parse_width

if typ.TYPE_CHECKING:
    from ...renderer.context import RenderContext


class Body(BodyComponent):
    """Establishes the document width and wraps every section in an article ``div``."""

    tag_name = "mj-body"
    default_attributes: typ.ClassVar[dict[str, str]] = {"width": "600px"}

    @classmethod
    def child_context(
        cls,
        attributes: cabc.Mapping[str, str],
        props: SiblingProps,
        context: RenderContext,
    ) -> dict[str, typ.Any]:
        overrides = super().child_context(attributes, props, context)
        parsed = parse_width(attributes.get("width"))
        overrides["container_width"] = (
            int(parsed.value) if parsed is not None else DEFAULT_CONTAINER_WIDTH
        )
        return overrides

    def get_styles(self) -> Styles:
        return {"div": {"background-color": self.get_attribute("background-color")}}

    def render(self) -> str:
        attrs = {
            "style": "div",
            "aria-label": self.context.title or None,
            "aria-roledescription": "email",
            "class": self.get_attribute("css-class"),
            "role": "article",
            "lang": self.context.language,
            "dir": self.context.direction,
        }
        return f"<div{self.html_attributes(attrs)}>{self.render_children()}</div>"


__all__ = ["Body"]
