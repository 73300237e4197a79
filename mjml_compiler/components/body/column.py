"""``mj-column`` and ``mj-group``: the width-bearing cells inside a section."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..._constants import GROUP_SLOT
from ..base import BodyComponent, SiblingProps, Styles
from ..box import BoxModel, ParsedWidth, width_class_name
from ..conditional import conditional_tag, suffix_css_classes

if typ.TYPE_CHECKING:
    from ...renderer.context import RenderContext

PADDING_ATTRIBUTES = (
    "padding",
    "padding-top",
    "padding-right",
    "padding-bottom",
    "padding-left",
)


def render_child_row(parent: BodyComponent, child: BodyComponent) -> str:
    """Render ``child`` inside a ``<tr><td>`` carrying its container styles."""
    attrs = {
        "align": child.get_attribute("align"),
        "vertical-align": child.get_attribute("vertical-align"),
        "class": child.get_attribute("css-class"),
        "style": {
            "background": child.get_attribute("container-background-color"),
            "font-size": "0px",
            **{name: child.get_attribute(name) for name in PADDING_ATTRIBUTES},
            "word-break": "break-word",
        },
    }
    return f"<tr><td{parent.html_attributes(attrs)}>{child.render()}</td></tr>"


class _WidthMixin:
    """Width helpers shared by columns and groups."""

    attributes: dict[str, str]
    props: SiblingProps
    context: RenderContext

    def box(self) -> BoxModel:
        return BoxModel(self.attributes, self.context.container_width)

    def parsed_width(self) -> ParsedWidth:
        """Return the declared width, or an even percentage of the section."""
        return self.box().declared_width_percent(self.props.non_raw_sibling_count)

    def width_as_pixel(self) -> str:
        parsed = self.parsed_width()
        return f"{int(parsed.to_pixels(self.context.container_width))}px"

    def column_class(self) -> str:
        """Return the width class and register its desktop media query."""
        parsed = self.parsed_width()
        name = width_class_name(parsed)
        self.context.global_data.add_media_query(name, parsed.value, parsed.unit)
        return name


class Column(_WidthMixin, BodyComponent):
    """A vertical stack of content blocks that collapses to full width on mobile."""

    tag_name = "mj-column"
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "direction": "ltr",
        "vertical-align": "top",
    }

    @classmethod
    def child_context(
        cls,
        attributes: cabc.Mapping[str, str],
        props: SiblingProps,
        context: RenderContext,
    ) -> dict[str, typ.Any]:
        overrides = super().child_context(attributes, props, context)
        box = BoxModel(attributes, context.container_width)
        overrides["container_width"] = box.content_width(
            props.non_raw_sibling_count, extra_border_attributes=("inner-border",)
        )
        return overrides

    def has_gutter(self) -> bool:
        return any(
            self.get_attribute(name) is not None for name in PADDING_ATTRIBUTES
        )

    def mobile_width(self) -> str:
        """Columns stack at 100% unless a group keeps them side by side."""
        if not self.context.read_component_data(GROUP_SLOT):
            return "100%"
        return self.box().mobile_width(self.props.non_raw_sibling_count)

    def get_styles(self) -> Styles:
        table_style = {
            "background-color": self.get_attribute("background-color"),
            "border": self.get_attribute("border"),
            "border-bottom": self.get_attribute("border-bottom"),
            "border-left": self.get_attribute("border-left"),
            "border-radius": self.get_attribute("border-radius"),
            "border-right": self.get_attribute("border-right"),
            "border-top": self.get_attribute("border-top"),
            "vertical-align": self.get_attribute("vertical-align"),
        }
        if self.get_attribute("border-radius"):
            table_style["border-collapse"] = "separate"
        if self.has_gutter():
            table = {
                "background-color": self.get_attribute("inner-background-color"),
                "border": self.get_attribute("inner-border"),
                "border-bottom": self.get_attribute("inner-border-bottom"),
                "border-left": self.get_attribute("inner-border-left"),
                "border-radius": self.get_attribute("inner-border-radius"),
                "border-right": self.get_attribute("inner-border-right"),
                "border-top": self.get_attribute("inner-border-top"),
            }
        else:
            table = dict(table_style)
        if self.get_attribute("inner-border-radius"):
            table["border-collapse"] = "separate"
        return {
            "div": {
                "font-size": "0px",
                "text-align": "left",
                "direction": self.get_attribute("direction"),
                "display": "inline-block",
                "vertical-align": self.get_attribute("vertical-align"),
                "width": self.mobile_width(),
            },
            "table": table,
            "td-outlook": {
                "vertical-align": self.get_attribute("vertical-align"),
                "width": self.width_as_pixel(),
            },
            "gutter": {
                **table_style,
                **{name: self.get_attribute(name) for name in PADDING_ATTRIBUTES},
            },
        }

    def render_column(self) -> str:
        attrs = {
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "role": "presentation",
            "style": "table",
            "width": "100%",
        }
        rows = self.render_children(renderer=lambda child: render_child_row(self, child))
        return f"<table{self.html_attributes(attrs)}><tbody>{rows}</tbody></table>"

    def render_gutter(self) -> str:
        attrs: dict[str, typ.Any] = {
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "role": "presentation",
            "width": "100%",
        }
        if self.get_attribute("border-radius"):
            attrs["style"] = {"border-collapse": "separate"}
        return (
            f"<table{self.html_attributes(attrs)}><tbody><tr>"
            f"<td{self.html_attributes({'style': 'gutter'})}>{self.render_column()}</td>"
            "</tr></tbody></table>"
        )

    def render(self) -> str:
        classes = f"{self.column_class()} mj-outlook-group-fix"
        if css_class := self.get_attribute("css-class"):
            classes = f"{classes} {css_class}"
        inner = self.render_gutter() if self.has_gutter() else self.render_column()
        return f"<div{self.html_attributes({'class': classes, 'style': 'div'})}>{inner}</div>"


class Group(_WidthMixin, BodyComponent):
    """Columns that stay side by side on mobile instead of stacking."""

    tag_name = "mj-group"
    default_attributes: typ.ClassVar[dict[str, str]] = {"direction": "ltr"}

    @classmethod
    def child_context(
        cls,
        attributes: cabc.Mapping[str, str],
        props: SiblingProps,
        context: RenderContext,
    ) -> dict[str, typ.Any]:
        overrides = super().child_context(attributes, props, context)
        box = BoxModel(attributes, context.container_width)
        overrides["container_width"] = box.content_width(props.non_raw_sibling_count)
        overrides["component_data"] = {GROUP_SLOT: True}
        return overrides

    def get_styles(self) -> Styles:
        return {
            "div": {
                "font-size": "0",
                "line-height": "0",
                "text-align": "left",
                "display": "inline-block",
                "width": "100%",
                "direction": self.get_attribute("direction"),
                "vertical-align": self.get_attribute("vertical-align"),
                "background-color": self.get_attribute("background-color"),
            },
            "td-outlook": {
                "vertical-align": self.get_attribute("vertical-align"),
                "width": self.width_as_pixel(),
            },
        }

    def render(self) -> str:
        classes = f"{self.column_class()} mj-outlook-group-fix"
        if css_class := self.get_attribute("css-class"):
            classes = f"{classes} {css_class}"
        background = self.get_attribute("background-color")
        table_attrs = {
            "bgcolor": None if background == "none" else background,
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "role": "presentation",
        }
        fallback_width = f"{int(self.context.container_width / max(len(self.children), 1))}px"

        def _wrap(child: BodyComponent) -> str:
            width = child.get_styles().get("td-outlook", {}).get("width")
            attrs = {
                "class": suffix_css_classes(child.get_attribute("css-class"), "outlook"),
                "style": {
                    "vertical-align": child.get_attribute("vertical-align"),
                    "width": width or fallback_width,
                },
            }
            return (
                conditional_tag(f"<td{self.html_attributes(attrs)}>")
                + child.render()
                + conditional_tag("</td>")
            )

        return (
            f"<div{self.html_attributes({'class': classes, 'style': 'div'})}>"
            + conditional_tag(f"<table{self.html_attributes(table_attrs)}><tr>")
            + self.render_children(renderer=_wrap)
            + conditional_tag("</tr></table>")
            + "</div>"
        )


__all__ = ["Column", "Group", "render_child_row"]
