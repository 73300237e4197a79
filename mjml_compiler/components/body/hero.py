"""``mj-hero``: a full-width banner with a background image behind content."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..base import BodyComponent, SiblingProps, Styles
from ..box import BoxModel, leading_int
from ..conditional import conditional_tag
from .column import PADDING_ATTRIBUTES

if typ.TYPE_CHECKING:
    from ...renderer.context import RenderContext

INNER_PADDING_ATTRIBUTES = tuple(f"inner-{name}" for name in PADDING_ATTRIBUTES)


class Hero(BodyComponent):
    tag_name = "mj-hero"
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "mode": "fixed-height",
        "height": "0px",
        "background-position": "center center",
        "padding": "0px",
        "background-color": "#ffffff",
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
        overrides["container_width"] = context.container_width - box.horizontal_paddings()
        return overrides

    def background_ratio(self) -> int:
        """Return background height as a percentage of its width, or 0."""
        height = self.get_attribute("background-height")
        width = self.get_attribute("background-width")
        if height is None or width is None:
            return 0
        width_value = leading_int(width)
        if width_value <= 0:
            return 0
        return round(leading_int(height) / width_value * 100)

    def background(self) -> str:
        parts = [self.get_attribute("background-color")]
        if url := self.get_attribute("background-url"):
            parts += [
                f"url('{url}')",
                "no-repeat",
                f"{self.get_attribute('background-position')} / cover",
            ]
        return " ".join(part for part in parts if part)

    def get_styles(self) -> Styles:
        container_width = self.context.container_width
        return {
            "div": {"margin": "0 auto", "max-width": f"{container_width}px"},
            "table": {"width": "100%"},
            "tr": {"vertical-align": "top"},
            "td-fluid": {
                "width": "0.01%",
                "padding-bottom": f"{self.background_ratio()}%",
                "mso-padding-bottom-alt": "0",
            },
            "outlook-table": {"width": f"{container_width}px"},
            "outlook-td": {
                "line-height": "0",
                "font-size": "0",
                "mso-line-height-rule": "exactly",
            },
            "outlook-inner-table": {"width": f"{container_width}px"},
            "outlook-image": {
                "border": "0",
                "height": self.get_attribute("background-height"),
                "mso-position-horizontal": "center",
                "position": "absolute",
                "top": "0",
                "width": self.get_attribute("background-width") or f"{container_width}px",
                "z-index": "-3",
            },
            "outlook-inner-td": {
                "background-color": self.get_attribute("inner-background-color"),
                **{
                    name.removeprefix("inner-"): self.get_attribute(name)
                    for name in INNER_PADDING_ATTRIBUTES
                },
            },
            "inner-table": {"width": "100%", "margin": "0px"},
            "inner-div": {
                "background-color": self.get_attribute("inner-background-color"),
                "float": self.get_attribute("align"),
                "margin": "0px auto",
                "width": self.get_attribute("width"),
            },
        }

    def render_child(self, child: BodyComponent) -> str:
        background = child.get_attribute("container-background-color")
        attrs = {
            "align": child.get_attribute("align"),
            "background": background,
            "class": child.get_attribute("css-class"),
            "style": {
                "background": background,
                "font-size": "0px",
                **{name: child.get_attribute(name) for name in PADDING_ATTRIBUTES},
                "word-break": "break-word",
            },
        }
        return f"<tr><td{self.html_attributes(attrs)}>{child.render()}</td></tr>"

    def render_content(self) -> str:
        outlook_table = {
            "align": self.get_attribute("align"),
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "style": "outlook-inner-table",
            "width": self.context.container_width,
        }
        inner_div = {
            "align": self.get_attribute("align"),
            "class": "mj-hero-content",
            "style": "inner-div",
        }
        inner_table = self.html_attributes(
            {
                "border": "0",
                "cellpadding": "0",
                "cellspacing": "0",
                "role": "presentation",
                "style": "inner-table",
            }
        )
        rows = self.render_children(renderer=self.render_child)
        return (
            conditional_tag(
                f"<table{self.html_attributes(outlook_table)}><tr>"
                f"<td{self.html_attributes({'style': 'outlook-inner-td'})}>"
            )
            + f"<div{self.html_attributes(inner_div)}>"
            f"<table{inner_table}><tbody><tr><td>"
            f"<table{inner_table}><tbody>{rows}</tbody></table>"
            "</td></tr></tbody></table></div>"
            + conditional_tag("</td></tr></table>")
        )

    def render_mode(self) -> str:
        style = {
            "background": self.background(),
            "background-position": self.get_attribute("background-position"),
            "background-repeat": "no-repeat",
            "border-radius": self.get_attribute("border-radius"),
            **{name: self.get_attribute(name) for name in PADDING_ATTRIBUTES},
            "vertical-align": self.get_attribute("vertical-align"),
        }
        background_url = self.get_attribute("background-url")
        if self.get_attribute("mode") == "fluid-height":
            magic = self.html_attributes({"style": "td-fluid"})
            cell = self.html_attributes({"background": background_url, "style": style})
            return f"<td{magic} /><td{cell}>{self.render_content()}</td><td{magic} />"

        box = BoxModel(self.attributes, self.context.container_width)
        height = (
            leading_int(self.get_attribute("height"))
            - box.shorthand("padding", "top")
            - box.shorthand("padding", "bottom")
        )
        attrs = {
            "background": background_url,
            "style": {**style, "height": f"{height}px"},
            "height": height,
        }
        return f"<td{self.html_attributes(attrs)}>{self.render_content()}</td>"

    def render(self) -> str:
        container_width = self.context.container_width
        outlook_table = {
            "align": "center",
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "role": "presentation",
            "style": "outlook-table",
            "width": container_width,
        }
        image = {
            "style": "outlook-image",
            "src": self.get_attribute("background-url"),
            "xmlns:v": "urn:schemas-microsoft-com:vml",
        }
        div = {
            "align": self.get_attribute("align"),
            "class": self.get_attribute("css-class"),
            "style": "div",
        }
        table = {
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "role": "presentation",
            "style": "table",
        }
        return (
            conditional_tag(
                f"<table{self.html_attributes(outlook_table)}><tr>"
                f"<td{self.html_attributes({'style': 'outlook-td'})}>"
                f"<v:image{self.html_attributes(image)} />"
            )
            + f"<div{self.html_attributes(div)}><table{self.html_attributes(table)}>"
            f"<tbody><tr{self.html_attributes({'style': 'tr'})}>{self.render_mode()}</tr>"
            "</tbody></table></div>"
            + conditional_tag("</td></tr></table>")
        )


__all__ = ["Hero"]
