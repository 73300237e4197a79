"""``mj-image``: a responsive image, optionally linked."""

from __future__ import annotations

import typing as typ

from ..base import BodyComponent, Styles
from ..box import BoxModel, parse_width

FLUID_CLASS = "mj-full-width-mobile"


def lower_breakpoint(breakpoint: str) -> str:
    """Return the pixel width one below ``breakpoint`` (``480px`` -> ``479px``)."""
    parsed = parse_width(breakpoint)
    if parsed is None:
        return breakpoint
    return f"{int(parsed.value) - 1}px"


class Image(BodyComponent):
    tag_name = "mj-image"
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "alt": "",
        "align": "center",
        "border": "0",
        "height": "auto",
        "padding": "10px 25px",
        "target": "_blank",
        "font-size": "13px",
    }

    def content_width(self) -> int:
        """Return the rendered width: the box width, capped by ``width``."""
        box = BoxModel(self.attributes, self.context.container_width).widths()
        parsed = parse_width(self.get_attribute("width"))
        if parsed is None:
            return box.content
        return min(box.content, int(parsed.value))

    def get_styles(self) -> Styles:
        width = f"{self.content_width()}px"
        full_width = self.get_attribute("full-width") == "full-width"
        return {
            "img": {
                "border": self.get_attribute("border"),
                "border-left": self.get_attribute("border-left"),
                "border-right": self.get_attribute("border-right"),
                "border-top": self.get_attribute("border-top"),
                "border-bottom": self.get_attribute("border-bottom"),
                "border-radius": self.get_attribute("border-radius"),
                "display": "block",
                "outline": "none",
                "text-decoration": "none",
                "height": self.get_attribute("height"),
                "max-height": self.get_attribute("max-height"),
                "min-width": "100%" if full_width else None,
                "width": "100%",
                "max-width": "100%" if full_width else None,
                "font-size": self.get_attribute("font-size"),
            },
            "td": {"width": None if full_width else width},
            "table": {
                "min-width": "100%" if full_width else None,
                "max-width": "100%" if full_width else None,
                "width": width if full_width else None,
                "border-collapse": "collapse",
                "border-spacing": "0px",
            },
        }

    def register_fluid_style(self) -> None:
        breakpoint = lower_breakpoint(self.context.breakpoint)
        self.context.global_data.add_head_style(
            self.tag_name,
            f"@media only screen and (max-width:{breakpoint}) {{ "
            f"table.{FLUID_CLASS} {{ width: 100% !important; }} "
            f"td.{FLUID_CLASS} {{ width: auto !important; }} }}",
        )

    def render_image(self) -> str:
        height = self.get_attribute("height")
        if height and height != "auto":
            parsed = parse_width(height)
            height = str(int(parsed.value)) if parsed is not None else height
        img_attrs = {
            "alt": self.get_attribute("alt"),
            "src": self.get_attribute("src"),
            "srcset": self.get_attribute("srcset"),
            "sizes": self.get_attribute("sizes"),
            "style": "img",
            "title": self.get_attribute("title"),
            "width": self.content_width(),
            "usemap": self.get_attribute("usemap"),
            "height": height or None,
        }
        img = f"<img{self.html_attributes(img_attrs)} />"
        href = self.get_attribute("href")
        if not href:
            return img
        link_attrs = {
            "href": href,
            "target": self.get_attribute("target"),
            "rel": self.get_attribute("rel"),
            "name": self.get_attribute("name"),
            "title": self.get_attribute("title"),
        }
        return f"<a{self.html_attributes(link_attrs)}>{img}</a>"

    def render(self) -> str:
        self.register_fluid_style()
        fluid = FLUID_CLASS if self.get_attribute("fluid-on-mobile") else None
        table_attrs = {
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "role": "presentation",
            "style": "table",
            "class": fluid,
        }
        td_attrs = {"style": "td", "class": fluid}
        return (
            f"<table{self.html_attributes(table_attrs)}><tbody><tr>"
            f"<td{self.html_attributes(td_attrs)}>{self.render_image()}</td>"
            "</tr></tbody></table>"
        )


__all__ = ["Image", "lower_breakpoint"]
