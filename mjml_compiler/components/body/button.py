"""``mj-button``: a bulletproof call-to-action link."""

from __future__ import annotations

import typing as typ

from ..base import BodyComponent, Styles
from ..box import BoxModel, parse_width
from .text import DEFAULT_FONT_FAMILY


class Button(BodyComponent):
    tag_name = "mj-button"
    ending_tag = True
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "align": "center",
        "background-color": "#414141",
        "border": "none",
        "border-radius": "3px",
        "color": "#ffffff",
        "font-family": DEFAULT_FONT_FAMILY,
        "font-size": "13px",
        "font-weight": "normal",
        "inner-padding": "10px 25px",
        "line-height": "120%",
        "padding": "10px 25px",
        "target": "_blank",
        "text-decoration": "none",
        "text-transform": "none",
        "vertical-align": "middle",
    }

    def content_width(self) -> str | None:
        """Return the link width for px widths; percentages cannot be honoured."""
        parsed = parse_width(self.get_attribute("width"))
        if parsed is None or parsed.is_percent:
            return None
        box = BoxModel(self.attributes, self.context.container_width)
        inner = box.horizontal_paddings("inner-padding")
        return f"{int(parsed.value - inner - box.horizontal_borders())}px"

    def get_styles(self) -> Styles:
        return {
            "table": {
                "border-collapse": "separate",
                "width": self.get_attribute("width"),
                "line-height": "100%",
            },
            "td": {
                "border": self.get_attribute("border"),
                "border-bottom": self.get_attribute("border-bottom"),
                "border-left": self.get_attribute("border-left"),
                "border-radius": self.get_attribute("border-radius"),
                "border-right": self.get_attribute("border-right"),
                "border-top": self.get_attribute("border-top"),
                "cursor": "auto",
                "font-style": self.get_attribute("font-style"),
                "height": self.get_attribute("height"),
                "mso-padding-alt": self.get_attribute("inner-padding"),
                "text-align": self.get_attribute("text-align"),
                "background": self.get_attribute("background-color"),
            },
            "content": {
                "display": "inline-block",
                "width": self.content_width(),
                "background": self.get_attribute("background-color"),
                "color": self.get_attribute("color"),
                "font-family": self.get_attribute("font-family"),
                "font-size": self.get_attribute("font-size"),
                "font-style": self.get_attribute("font-style"),
                "font-weight": self.get_attribute("font-weight"),
                "line-height": self.get_attribute("line-height"),
                "letter-spacing": self.get_attribute("letter-spacing"),
                "margin": "0",
                "text-decoration": self.get_attribute("text-decoration"),
                "text-transform": self.get_attribute("text-transform"),
                "padding": self.get_attribute("inner-padding"),
                "mso-padding-alt": "0px",
                "border-radius": self.get_attribute("border-radius"),
            },
        }

    def render(self) -> str:
        href = self.get_attribute("href")
        tag = "a" if href else "p"
        background = self.get_attribute("background-color")
        link_attrs = {
            "href": href,
            "name": self.get_attribute("name"),
            "rel": self.get_attribute("rel"),
            "title": self.get_attribute("title"),
            "style": "content",
            "target": self.get_attribute("target") if tag == "a" else None,
        }
        table_attrs = {
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "role": "presentation",
            "style": "table",
        }
        td_attrs = {
            "align": "center",
            "bgcolor": None if background == "none" else background,
            "role": "presentation",
            "style": "td",
            "valign": self.get_attribute("vertical-align"),
        }
        return (
            f"<table{self.html_attributes(table_attrs)}><tbody><tr>"
            f"<td{self.html_attributes(td_attrs)}>"
            f"<{tag}{self.html_attributes(link_attrs)}> {self.get_content()} </{tag}>"
            "</td></tr></tbody></table>"
        )


__all__ = ["Button"]
