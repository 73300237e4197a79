"""Separators: ``mj-divider`` and ``mj-spacer``."""

from __future__ import annotations

import typing as typ

from ..base import BodyComponent, Styles
from ..box import BoxModel, parse_width
from ..conditional import conditional_tag


class Divider(BodyComponent):
    """A horizontal rule drawn with a top border."""

    tag_name = "mj-divider"
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "align": "center",
        "border-color": "#000000",
        "border-style": "solid",
        "border-width": "4px",
        "padding": "10px 25px",
        "width": "100%",
    }

    def margin(self) -> str:
        match self.get_attribute("align"):
            case "left":
                return "0px"
            case "right":
                return "0px 0px 0px auto"
            case _:
                return "0px auto"

    def outlook_width(self) -> str:
        """Return the pixel width Outlook needs in place of a percentage."""
        box = BoxModel(self.attributes, self.context.container_width)
        available = self.context.container_width - box.horizontal_paddings()
        parsed = parse_width(self.get_attribute("width"))
        if parsed is None:
            return f"{available}px"
        if parsed.is_percent:
            return f"{int(available * parsed.value / 100)}px"
        return f"{int(parsed.value)}px"

    def get_styles(self) -> Styles:
        border_top = " ".join(
            str(self.get_attribute(name))
            for name in ("border-style", "border-width", "border-color")
        )
        common = {"border-top": border_top, "font-size": "1px", "margin": self.margin()}
        return {
            "p": {**common, "width": self.get_attribute("width")},
            "outlook": {**common, "width": self.outlook_width()},
        }

    def render(self) -> str:
        outlook_attrs = {
            "align": self.get_attribute("align"),
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "style": "outlook",
            "role": "presentation",
            "width": self.outlook_width(),
        }
        outlook = conditional_tag(
            f"<table{self.html_attributes(outlook_attrs)}><tr>"
            '<td style="height:0;line-height:0;"> &nbsp;\n</td></tr></table>'
        )
        return f"<p{self.html_attributes({'style': 'p'})}></p>{outlook}"


class Spacer(BodyComponent):
    """Vertical whitespace of a fixed height."""

    tag_name = "mj-spacer"
    default_attributes: typ.ClassVar[dict[str, str]] = {"height": "20px"}

    def get_styles(self) -> Styles:
        height = self.get_attribute("height")
        return {"div": {"height": height, "line-height": height}}

    def render(self) -> str:
        return f"<div{self.html_attributes({'style': 'div'})}>&#8202;</div>"


__all__ = ["Divider", "Spacer"]
