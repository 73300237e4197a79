"""Content tags whose markup is taken verbatim from the source document."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from ..base import BodyComponent, Styles
from ..box import format_number, parse_width
from ..conditional import conditional_tag

DEFAULT_FONT_FAMILY = "Ubuntu, Helvetica, Arial, sans-serif"
NON_NUMERIC = re.compile(r"[^\d.]")


class Text(BodyComponent):
    """``mj-text``: a styled block of arbitrary HTML."""

    tag_name = "mj-text"
    ending_tag = True
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "align": "left",
        "color": "#000000",
        "font-family": DEFAULT_FONT_FAMILY,
        "font-size": "13px",
        "line-height": "1",
        "padding": "10px 25px",
    }

    def get_styles(self) -> Styles:
        return {
            "text": {
                "font-family": self.get_attribute("font-family"),
                "font-size": self.get_attribute("font-size"),
                "font-style": self.get_attribute("font-style"),
                "font-weight": self.get_attribute("font-weight"),
                "letter-spacing": self.get_attribute("letter-spacing"),
                "line-height": self.get_attribute("line-height"),
                "text-align": self.get_attribute("align"),
                "text-decoration": self.get_attribute("text-decoration"),
                "text-transform": self.get_attribute("text-transform"),
                "color": self.get_attribute("color"),
                "height": self.get_attribute("height"),
            }
        }

    def render_content(self) -> str:
        return f"<div{self.html_attributes({'style': 'text'})}>{self.get_content()}</div>"

    def render(self) -> str:
        height = self.get_attribute("height")
        if not height:
            return self.render_content()
        safe = escape(height, quote=True)
        return (
            conditional_tag(
                '<table role="presentation" border="0" cellpadding="0" cellspacing="0">'
                f'<tr><td height="{safe}" style="vertical-align:top;height:{safe};">'
            )
            + self.render_content()
            + conditional_tag("</td></tr></table>")
        )


class Raw(BodyComponent):
    """``mj-raw``: markup passed through untouched and ignored by layout."""

    tag_name = "mj-raw"
    ending_tag = True
    raw_element = True

    def render(self) -> str:
        return self.get_content()


class Table(BodyComponent):
    """``mj-table``: an HTML table body with email-safe defaults."""

    tag_name = "mj-table"
    ending_tag = True
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "align": "left",
        "border": "none",
        "cellpadding": "0",
        "cellspacing": "0",
        "color": "#000000",
        "font-family": DEFAULT_FONT_FAMILY,
        "font-size": "13px",
        "line-height": "22px",
        "padding": "10px 25px",
        "table-layout": "auto",
        "width": "100%",
    }

    def has_cellspacing(self) -> bool:
        cellspacing = NON_NUMERIC.sub("", self.get_attribute("cellspacing") or "")
        try:
            return float(cellspacing) > 0
        except ValueError:
            return False

    def get_styles(self) -> Styles:
        table = {
            "color": self.get_attribute("color"),
            "font-family": self.get_attribute("font-family"),
            "font-size": self.get_attribute("font-size"),
            "line-height": self.get_attribute("line-height"),
            "table-layout": self.get_attribute("table-layout"),
            "width": self.get_attribute("width"),
            "border": self.get_attribute("border"),
        }
        if self.has_cellspacing():
            table["border-collapse"] = "separate"
        return {"table": table}

    def html_width(self) -> str | None:
        width = self.get_attribute("width")
        if width is None or width == "auto":
            return width
        parsed = parse_width(width)
        if parsed is None or parsed.is_percent:
            return width
        return format_number(parsed.value)

    def render(self) -> str:
        attrs = {
            "cellpadding": self.get_attribute("cellpadding"),
            "cellspacing": self.get_attribute("cellspacing"),
            "role": self.get_attribute("role"),
            "width": self.html_width(),
            "border": "0",
            "style": "table",
        }
        return f"<table{self.html_attributes(attrs)}>{self.get_content()}</table>"


__all__ = ["DEFAULT_FONT_FAMILY", "Raw", "Table", "Text"]
