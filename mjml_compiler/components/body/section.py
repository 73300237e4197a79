"""``mj-section`` and ``mj-wrapper``: full-row containers.

Both render a centred ``div`` with a ``max-width`` of the container plus an
Outlook-only table scaffold, and optionally a VML rectangle carrying the
background image for Outlook. A wrapper nests whole sections and may space
them apart with ``gap``.
"""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ

from ..._constants import GAP_SLOT
from ..base import BodyComponent, SiblingProps, Styles
from ..box import BoxModel, format_number
from ..conditional import conditional_tag, suffix_css_classes

if typ.TYPE_CHECKING:
    from ...renderer.context import RenderContext

PERCENTAGE = re.compile(r"^\d+(\.\d+)?%$")


class Section(BodyComponent):
    """A horizontal band holding columns or groups."""

    tag_name = "mj-section"
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "background-repeat": "repeat",
        "background-size": "auto",
        "background-position": "top center",
        "direction": "ltr",
        "padding": "20px 0",
        "text-align": "center",
        "text-padding": "4px 4px 4px 0",
    }

    @classmethod
    def child_context(
        cls,
        attributes: cabc.Mapping[str, str],
        props: SiblingProps,
        context: RenderContext,
    ) -> dict[str, typ.Any]:
        overrides = super().child_context(attributes, props, context)
        box = BoxModel(attributes, context.container_width).widths()
        overrides["container_width"] = box.content
        return overrides

    # -- attribute helpers -------------------------------------------------

    @property
    def full_width(self) -> bool:
        return self.get_attribute("full-width") == "full-width"

    @property
    def has_background(self) -> bool:
        return bool(self.get_attribute("background-url"))

    @property
    def has_border_radius(self) -> bool:
        return bool(self.get_attribute("border-radius"))

    @property
    def gap(self) -> str | None:
        return self.context.read_component_data(GAP_SLOT) or None

    def _spaced(self) -> bool:
        return not self.props.first and self.gap is not None

    def background_position(self) -> tuple[str, str]:
        """Return the ``(x, y)`` background position, honouring per-axis overrides."""
        parts = (self.get_attribute("background-position") or "top center").split()
        match parts:
            case [value] if value in {"top", "bottom"}:
                x, y = "center", value
            case [value]:
                x, y = value, "center"
            case [first, second] if first in {"top", "bottom"} or (
                first == "center" and second in {"left", "right"}
            ):
                x, y = second, first
            case [first, second]:
                x, y = first, second
            case _:
                x, y = "center", "top"
        return (
            self.get_attribute("background-position-x") or x,
            self.get_attribute("background-position-y") or y,
        )

    def background(self) -> str:
        parts = [self.get_attribute("background-color")]
        if self.has_background:
            x, y = self.background_position()
            parts += [
                f"url('{self.get_attribute('background-url')}')",
                f"{x} {y}",
                f"/ {self.get_attribute('background-size')}",
                self.get_attribute("background-repeat"),
            ]
        return " ".join(part for part in parts if part)

    def get_styles(self) -> Styles:
        container_width = self.context.container_width
        if self.has_background:
            x, y = self.background_position()
            background = {
                "background": self.background(),
                "background-position": f"{x} {y}",
                "background-repeat": self.get_attribute("background-repeat"),
                "background-size": self.get_attribute("background-size"),
            }
        else:
            color = self.get_attribute("background-color")
            background = {"background": color, "background-color": color}
        full = self.full_width
        radius = self.has_border_radius
        div = {} if full else dict(background)
        div.update(
            {
                "margin": "0px auto",
                "max-width": f"{container_width}px",
                "border-radius": self.get_attribute("border-radius"),
            }
        )
        if radius:
            div["overflow"] = "hidden"
        if self._spaced():
            div["margin-top"] = self.gap
        table = {} if full else dict(background)
        table["width"] = "100%"
        if radius:
            table["border-collapse"] = "separate"
        return {
            "table-full-width": {**(background if full else {}), "width": "100%"},
            "table": table,
            "td": {
                "border": self.get_attribute("border"),
                "border-bottom": self.get_attribute("border-bottom"),
                "border-left": self.get_attribute("border-left"),
                "border-right": self.get_attribute("border-right"),
                "border-top": self.get_attribute("border-top"),
                "border-radius": self.get_attribute("border-radius"),
                "direction": self.get_attribute("direction"),
                "font-size": "0px",
                "padding": self.get_attribute("padding"),
                "padding-bottom": self.get_attribute("padding-bottom"),
                "padding-left": self.get_attribute("padding-left"),
                "padding-right": self.get_attribute("padding-right"),
                "padding-top": self.get_attribute("padding-top"),
                "text-align": self.get_attribute("text-align"),
            },
            "div": div,
            "inner-div": {"line-height": "0", "font-size": "0"},
        }

    # -- rendering ---------------------------------------------------------

    def render(self) -> str:
        if self.full_width:
            return self.render_full_width()
        section = self.render_section()
        if self.has_background:
            section = self.render_with_background(section)
        return self.render_before() + section + self.render_after()

    def render_before(self) -> str:
        container_width = self.context.container_width
        table_style: dict[str, str | None] = {"width": f"{container_width}px"}
        if self._spaced():
            table_style["padding-top"] = self.gap
        attrs = {
            "align": "center",
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "class": suffix_css_classes(self.get_attribute("css-class"), "outlook"),
            "role": "presentation",
            "style": table_style,
            "width": container_width,
            "bgcolor": None if self.gap else self.get_attribute("background-color"),
        }
        return conditional_tag(
            f"<table{self.html_attributes(attrs)}><tr>"
            '<td style="line-height:0px;font-size:0px;mso-line-height-rule:exactly;">'
        )

    def render_after(self) -> str:
        return conditional_tag("</td></tr></table>")

    def render_wrapped_children(self) -> str:
        def _wrap(child: BodyComponent) -> str:
            attrs = {
                "class": suffix_css_classes(child.get_attribute("css-class"), "outlook"),
                "style": child.get_styles().get("td-outlook"),
            }
            return (
                conditional_tag(f"<td{self.html_attributes(attrs)}>")
                + child.render()
                + conditional_tag("</td>")
            )

        return (
            conditional_tag("<tr>")
            + self.render_children(renderer=_wrap)
            + conditional_tag("</tr>")
        )

    def render_section(self) -> str:
        div_attrs: dict[str, typ.Any] = {"style": "div"}
        if not self.full_width:
            div_attrs["class"] = self.get_attribute("css-class")
        table_attrs: dict[str, typ.Any] = {
            "align": "center",
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "role": "presentation",
            "style": "table",
        }
        if not self.full_width and self.has_background:
            table_attrs["background"] = self.get_attribute("background-url")
        inner_open = (
            f"<div{self.html_attributes({'style': 'inner-div'})}>"
            if self.has_background
            else ""
        )
        inner_close = "</div>" if self.has_background else ""
        inner_table = (
            conditional_tag(
                '<table role="presentation" border="0" cellpadding="0" cellspacing="0">'
            )
            + self.render_wrapped_children()
            + conditional_tag("</table>")
        )
        return (
            f"<div{self.html_attributes(div_attrs)}>{inner_open}"
            f"<table{self.html_attributes(table_attrs)}><tbody><tr>"
            f"<td{self.html_attributes({'style': 'td'})}>{inner_table}</td>"
            f"</tr></tbody></table>{inner_close}</div>"
        )

    def render_full_width(self) -> str:
        content = self.render_before() + self.render_section() + self.render_after()
        if self.has_background:
            content = self.render_with_background(content)
        attrs = {
            "align": "center",
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "class": self.get_attribute("css-class"),
            "role": "presentation",
            "style": "table-full-width",
            "background": self.get_attribute("background-url") if self.has_background else None,
        }
        return (
            f"<table{self.html_attributes(attrs)}><tbody><tr><td>"
            f"{content}</td></tr></tbody></table>"
        )

    def render_with_background(self, content: str) -> str:
        """Wrap ``content`` in a VML rectangle so Outlook shows the background."""
        x, y = self.background_position()
        x = {"left": "0%", "center": "50%", "right": "100%"}.get(
            x, x if PERCENTAGE.match(x) else "50%"
        )
        y = {"top": "0%", "center": "50%", "bottom": "100%"}.get(
            y, y if PERCENTAGE.match(y) else "0%"
        )
        repeat = self.get_attribute("background-repeat") == "repeat"
        origin_x = position_x = _vml_offset(x, is_x=True, repeat=repeat)
        origin_y = position_y = _vml_offset(y, is_x=False, repeat=repeat)

        size = self.get_attribute("background-size") or "auto"
        size_attrs: dict[str, str] = {}
        if size in {"cover", "contain"}:
            size_attrs = {"size": "1,1", "aspect": "atleast" if size == "cover" else "atmost"}
        elif size != "auto":
            tokens = size.split()
            if len(tokens) == 1:
                size_attrs = {"size": size, "aspect": "atmost"}
            else:
                size_attrs = {"size": ",".join(tokens)}

        vml_type = "frame" if self.get_attribute("background-repeat") == "no-repeat" else "tile"
        if size == "auto":
            vml_type = "tile"
            origin_x = position_x = 0.5
            origin_y = position_y = 0

        rect_style = (
            {"mso-width-percent": "1000"}
            if self.full_width
            else {"width": f"{self.context.container_width}px"}
        )
        rect_attrs = {
            "style": rect_style,
            "xmlns:v": "urn:schemas-microsoft-com:vml",
            "fill": "true",
            "stroke": "false",
        }
        fill_attrs = {
            "origin": f"{format_number(origin_x)}, {format_number(origin_y)}",
            "position": f"{format_number(position_x)}, {format_number(position_y)}",
            "src": self.get_attribute("background-url"),
            "color": self.get_attribute("background-color"),
            "type": vml_type,
            **size_attrs,
        }
        vml_open = (
            f"<v:rect{self.html_attributes(rect_attrs)}>"
            f"<v:fill{self.html_attributes(fill_attrs)} />"
            '<v:textbox style="mso-fit-shape-to-text:true" inset="0,0,0,0">'
        )
        return (
            conditional_tag(vml_open)
            + content
            + conditional_tag("</v:textbox></v:rect>")
        )


def _vml_offset(position: str, *, is_x: bool, repeat: bool) -> float:
    if PERCENTAGE.match(position):
        decimal = float(position[:-1]) / 100
        if repeat:
            return decimal
        return (-50 + decimal * 100) / 100
    if repeat:
        return 0.5 if is_x else 0
    return 0 if is_x else -0.5


class Wrapper(Section):
    """A section whose children are whole sections, optionally spaced by ``gap``."""

    tag_name = "mj-wrapper"

    @classmethod
    def child_context(
        cls,
        attributes: cabc.Mapping[str, str],
        props: SiblingProps,
        context: RenderContext,
    ) -> dict[str, typ.Any]:
        overrides = super().child_context(attributes, props, context)
        gap = attributes.get("gap")
        if gap:
            overrides["component_data"] = {GAP_SLOT: gap}
        return overrides

    def render_wrapped_children(self) -> str:
        width = self.context.container_width

        def _wrap(child: BodyComponent) -> str:
            attrs = {
                "align": "center",
                "class": suffix_css_classes(child.get_attribute("css-class"), "outlook"),
                "width": f"{width}px",
            }
            return (
                conditional_tag(f"<tr><td{self.html_attributes(attrs)}>")
                + child.render()
                + conditional_tag("</td></tr>")
            )

        return self.render_children(renderer=_wrap)


__all__ = ["Section", "Wrapper"]
