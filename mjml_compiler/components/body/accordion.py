"""Collapsible sections: ``mj-accordion`` and its element, title and text tags.

Icon and font settings flow downwards through the ``accordion`` component
data slot. The accordion publishes its own settings, each element overlays
the attributes it sets, and titles and texts read whatever reaches them,
letting their own attributes win.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from ..._constants import ACCORDION_SLOT
from ..base import BodyComponent, SiblingProps, Styles
from ..conditional import conditional_tag
from .text import DEFAULT_FONT_FAMILY

if typ.TYPE_CHECKING:
    from ...renderer.context import RenderContext

ICON_ATTRIBUTES = (
    "border",
    "icon-align",
    "icon-width",
    "icon-height",
    "icon-position",
    "icon-wrapped-url",
    "icon-wrapped-alt",
    "icon-unwrapped-url",
    "icon-unwrapped-alt",
)

ACCORDION_CSS = """noinput.mj-accordion-checkbox { display:block!important; }
@media yahoo, only screen and (min-width:0) {
.mj-accordion-element { display:block; }
input.mj-accordion-checkbox, .mj-accordion-less { display:none!important; }
input.mj-accordion-checkbox + * .mj-accordion-title { cursor:pointer; touch-action:manipulation; -webkit-user-select:none; -moz-user-select:none; user-select:none; }
input.mj-accordion-checkbox + * .mj-accordion-content { overflow:hidden; display:none; }
input.mj-accordion-checkbox + * .mj-accordion-more { display:block!important; }
input.mj-accordion-checkbox:checked + * .mj-accordion-content { display:block; }
input.mj-accordion-checkbox:checked + * .mj-accordion-more { display:none!important; }
input.mj-accordion-checkbox:checked + * .mj-accordion-less { display:block!important; }
}
.moz-text-html input.mj-accordion-checkbox + * .mj-accordion-title { cursor: auto; touch-action: auto; -webkit-user-select: auto; -moz-user-select: auto; user-select: auto; }
.moz-text-html input.mj-accordion-checkbox + * .mj-accordion-content { overflow: hidden; display: block; }
.moz-text-html input.mj-accordion-checkbox + * .mj-accordion-ico { display: none; }
@goodbye { @gmail }"""


def _field(attribute: str) -> str:
    return attribute.replace("-", "_")


@dc.dataclass(frozen=True, slots=True)
class AccordionSettings:
    """Icon and font settings shared down an accordion subtree."""

    font_family: str | None = None
    element_font_family: str | None = None
    border: str | None = None
    icon_align: str | None = None
    icon_width: str | None = None
    icon_height: str | None = None
    icon_position: str | None = None
    icon_wrapped_url: str | None = None
    icon_wrapped_alt: str | None = None
    icon_unwrapped_url: str | None = None
    icon_unwrapped_alt: str | None = None

    def icon_attribute(self, attribute: str) -> str | None:
        return getattr(self, _field(attribute))

    def overlay(self, attributes: cabc.Mapping[str, str]) -> AccordionSettings:
        """Return settings with every icon attribute present in ``attributes`` replaced."""
        changes = {
            _field(name): attributes[name]
            for name in ICON_ATTRIBUTES
            if attributes.get(name) is not None
        }
        return dc.replace(self, **changes)


class _AccordionChild(BodyComponent):
    """Lookups shared by accordion titles and texts."""

    @property
    def settings(self) -> AccordionSettings:
        return self.context.read_component_data(ACCORDION_SLOT) or AccordionSettings()

    def icon_attribute(self, attribute: str) -> str | None:
        value = self.get_attribute(attribute)
        if value is not None:
            return value
        return self.settings.icon_attribute(attribute)

    def font_family(self) -> str | None:
        settings = self.settings
        return (
            self.get_attribute("font-family")
            or settings.element_font_family
            or settings.font_family
        )


class Accordion(BodyComponent):
    tag_name = "mj-accordion"
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "border": "2px solid black",
        "font-family": DEFAULT_FONT_FAMILY,
        "icon-align": "middle",
        "icon-wrapped-url": "https://i.imgur.com/bIXv1bk.png",
        "icon-wrapped-alt": "+",
        "icon-unwrapped-url": "https://i.imgur.com/w4uTygT.png",
        "icon-unwrapped-alt": "-",
        "icon-position": "right",
        "icon-height": "32px",
        "icon-width": "32px",
        "padding": "10px 25px",
    }

    @classmethod
    def child_context(
        cls,
        attributes: cabc.Mapping[str, str],
        props: SiblingProps,
        context: RenderContext,
    ) -> dict[str, typ.Any]:
        overrides = super().child_context(attributes, props, context)
        settings = AccordionSettings(font_family=attributes.get("font-family")).overlay(
            attributes
        )
        overrides["component_data"] = {ACCORDION_SLOT: settings}
        return overrides

    def get_styles(self) -> Styles:
        return {
            "table": {
                "width": "100%",
                "border-collapse": "collapse",
                "border": self.get_attribute("border"),
                "border-bottom": "none",
                "font-family": self.get_attribute("font-family"),
            }
        }

    def render(self) -> str:
        self.context.global_data.add_head_style(self.tag_name, ACCORDION_CSS)
        attrs = {
            "cellspacing": "0",
            "cellpadding": "0",
            "class": "mj-accordion",
            "style": "table",
        }
        return f"<table{self.html_attributes(attrs)}><tbody>{self.render_children()}</tbody></table>"


class AccordionElement(BodyComponent):
    tag_name = "mj-accordion-element"

    @classmethod
    def child_context(
        cls,
        attributes: cabc.Mapping[str, str],
        props: SiblingProps,
        context: RenderContext,
    ) -> dict[str, typ.Any]:
        overrides = super().child_context(attributes, props, context)
        parent = context.read_component_data(ACCORDION_SLOT) or AccordionSettings()
        settings = dc.replace(
            parent.overlay(attributes),
            element_font_family=attributes.get("font-family"),
        )
        overrides["component_data"] = {ACCORDION_SLOT: settings}
        return overrides

    def get_styles(self) -> Styles:
        return {
            "td": {"padding": "0px", "background-color": self.get_attribute("background-color")},
            "label": {"font-size": "13px", "font-family": self.get_attribute("font-family")},
            "input": {"display": "none"},
        }

    def render_missing_children(self) -> str:
        """Render the children, adding an empty title or text where one is absent."""
        tags = {child.tag_name for child in self.children}
        child_context = self.context.derive_child(self.get_child_context())
        parts: list[str] = []
        if AccordionTitle.tag_name not in tags:
            parts.append(AccordionTitle(context=child_context).render())
        parts.append(self.render_children())
        if AccordionText.tag_name not in tags:
            parts.append(AccordionText(context=child_context).render())
        return "\n".join(parts)

    def render(self) -> str:
        checkbox = conditional_tag(
            f"<input{self.html_attributes({'class': 'mj-accordion-checkbox', 'type': 'checkbox', 'style': 'input'})} />",
            negation=True,
        )
        return (
            f"<tr{self.html_attributes({'class': self.get_attribute('css-class')})}>"
            f"<td{self.html_attributes({'style': 'td'})}>"
            f"<label{self.html_attributes({'class': 'mj-accordion-element', 'style': 'label'})}>"
            f"{checkbox}<div>{self.render_missing_children()}</div>"
            "</label></td></tr>"
        )


class AccordionTitle(_AccordionChild):
    tag_name = "mj-accordion-title"
    ending_tag = True
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "font-size": "13px",
        "padding": "16px",
    }

    def get_styles(self) -> Styles:
        return {
            "td": {
                "width": "100%",
                "background-color": self.get_attribute("background-color"),
                "color": self.get_attribute("color"),
                "font-size": self.get_attribute("font-size"),
                "font-family": self.font_family(),
                "font-weight": self.get_attribute("font-weight"),
                "padding": self.get_attribute("padding"),
                "padding-bottom": self.get_attribute("padding-bottom"),
                "padding-left": self.get_attribute("padding-left"),
                "padding-right": self.get_attribute("padding-right"),
                "padding-top": self.get_attribute("padding-top"),
            },
            "table": {"width": "100%", "border-bottom": self.icon_attribute("border")},
            "td2": {
                "padding": "16px",
                "background": self.get_attribute("background-color"),
                "vertical-align": self.icon_attribute("icon-align"),
            },
            "img": {
                "display": "none",
                "width": self.icon_attribute("icon-width"),
                "height": self.icon_attribute("icon-height"),
            },
        }

    def render_title(self) -> str:
        attrs = {"class": self.get_attribute("css-class"), "style": "td"}
        return f"<td{self.html_attributes(attrs)}> {self.get_content()} </td>"

    def render_icons(self) -> str:
        more = self.html_attributes(
            {
                "src": self.icon_attribute("icon-wrapped-url"),
                "alt": self.icon_attribute("icon-wrapped-alt"),
                "class": "mj-accordion-more",
                "style": "img",
            }
        )
        less = self.html_attributes(
            {
                "src": self.icon_attribute("icon-unwrapped-url"),
                "alt": self.icon_attribute("icon-unwrapped-alt"),
                "class": "mj-accordion-less",
                "style": "img",
            }
        )
        cell = self.html_attributes({"class": "mj-accordion-ico", "style": "td2"})
        return conditional_tag(
            f"<td{cell}><img{more} /><img{less} /></td>", negation=True
        )

    def render(self) -> str:
        parts = [self.render_title(), self.render_icons()]
        if self.icon_attribute("icon-position") != "right":
            parts.reverse()
        table = self.html_attributes({"cellspacing": "0", "cellpadding": "0", "style": "table"})
        return (
            '<div class="mj-accordion-title">'
            f"<table{table}><tbody><tr>{chr(10).join(parts)}</tr></tbody></table></div>"
        )


class AccordionText(_AccordionChild):
    tag_name = "mj-accordion-text"
    ending_tag = True
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "font-size": "13px",
        "line-height": "1",
        "padding": "16px",
    }

    def get_styles(self) -> Styles:
        return {
            "td": {
                "background": self.get_attribute("background-color"),
                "font-size": self.get_attribute("font-size"),
                "font-family": self.font_family(),
                "font-weight": self.get_attribute("font-weight"),
                "letter-spacing": self.get_attribute("letter-spacing"),
                "line-height": self.get_attribute("line-height"),
                "color": self.get_attribute("color"),
                "padding": self.get_attribute("padding"),
                "padding-bottom": self.get_attribute("padding-bottom"),
                "padding-left": self.get_attribute("padding-left"),
                "padding-right": self.get_attribute("padding-right"),
                "padding-top": self.get_attribute("padding-top"),
            },
            "table": {"width": "100%", "border-bottom": self.icon_attribute("border")},
        }

    def render(self) -> str:
        table = self.html_attributes({"cellspacing": "0", "cellpadding": "0", "style": "table"})
        cell = self.html_attributes({"class": self.get_attribute("css-class"), "style": "td"})
        return (
            '<div class="mj-accordion-content">'
            f"<table{table}><tbody><tr><td{cell}> {self.get_content()} </td></tr></tbody></table>"
            "</div>"
        )


__all__ = [
    "Accordion",
    "AccordionElement",
    "AccordionSettings",
    "AccordionText",
    "AccordionTitle",
]
