"""``mj-navbar`` and ``mj-navbar-link``: inline navigation with an optional hamburger."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import secrets
import typing as typ

from ..._constants import NAVBAR_SLOT
from ..base import BodyComponent, SiblingProps, Styles
from ..conditional import conditional_tag, mso_conditional_tag, suffix_css_classes
from .image import lower_breakpoint
from .text import DEFAULT_FONT_FAMILY

if typ.TYPE_CHECKING:
    from ...renderer.context import RenderContext

HAMBURGER_MODE = "hamburger"

NAVBAR_CSS = """noinput.mj-menu-checkbox {{ display:block!important; max-height:none!important; visibility:visible!important; }}
@media only screen and (max-width:{breakpoint}) {{
.mj-menu-checkbox[type="checkbox"] ~ .mj-inline-links {{ display:none!important; }}
.mj-menu-checkbox[type="checkbox"]:checked ~ .mj-inline-links,
.mj-menu-checkbox[type="checkbox"] ~ .mj-menu-trigger {{ display:block!important; max-width:none!important; max-height:none!important; font-size:inherit!important; }}
.mj-menu-checkbox[type="checkbox"] ~ .mj-inline-links > a {{ display:block!important; }}
.mj-menu-checkbox[type="checkbox"]:checked ~ .mj-menu-trigger .mj-menu-icon-close {{ display:block!important; }}
.mj-menu-checkbox[type="checkbox"]:checked ~ .mj-menu-trigger .mj-menu-icon-open {{ display:none!important; }}
}}"""


@dc.dataclass(frozen=True, slots=True)
class NavbarSettings:
    """Published by a navbar for its links."""

    base_url: str | None = None


class Navbar(BodyComponent):
    tag_name = "mj-navbar"
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "align": "center",
        "ico-align": "center",
        "ico-open": "&#9776;",
        "ico-close": "&#8855;",
        "ico-color": "#000000",
        "ico-font-size": "30px",
        "ico-font-family": DEFAULT_FONT_FAMILY,
        "ico-text-transform": "uppercase",
        "ico-padding": "10px",
        "ico-text-decoration": "none",
        "ico-line-height": "30px",
    }

    @classmethod
    def child_context(
        cls,
        attributes: cabc.Mapping[str, str],
        props: SiblingProps,
        context: RenderContext,
    ) -> dict[str, typ.Any]:
        overrides = super().child_context(attributes, props, context)
        settings = NavbarSettings(base_url=attributes.get("base-url") or None)
        overrides["component_data"] = {NAVBAR_SLOT: settings}
        return overrides

    def get_styles(self) -> Styles:
        return {
            "label": {
                "display": "block",
                "cursor": "pointer",
                "mso-hide": "all",
                "-moz-user-select": "none",
                "user-select": "none",
                "color": self.get_attribute("ico-color"),
                "font-size": self.get_attribute("ico-font-size"),
                "font-family": self.get_attribute("ico-font-family"),
                "text-transform": self.get_attribute("ico-text-transform"),
                "text-decoration": self.get_attribute("ico-text-decoration"),
                "line-height": self.get_attribute("ico-line-height"),
                "padding": self.get_attribute("ico-padding"),
                "padding-top": self.get_attribute("ico-padding-top"),
                "padding-right": self.get_attribute("ico-padding-right"),
                "padding-bottom": self.get_attribute("ico-padding-bottom"),
                "padding-left": self.get_attribute("ico-padding-left"),
            },
            "trigger": {
                "display": "none",
                "max-height": "0px",
                "max-width": "0px",
                "font-size": "0px",
                "overflow": "hidden",
            },
            "ico-open": {"mso-hide": "all"},
            "ico-close": {"display": "none", "mso-hide": "all"},
        }

    def render_hamburger(self) -> str:
        key = secrets.token_hex(8)
        checkbox = mso_conditional_tag(
            f'<input type="checkbox" id="{key}" class="mj-menu-checkbox" '
            'style="display:none !important; max-height:0; visibility:hidden;" />',
            negation=True,
        )
        trigger = self.html_attributes({"class": "mj-menu-trigger", "style": "trigger"})
        label = self.html_attributes(
            {
                "for": key,
                "class": "mj-menu-label",
                "style": "label",
                "align": self.get_attribute("ico-align"),
            }
        )
        icon_open = self.html_attributes({"class": "mj-menu-icon-open", "style": "ico-open"})
        icon_close = self.html_attributes({"class": "mj-menu-icon-close", "style": "ico-close"})
        return (
            f"{checkbox}<div{trigger}><label{label}>"
            f"<span{icon_open}>{self.get_attribute('ico-open')}</span>"
            f"<span{icon_close}>{self.get_attribute('ico-close')}</span>"
            "</label></div>"
        )

    def render(self) -> str:
        self.context.global_data.add_head_style(
            self.tag_name,
            NAVBAR_CSS.format(breakpoint=lower_breakpoint(self.context.breakpoint)),
        )
        hamburger = (
            self.render_hamburger()
            if self.get_attribute("hamburger") == HAMBURGER_MODE
            else ""
        )
        align = self.get_attribute("align") or "center"
        return (
            f'{hamburger}<div class="mj-inline-links">'
            + conditional_tag(
                '<table role="presentation" border="0" cellpadding="0" cellspacing="0" '
                f'align="{align}"><tr>'
            )
            + self.render_children()
            + conditional_tag("</tr></table>")
            + "</div>"
        )


class NavbarLink(BodyComponent):
    tag_name = "mj-navbar-link"
    ending_tag = True
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "color": "#000000",
        "font-family": DEFAULT_FONT_FAMILY,
        "font-size": "13px",
        "font-weight": "normal",
        "line-height": "22px",
        "padding": "15px 10px",
        "target": "_blank",
        "text-decoration": "none",
        "text-transform": "uppercase",
    }

    def get_styles(self) -> Styles:
        paddings = {
            name: self.get_attribute(name)
            for name in ("padding", "padding-top", "padding-left", "padding-right", "padding-bottom")
        }
        return {
            "a": {
                "display": "inline-block",
                "color": self.get_attribute("color"),
                "font-family": self.get_attribute("font-family"),
                "font-size": self.get_attribute("font-size"),
                "font-style": self.get_attribute("font-style"),
                "font-weight": self.get_attribute("font-weight"),
                "letter-spacing": self.get_attribute("letter-spacing"),
                "line-height": self.get_attribute("line-height"),
                "text-decoration": self.get_attribute("text-decoration"),
                "text-transform": self.get_attribute("text-transform"),
                **paddings,
            },
            "td": paddings,
        }

    def link(self) -> str | None:
        """Return ``href`` prefixed with the enclosing navbar's ``base-url``."""
        href = self.get_attribute("href")
        settings = self.context.read_component_data(NAVBAR_SLOT)
        if href is not None and settings is not None and settings.base_url:
            return f"{settings.base_url}{href}"
        return href

    def render(self) -> str:
        css_class = self.get_attribute("css-class")
        td_attrs = {"style": "td", "class": suffix_css_classes(css_class, "outlook")}
        link_attrs = {
            "class": f"mj-link {css_class}" if css_class else "mj-link",
            "href": self.link(),
            "rel": self.get_attribute("rel"),
            "target": self.get_attribute("target"),
            "name": self.get_attribute("name"),
            "style": "a",
        }
        return (
            conditional_tag(f"<td{self.html_attributes(td_attrs)}>")
            + f"<a{self.html_attributes(link_attrs)}> {self.get_content()} </a>"
            + conditional_tag("</td>")
        )


__all__ = ["Navbar", "NavbarLink", "NavbarSettings"]
