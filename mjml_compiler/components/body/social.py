"""``mj-social`` and ``mj-social-element``: share and follow icons.

The social block publishes its inheritable attributes (plus ``inner-padding``
as ``padding``) as inherited defaults for ``mj-social-element``, so an element
only repeats what it wants to change. Known network names fill in the share
URL, icon and background colour; a ``-noshare`` suffix keeps the icon but
links ``href`` as given.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from ..base import BodyComponent, SiblingProps, Styles
from ..box import leading_int
from ..conditional import conditional_tag
from .text import DEFAULT_FONT_FAMILY

if typ.TYPE_CHECKING:
    from ...renderer.context import RenderContext

ICON_BASE_URL = "https://www.mailjet.com/images/theme/v1/icons/ico-social/"
NOSHARE_SUFFIX = "-noshare"
URL_PLACEHOLDER = "[[URL]]"

INHERITABLE_ATTRIBUTES = (
    "border-radius",
    "color",
    "font-family",
    "font-size",
    "font-weight",
    "font-style",
    "icon-size",
    "icon-height",
    "icon-padding",
    "text-padding",
    "line-height",
    "text-decoration",
)


@dc.dataclass(frozen=True, slots=True)
class SocialNetwork:
    """Icon and share link settings for one named network."""

    background_color: str
    icon: str
    share_url: str | None = None

    @property
    def src(self) -> str:
        return f"{ICON_BASE_URL}{self.icon}"


_TWITTER_SHARE = f"https://twitter.com/intent/tweet?url={URL_PLACEHOLDER}"

SOCIAL_NETWORKS: dict[str, SocialNetwork] = {
    "facebook": SocialNetwork(
        "#3b5998", "facebook.png", f"https://www.facebook.com/sharer/sharer.php?u={URL_PLACEHOLDER}"
    ),
    "twitter": SocialNetwork("#55acee", "twitter.png", _TWITTER_SHARE),
    "x": SocialNetwork("#000000", "twitter-x.png", _TWITTER_SHARE),
    "google": SocialNetwork(
        "#dc4e41", "google-plus.png", f"https://plus.google.com/share?url={URL_PLACEHOLDER}"
    ),
    "pinterest": SocialNetwork(
        "#bd081c",
        "pinterest.png",
        f"https://pinterest.com/pin/create/button/?url={URL_PLACEHOLDER}&media=&description=",
    ),
    "linkedin": SocialNetwork(
        "#0077b5",
        "linkedin.png",
        "https://www.linkedin.com/shareArticle?mini=true"
        f"&url={URL_PLACEHOLDER}&title=&summary=&source=",
    ),
    "instagram": SocialNetwork("#3f729b", "instagram.png"),
    "web": SocialNetwork("#4BADE9", "web.png"),
    "snapchat": SocialNetwork("#FFFA54", "snapchat.png"),
    "youtube": SocialNetwork("#EB3323", "youtube.png"),
    "tumblr": SocialNetwork(
        "#344356",
        "tumblr.png",
        f"https://www.tumblr.com/widgets/share/tool?canonicalUrl={URL_PLACEHOLDER}",
    ),
    "github": SocialNetwork("#000000", "github.png"),
    "xing": SocialNetwork(
        "#296366", "xing.png", f"https://www.xing.com/app/user?op=share&url={URL_PLACEHOLDER}"
    ),
    "vimeo": SocialNetwork("#53B4E7", "vimeo.png"),
    "medium": SocialNetwork("#000000", "medium.png"),
    "soundcloud": SocialNetwork("#EF7F31", "soundcloud.png"),
    "dribbble": SocialNetwork("#D95988", "dribbble.png"),
}


def lookup_network(name: str | None) -> SocialNetwork | None:
    """Return the settings for ``name``, honouring the ``-noshare`` suffix.

    >>> lookup_network("github-noshare").share_url
    '[[URL]]'
    >>> lookup_network("myspace") is None
    True
    """
    if not name:
        return None
    if name.endswith(NOSHARE_SUFFIX):
        base = SOCIAL_NETWORKS.get(name.removesuffix(NOSHARE_SUFFIX))
        return dc.replace(base, share_url=URL_PLACEHOLDER) if base else None
    return SOCIAL_NETWORKS.get(name)


class Social(BodyComponent):
    tag_name = "mj-social"
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "align": "center",
        "border-radius": "3px",
        "color": "#333333",
        "font-family": DEFAULT_FONT_FAMILY,
        "font-size": "13px",
        "icon-size": "20px",
        "line-height": "22px",
        "mode": "horizontal",
        "padding": "10px 25px",
        "text-decoration": "none",
    }

    @classmethod
    def child_context(
        cls,
        attributes: cabc.Mapping[str, str],
        props: SiblingProps,
        context: RenderContext,
    ) -> dict[str, typ.Any]:
        overrides = super().child_context(attributes, props, context)
        shared = {
            name: attributes[name]
            for name in INHERITABLE_ATTRIBUTES
            if attributes.get(name) is not None
        }
        if attributes.get("inner-padding") is not None:
            shared["padding"] = attributes["inner-padding"]
        inherited = overrides.get("inherited_defaults", {})
        # nested mj-class defaults for the element stay on top
        shared.update(inherited.get(SocialElement.tag_name, {}))
        overrides["inherited_defaults"] = {**inherited, SocialElement.tag_name: shared}
        return overrides

    def get_styles(self) -> Styles:
        return {"table-vertical": {"margin": "0px"}}

    def render_horizontal(self) -> str:
        align = self.get_attribute("align")
        table_attrs = {
            "align": align,
            "border": "0",
            "cellpadding": "0",
            "cellspacing": "0",
            "role": "presentation",
        }
        element_table = self.html_attributes(
            {**table_attrs, "style": {"float": "none", "display": "inline-table"}}
        )

        def wrap(child: BodyComponent) -> str:
            return (
                conditional_tag("<td>")
                + f"<table{element_table}><tbody>{child.render()}</tbody></table>"
                + conditional_tag("</td>")
            )

        return (
            conditional_tag(f"<table{self.html_attributes(table_attrs)}><tr>")
            + self.render_children(renderer=wrap)
            + conditional_tag("</tr></table>")
        )

    def render_vertical(self) -> str:
        table_attrs = self.html_attributes(
            {
                "border": "0",
                "cellpadding": "0",
                "cellspacing": "0",
                "role": "presentation",
                "style": "table-vertical",
            }
        )
        return f"<table{table_attrs}><tbody>{self.render_children()}</tbody></table>"

    def render(self) -> str:
        if self.get_attribute("mode") == "vertical":
            return self.render_vertical()
        return self.render_horizontal()


class SocialElement(BodyComponent):
    """One icon, with optional text, inside ``mj-social``."""

    tag_name = "mj-social-element"
    ending_tag = True
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "alt": "",
        "align": "left",
        "icon-position": "left",
        "color": "#000",
        "border-radius": "3px",
        "font-family": DEFAULT_FONT_FAMILY,
        "font-size": "13px",
        "line-height": "1",
        "padding": "4px",
        "text-padding": "4px 4px 4px 0",
        "target": "_blank",
        "text-decoration": "none",
        "vertical-align": "middle",
    }

    @property
    def network(self) -> SocialNetwork | None:
        return lookup_network(self.get_attribute("name"))

    def link(self) -> str | None:
        """Return ``href`` substituted into the network's share URL, if it has one."""
        href = self.get_attribute("href")
        network = self.network
        if network is not None and network.share_url and href is not None:
            return network.share_url.replace(URL_PLACEHOLDER, href)
        return href

    def setting(self, attribute: str) -> str | None:
        """Return ``attribute``, falling back to the network's icon settings."""
        value = self.get_attribute(attribute)
        if value is not None:
            return value
        network = self.network
        if network is None:
            return None
        match attribute:
            case "src":
                return network.src
            case "background-color":
                return network.background_color
            case _:
                return None

    def get_styles(self) -> Styles:
        icon_size = self.get_attribute("icon-size")
        return {
            "td": {
                "padding": self.get_attribute("padding"),
                "padding-top": self.get_attribute("padding-top"),
                "padding-right": self.get_attribute("padding-right"),
                "padding-bottom": self.get_attribute("padding-bottom"),
                "padding-left": self.get_attribute("padding-left"),
                "vertical-align": self.get_attribute("vertical-align"),
            },
            "table": {
                "background": self.setting("background-color"),
                "border-radius": self.get_attribute("border-radius"),
                "width": icon_size,
            },
            "icon": {
                "padding": self.get_attribute("icon-padding"),
                "font-size": "0",
                "height": self.get_attribute("icon-height") or icon_size,
                "vertical-align": "middle",
                "width": icon_size,
            },
            "img": {
                "border-radius": self.get_attribute("border-radius"),
                "display": "block",
            },
            "td-text": {
                "vertical-align": "middle",
                "padding": self.get_attribute("text-padding"),
                "text-align": self.get_attribute("align"),
            },
            "text": {
                "color": self.get_attribute("color"),
                "font-size": self.get_attribute("font-size"),
                "font-weight": self.get_attribute("font-weight"),
                "font-style": self.get_attribute("font-style"),
                "font-family": self.get_attribute("font-family"),
                "line-height": self.get_attribute("line-height"),
                "text-decoration": self.get_attribute("text-decoration"),
            },
        }

    def render_icon(self, href: str | None) -> str:
        image = self.html_attributes(
            {
                "alt": self.get_attribute("alt"),
                "title": self.get_attribute("title"),
                "src": self.setting("src"),
                "style": "img",
                "width": leading_int(self.get_attribute("icon-size")),
                "sizes": self.get_attribute("sizes"),
                "srcset": self.get_attribute("srcset"),
            }
        )
        icon = f"<img{image} />"
        if href:
            link = self.html_attributes(
                {"href": href, "rel": self.get_attribute("rel"), "target": self.get_attribute("target")}
            )
            icon = f"<a{link}>{icon}</a>"
        table = self.html_attributes(
            {
                "border": "0",
                "cellpadding": "0",
                "cellspacing": "0",
                "role": "presentation",
                "style": "table",
            }
        )
        return (
            f'<td{self.html_attributes({"style": "td"})}>'
            f"<table{table}><tbody><tr>"
            f'<td{self.html_attributes({"style": "icon"})}>{icon}</td>'
            "</tr></tbody></table></td>"
        )

    def render_text(self, href: str | None) -> str:
        content = self.get_content()
        if not content:
            return ""
        if href:
            link = self.html_attributes(
                {
                    "href": href,
                    "style": "text",
                    "rel": self.get_attribute("rel"),
                    "target": self.get_attribute("target"),
                }
            )
            text = f"<a{link}> {content} </a>"
        else:
            text = f'<span{self.html_attributes({"style": "text"})}> {content} </span>'
        return f'<td{self.html_attributes({"style": "td-text"})}>{text}</td>'

    def render(self) -> str:
        href = self.link()
        icon, text = self.render_icon(href), self.render_text(href)
        row = self.html_attributes({"class": self.get_attribute("css-class")})
        if self.get_attribute("icon-position") == "right":
            return f"<tr{row}>{text}{icon}</tr>"
        return f"<tr{row}>{icon}{text}</tr>"


__all__ = ["SOCIAL_NETWORKS", "Social", "SocialElement", "SocialNetwork", "lookup_network"]
