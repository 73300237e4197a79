"""``mj-carousel`` and ``mj-carousel-image``: a radio-button image slider.

Every carousel gets a random id so that several carousels can share a
document. The interactive markup and its CSS are hidden from Outlook, which
instead sees the first image on its own.
"""

from __future__ import annotations

import secrets
import typing as typ

from ..base import BodyComponent, Styles
from ..box import format_number, leading_int
from ..conditional import mso_conditional_tag, suffix_css_classes

MAX_THUMBNAIL_WIDTH = 110


def _siblings(count: int) -> str:
    return "+ * " * count


class CarouselImage(BodyComponent):
    """One slide. The enclosing carousel calls the ``render_*`` helpers."""

    tag_name = "mj-carousel-image"
    ending_tag = True
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "alt": "",
        "target": "_blank",
    }

    def get_styles(self) -> Styles:
        return {
            "images.img": {
                "display": "block",
                "width": f"{self.context.container_width}px",
                "max-width": "100%",
                "height": "auto",
            },
            "radio.input": {"display": "none", "mso-hide": "all"},
            "thumbnails.img": {"display": "block", "width": "100%", "height": "auto"},
        }

    def render_radio(self, carousel_id: str, index: int) -> str:
        attrs = self.html_attributes(
            {
                "class": (
                    f"mj-carousel-radio mj-carousel-{carousel_id}-radio "
                    f"mj-carousel-{carousel_id}-radio-{index + 1}"
                ),
                "checked": "checked" if index == 0 else None,
                "type": "radio",
                "name": f"mj-carousel-radio-{carousel_id}",
                "id": f"mj-carousel-{carousel_id}-radio-{index + 1}",
                "style": "radio.input",
            }
        )
        return f"<input{attrs} />"

    def render_thumbnail(
        self,
        carousel_id: str,
        index: int,
        *,
        width: str,
        border: str | None,
        border_radius: str | None,
        hidden: bool,
    ) -> str:
        css_class = suffix_css_classes(self.get_attribute("css-class"), "thumbnail")
        link = self.html_attributes(
            {
                "style": {
                    "border": border,
                    "border-radius": border_radius,
                    "display": "none" if hidden else "inline-block",
                    "overflow": "hidden",
                    "width": width,
                },
                "href": f"#{index + 1}",
                "target": self.get_attribute("target"),
                "class": (
                    f"mj-carousel-thumbnail mj-carousel-{carousel_id}-thumbnail "
                    f"mj-carousel-{carousel_id}-thumbnail-{index + 1} {css_class}"
                ).strip(),
            }
        )
        image = self.html_attributes(
            {
                "style": "thumbnails.img",
                "src": self.get_attribute("thumbnails-src") or self.get_attribute("src"),
                "alt": self.get_attribute("alt"),
                "width": leading_int(width),
            }
        )
        return (
            f"<a{link}>"
            f'<label for="mj-carousel-{carousel_id}-radio-{index + 1}">'
            f"<img{image} /></label></a>"
        )

    def render_image(self, index: int, border_radius: str | None) -> str:
        width = self.context.container_width
        image = self.html_attributes(
            {
                "title": self.get_attribute("title"),
                "src": self.get_attribute("src"),
                "alt": self.get_attribute("alt"),
                "style": {"border-radius": border_radius, **self.get_styles()["images.img"]},
                "width": width,
                "border": "0",
            }
        )
        markup = f"<img{image} />"
        if href := self.get_attribute("href"):
            link = self.html_attributes(
                {"href": href, "rel": self.get_attribute("rel"), "target": "_blank"}
            )
            markup = f"<a{link}>{markup}</a>"
        css_class = self.get_attribute("css-class")
        wrapper = self.html_attributes(
            {
                "class": f"mj-carousel-image mj-carousel-image-{index + 1} {css_class or ''}".strip(),
                "style": None if index == 0 else {"display": "none", "mso-hide": "all"},
            }
        )
        return f"<div{wrapper}>{markup}</div>"

    def render(self) -> str:
        return ""


class Carousel(BodyComponent):
    tag_name = "mj-carousel"
    default_attributes: typ.ClassVar[dict[str, str]] = {
        "align": "center",
        "border-radius": "6px",
        "icon-width": "44px",
        "left-icon": "https://i.imgur.com/xTh3hln.png",
        "right-icon": "https://i.imgur.com/os7o9kz.png",
        "thumbnails": "visible",
        "tb-border": "2px solid transparent",
        "tb-border-radius": "6px",
        "tb-hover-border-color": "#fead0d",
        "tb-selected-border-color": "#ccc",
    }

    def __init__(self, *args: typ.Any, **kwargs: typ.Any) -> None:
        super().__init__(*args, **kwargs)
        self.carousel_id = secrets.token_hex(8)

    @property
    def images(self) -> list[CarouselImage]:
        return [child for child in self.children if isinstance(child, CarouselImage)]

    def thumbnail_width(self, count: int) -> str:
        """Return ``tb-width`` or an even share of the width, capped at 110px."""
        if declared := self.get_attribute("tb-width"):
            return declared
        share = self.context.container_width / count
        return f"{format_number(min(share, MAX_THUMBNAIL_WIDTH))}px"

    def carousel_css(self, count: int) -> str:
        cid = self.carousel_id
        hide_images = ",\n".join(
            f".mj-carousel-{cid}-radio:checked {_siblings(i)}+ .mj-carousel-content .mj-carousel-image"
            for i in range(count)
        )
        show_images = ",\n".join(
            f".mj-carousel-{cid}-radio-{i + 1}:checked {_siblings(count - i - 1)}"
            f"+ .mj-carousel-content .mj-carousel-image-{i + 1}"
            for i in range(count)
        )
        show_next = ",\n".join(
            f".mj-carousel-{cid}-radio-{i + 1}:checked {_siblings(count - i - 1)}"
            f"+ .mj-carousel-content .mj-carousel-next-{(i + 1) % count + 1}"
            for i in range(count)
        )
        show_previous = ",\n".join(
            f".mj-carousel-{cid}-radio-{i + 1}:checked {_siblings(count - i - 1)}"
            f"+ .mj-carousel-content .mj-carousel-previous-{(i - 1) % count + 1}"
            for i in range(count)
        )
        selected_thumbnail = ",\n".join(
            f".mj-carousel-{cid}-radio-{i + 1}:checked {_siblings(count - i - 1)}"
            f"+ .mj-carousel-content .mj-carousel-{cid}-thumbnail-{i + 1}"
            for i in range(count)
        )
        hover_hide = ",\n".join(
            f".mj-carousel-{cid}-thumbnail:hover {_siblings(count - i - 1)}"
            "+ .mj-carousel-main .mj-carousel-image"
            for i in range(count)
        )
        hover_show = ",\n".join(
            f".mj-carousel-{cid}-thumbnail-{i + 1}:hover {_siblings(count - i - 1)}"
            f"+ .mj-carousel-main .mj-carousel-image-{i + 1}"
            for i in range(count)
        )
        return f"""
.mj-carousel {{ -webkit-user-select: none; -moz-user-select: none; user-select: none; }}
.mj-carousel-{cid}-icons-cell {{ display: table-cell !important; width: {self.get_attribute("icon-width")} !important; }}
.mj-carousel-radio, .mj-carousel-next, .mj-carousel-previous {{ display: none !important; }}
.mj-carousel-thumbnail, .mj-carousel-next, .mj-carousel-previous {{ touch-action: manipulation; }}
{hide_images} {{ display: none !important; }}
{show_images} {{ display: block !important; }}
.mj-carousel-previous-icons, .mj-carousel-next-icons,
{show_next},
{show_previous} {{ display: block !important; }}
{selected_thumbnail} {{ border-color: {self.get_attribute("tb-selected-border-color")} !important; }}
.mj-carousel-image img + div, .mj-carousel-thumbnail img + div {{ display: none !important; }}
{hover_hide} {{ display: none !important; }}
.mj-carousel-thumbnail:hover {{ border-color: {self.get_attribute("tb-hover-border-color")} !important; }}
{hover_show} {{ display: block !important; }}
.mj-carousel noinput {{ display:block !important; }}
.mj-carousel noinput .mj-carousel-image-1 {{ display: block !important; }}
.mj-carousel noinput .mj-carousel-arrows, .mj-carousel noinput .mj-carousel-thumbnails {{ display: none !important; }}
[owa] .mj-carousel-thumbnail {{ display: none !important; }}
@media screen yahoo {{
.mj-carousel-{cid}-icons-cell, .mj-carousel-previous-icons, .mj-carousel-next-icons {{ display: none !important; }}
.mj-carousel-{cid}-radio-1:checked {_siblings(count - 1)}+ .mj-carousel-content .mj-carousel-{cid}-thumbnail-1 {{ border-color: transparent; }}
}}
"""

    def render_controls(self, direction: str, icon: str | None) -> str:
        cid = self.carousel_id
        icon_width = self.get_attribute("icon-width")
        image = self.html_attributes(
            {
                "src": icon,
                "alt": direction,
                "style": {"display": "block", "width": icon_width, "height": "auto"},
                "width": leading_int(icon_width),
            }
        )
        labels = "".join(
            f'<label for="mj-carousel-{cid}-radio-{i}" '
            f'class="mj-carousel-{direction} mj-carousel-{direction}-{i}">'
            f"<img{image} /></label>"
            for i in range(1, len(self.images) + 1)
        )
        return (
            f'<td class="mj-carousel-{cid}-icons-cell" '
            'style="font-size:0px;display:none;mso-hide:all;padding:0px;">'
            f'<div class="mj-carousel-{direction}-icons" style="display:none;mso-hide:all;">'
            f"{labels}</div></td>"
        )

    def render_thumbnails(self) -> str:
        mode = self.get_attribute("thumbnails")
        if mode not in ("visible", "supported"):
            return ""
        images = self.images
        # "supported" keeps the markup but leaves it to client CSS to reveal
        hidden = mode == "supported"
        width = self.thumbnail_width(len(images))
        return "".join(
            image.render_thumbnail(
                self.carousel_id,
                index,
                width=width,
                border=self.get_attribute("tb-border"),
                border_radius=self.get_attribute("tb-border-radius"),
                hidden=hidden,
            )
            for index, image in enumerate(images)
        )

    def render_carousel(self) -> str:
        radius = self.get_attribute("border-radius")
        slides = "".join(image.render_image(i, radius) for i, image in enumerate(self.images))
        return (
            '<table style="caption-side:top;display:table-caption;table-layout:fixed;width:100%;" '
            'border="0" cellpadding="0" cellspacing="0" width="100%" role="presentation" '
            'class="mj-carousel-main"><tbody><tr>'
            + self.render_controls("previous", self.get_attribute("left-icon"))
            + f'<td style="padding:0px"><div class="mj-carousel-images">{slides}</div></td>'
            + self.render_controls("next", self.get_attribute("right-icon"))
            + "</tr></tbody></table>"
        )

    def render_fallback(self) -> str:
        first = self.images[0]
        return mso_conditional_tag(first.render_image(0, self.get_attribute("border-radius")))

    def render(self) -> str:
        images = self.images
        if not images:
            return ""
        self.context.global_data.add_component_head_style(self.carousel_css(len(images)))
        radios = "".join(
            image.render_radio(self.carousel_id, index) for index, image in enumerate(images)
        )
        content = (
            '<div class="mj-carousel">'
            + radios
            + f'<div class="mj-carousel-content mj-carousel-{self.carousel_id}-content" '
            'style="display:table;width:100%;table-layout:fixed;text-align:center;font-size:0px;">'
            + self.render_thumbnails()
            + self.render_carousel()
            + "</div></div>"
        )
        return mso_conditional_tag(content, negation=True) + self.render_fallback()


__all__ = ["Carousel", "CarouselImage"]
