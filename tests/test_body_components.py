"""Unit tests for body components built outside the compiler.

Components are constructed directly with a hand-made :class:`RenderContext`
so each test can pin the container width and component data a tag receives.

Usage
-----
Run ``pytest tests/test_body_components.py -v``.

Examples
--------
- ``test_child_context_ignores_children`` checks that a tag describes the same
  child context whether or not it was built with children.
- ``test_wrapper_publishes_gap_and_narrows_sections`` covers the 600px wrapper
  with ``0 40px`` padding yielding 520px sections.
"""

from __future__ import annotations

import typing as typ

import pytest

from mjml_compiler._constants import ACCORDION_SLOT, GAP_SLOT, GROUP_SLOT, NAVBAR_SLOT
from mjml_compiler.components.base import SiblingProps
from mjml_compiler.components.body import (
    Accordion,
    AccordionElement,
    AccordionTitle,
    Button,
    Carousel,
    CarouselImage,
    Column,
    Divider,
    Group,
    Hero,
    Image,
    Navbar,
    NavbarLink,
    Raw,
    Section,
    Social,
    SocialElement,
    Spacer,
    Text,
    Wrapper,
)
from mjml_compiler.components.body.navbar import NavbarSettings
from mjml_compiler.components.body.social import lookup_network
from mjml_compiler.renderer.context import AttributeCascade, RenderContext

if typ.TYPE_CHECKING:
    from mjml_compiler.components.base import BodyComponent


def _context(width: int = 600, **overrides: typ.Any) -> RenderContext:
    """Return a non-root context of ``width`` with ``overrides`` applied."""
    return RenderContext(container_width=width, **overrides)


def _child_context(
    component_cls: type[BodyComponent],
    attributes: dict[str, str],
    context: RenderContext,
    props: SiblingProps | None = None,
) -> RenderContext:
    """Return the context ``component_cls`` would hand to its children."""
    resolved = component_cls.resolve_attributes(attributes, context)
    overrides = component_cls.child_context(resolved, props or SiblingProps(), context)
    return context.derive_child(overrides)


@pytest.mark.parametrize(
    ("component_cls", "attributes"),
    [
        (Section, {"padding": "0 20px", "css-class": "hero"}),
        (Wrapper, {"padding": "0 40px", "gap": "10px"}),
        (Column, {"width": "40%", "border": "1px solid"}),
        (Group, {"width": "300px"}),
        (Hero, {"padding": "0 50px"}),
        (Navbar, {"base-url": "https://example.test"}),
        (Accordion, {"icon-position": "left"}),
        (Social, {"icon-size": "24px", "inner-padding": "6px"}),
    ],
)
def test_child_context_ignores_children(
    component_cls: type[BodyComponent], attributes: dict[str, str]
) -> None:
    context = _context()
    props = SiblingProps(index=1, sibling_count=2, non_raw_sibling_count=2)

    empty = component_cls(attributes, context=context, props=props)
    full = component_cls(
        attributes,
        children=[Text(content="hi", context=context)],
        context=context,
        props=props,
    )
    expected = component_cls.child_context(empty.attributes, props, context)

    assert empty.get_child_context() == expected
    assert full.get_child_context() == expected


def test_wrapper_publishes_gap_and_narrows_sections() -> None:
    child = _child_context(Wrapper, {"padding": "0 40px", "gap": "10px"}, _context())

    assert child.container_width == 520
    assert child.read_component_data(GAP_SLOT) == "10px"


def test_section_spacing_comes_from_the_gap_slot() -> None:
    context = _context(520, component_data={GAP_SLOT: "10px"})
    first = Section(context=context, props=SiblingProps(0, 2, 2))
    second = Section(context=context, props=SiblingProps(1, 2, 2))

    assert "margin-top" not in first.get_styles()["div"]
    assert second.get_styles()["div"]["margin-top"] == "10px"


def test_column_child_width_subtracts_paddings_and_borders() -> None:
    props = SiblingProps(index=0, sibling_count=4, non_raw_sibling_count=4)

    padded = _child_context(Column, {"width": "25%", "padding": "0 10px"}, _context(), props)
    bordered = _child_context(
        Column,
        {"border": "1px solid", "inner-border": "2px solid"},
        _context(),
        SiblingProps(index=0, sibling_count=2, non_raw_sibling_count=2),
    )

    assert padded.container_width == 130
    assert bordered.container_width == 294


def test_column_render_registers_its_width_class() -> None:
    context = _context()

    html = Column({"width": "200px"}, context=context).render()

    assert 'class="mj-column-px-200 mj-outlook-group-fix"' in html
    assert "mj-column-px-200" in context.global_data.media_queries


def test_columns_only_keep_width_on_mobile_inside_groups() -> None:
    props = SiblingProps(index=0, sibling_count=2, non_raw_sibling_count=2)
    grouped = _child_context(Group, {}, _context(), SiblingProps())

    assert grouped.read_component_data(GROUP_SLOT) is True
    assert Column(context=grouped, props=props).mobile_width() == "50%"
    assert Column(context=_context(), props=props).mobile_width() == "100%"


def test_attribute_precedence() -> None:
    context = _context(
        head_attributes=AttributeCascade(
            global_attributes={"color": "#111111", "font-size": "1px"},
            tag_attributes={"mj-text": {"font-size": "2px", "align": "right"}},
            classes={"big": {"font-size": "3px"}},
        ),
        inherited_defaults={"mj-text": {"align": "center", "font-size": "5px"}},
    )

    text = Text({"mj-class": "big", "line-height": "9px"}, context=context)
    explicit = Text({"mj-class": "big", "font-size": "4px"}, context=context)

    assert text.get_attribute("color") == "#111111"
    assert text.get_attribute("align") == "center"
    assert text.get_attribute("font-size") == "3px", "own mj-class beats inherited defaults"
    assert text.get_attribute("line-height") == "9px"
    assert text.get_attribute("padding") == "10px 25px"
    assert explicit.get_attribute("font-size") == "4px"


def test_class_defaults_flow_from_mj_class_and_css_class() -> None:
    context = _context(
        head_attributes=AttributeCascade(
            class_defaults={
                "hero": {"mj-text": {"color": "red"}},
                "wide": {"mj-button": {"width": "100%"}},
            }
        )
    )

    child = _child_context(Section, {"mj-class": "hero", "css-class": "wide"}, context)

    assert child.inherited_defaults == {
        "mj-text": {"color": "red"},
        "mj-button": {"width": "100%"},
    }


def test_html_attributes_serialisation() -> None:
    text = Text(context=_context())

    rendered = text.html_attributes(
        {
            "a": None,
            "b": False,
            "c": True,
            "d": 'x"y',
            "class": "",
            "style": {"color": "red", "margin": None},
        }
    )

    assert rendered == ' c d="x&quot;y" style="color:red;"'


def test_inline_styles_record_font_usage() -> None:
    context = _context()

    Text(context=context).styles("text")

    assert context.global_data.is_font_used("Ubuntu")
    assert context.global_data.is_font_used("Helvetica")


def test_image_width_is_capped_by_its_box() -> None:
    context = _context()

    assert Image(context=context).content_width() == 550
    assert Image({"width": "300px"}, context=context).content_width() == 300
    assert Image({"width": "900px"}, context=context).content_width() == 550


def test_images_share_one_fluid_head_style() -> None:
    context = _context()

    Image({"src": "a.png"}, context=context).render()
    Image({"src": "b.png", "href": "https://example.test"}, context=context).render()

    assert list(context.global_data.head_styles) == ["mj-image"]
    assert "max-width:479px" in context.global_data.head_styles["mj-image"]


def test_button_uses_a_link_only_with_href() -> None:
    context = _context()

    linked = Button({"href": "https://example.test"}, content="Go", context=context).render()
    plain = Button(content="Go", context=context).render()

    assert '<a href="https://example.test"' in linked
    assert 'target="_blank"' in linked
    assert "<p " in plain
    assert "target=" not in plain


def test_navbar_links_are_prefixed_with_base_url() -> None:
    context = _child_context(Navbar, {"base-url": "https://example.test"}, _context())

    link = NavbarLink({"href": "/about"}, content="About", context=context)

    assert isinstance(context.read_component_data(NAVBAR_SLOT), NavbarSettings)
    assert link.link() == "https://example.test/about"
    assert 'href="https://example.test/about"' in link.render()


def test_accordion_settings_are_overlaid_by_elements() -> None:
    accordion = _child_context(Accordion, {"icon-position": "left"}, _context())

    element = _child_context(
        AccordionElement, {"border": "1px solid red", "font-family": "Arial"}, accordion
    )
    settings = element.read_component_data(ACCORDION_SLOT)

    assert settings.icon_position == "left"
    assert settings.border == "1px solid red"
    assert settings.icon_width == "32px"
    assert settings.element_font_family == "Arial"
    assert settings.font_family.startswith("Ubuntu")


def test_accordion_title_icon_position() -> None:
    left = _child_context(Accordion, {"icon-position": "left"}, _context())
    right = _child_context(Accordion, {}, _context())

    left_html = AccordionTitle(content="Question", context=left).render()
    right_html = AccordionTitle(content="Question", context=right).render()

    assert left_html.index("mj-accordion-ico") < left_html.index("Question")
    assert right_html.index("Question") < right_html.index("mj-accordion-ico")


def test_accordion_element_adds_missing_title_and_text() -> None:
    context = _child_context(Accordion, {}, _context())

    html = AccordionElement(context=context).render()

    assert 'class="mj-accordion-title"' in html
    assert 'class="mj-accordion-content"' in html
    assert 'class="mj-accordion-checkbox"' in html


def test_raw_is_verbatim_and_excluded_from_layout() -> None:
    raw = Raw(content="  <custom-tag>x</custom-tag> ", context=_context())

    assert Raw.raw_element
    assert raw.render() == "<custom-tag>x</custom-tag>"


def test_hero_narrows_children_and_fixes_height() -> None:
    child = _child_context(Hero, {"padding": "0 50px"}, _context())
    html = Hero({"height": "200px", "padding": "20px 0"}, context=_context()).render()

    assert child.container_width == 500
    assert 'height="160"' in html
    assert "height:160px;" in html


def test_divider_outlook_width_uses_available_space() -> None:
    divider = Divider(context=_context())

    assert divider.outlook_width() == "550px"
    assert divider.get_styles()["p"]["border-top"] == "solid 4px #000000"


def test_spacer_renders_its_height() -> None:
    html = Spacer({"height": "30px"}, context=_context()).render()

    assert html == '<div style="height:30px;line-height:30px;">&#8202;</div>'


def test_social_shares_inheritable_attributes_with_elements() -> None:
    context = _child_context(
        Social, {"icon-size": "24px", "inner-padding": "6px"}, _context()
    )

    element = SocialElement({"name": "twitter"}, context=context)

    assert element.get_attribute("icon-size") == "24px"
    assert element.get_attribute("padding") == "6px"
    assert element.get_attribute("color") == "#333333"
    assert element.setting("background-color") == "#55acee"


def test_social_element_attributes_override_the_network() -> None:
    element = SocialElement(
        {"name": "facebook", "href": "https://example.test", "src": "custom.png"},
        content="Like",
        context=_context(),
    )

    html = element.render()

    assert element.link() == "https://www.facebook.com/sharer/sharer.php?u=https://example.test"
    assert 'src="custom.png"' in html
    assert "background:#3b5998;" in html
    assert html.index("<img") < html.index("Like")


def test_social_element_without_content_or_known_network() -> None:
    element = SocialElement(
        {"name": "myspace", "href": "https://example.test", "icon-position": "right"},
        context=_context(),
    )

    html = element.render()

    assert element.link() == "https://example.test"
    assert "src=" not in html
    assert html.startswith("<tr><td")
    assert html.endswith("</table></td></tr>")


def test_noshare_networks_link_href_verbatim() -> None:
    network = lookup_network("facebook-noshare")

    assert network is not None
    assert network.share_url == "[[URL]]"
    assert network.src.endswith("/facebook.png")
    assert lookup_network("unknown-noshare") is None


def test_social_vertical_mode_renders_one_table() -> None:
    context = _context()
    child_context = _child_context(Social, {"mode": "vertical"}, context)
    social = Social(
        {"mode": "vertical"},
        children=[SocialElement({"name": "github"}, context=child_context)],
        context=context,
    )

    html = social.render()

    assert html.startswith('<table border="0" cellpadding="0" cellspacing="0" role="presentation" style="margin:0px;">')
    assert "<!--[if mso | IE]>" not in html


def test_carousel_without_images_renders_nothing() -> None:
    context = _context()

    carousel = Carousel(context=context)

    assert carousel.render() == ""
    assert context.global_data.component_head_styles == []


def test_carousel_thumbnails_and_navigation(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("secrets.token_hex", lambda _: "c0ffee")
    context = _context(600)
    images = [
        CarouselImage({"src": f"https://example.test/{n}.png"}, context=context) for n in "ab"
    ]
    carousel = Carousel(children=images, context=context)

    html = carousel.render()
    css = context.global_data.component_head_styles[0]

    assert carousel.carousel_id == "c0ffee"
    assert carousel.thumbnail_width(2) == "110px"
    assert carousel.thumbnail_width(7) == "85.71428571428571px"
    assert 'for="mj-carousel-c0ffee-radio-2"' in html
    assert 'class="mj-carousel-next mj-carousel-next-2"' in html
    assert ".mj-carousel-c0ffee-radio-1:checked + * + .mj-carousel-content .mj-carousel-next-2" in css
    assert ".mj-carousel-c0ffee-radio-1:checked + * + .mj-carousel-content .mj-carousel-previous-2" in css
    assert "width:600px;max-width:100%;" in html


def test_hidden_carousel_thumbnails_are_left_out() -> None:
    context = _context()
    images = [CarouselImage({"src": "a.png", "thumbnails-src": "t.png"}, context=context)]

    hidden = Carousel({"thumbnails": "hidden"}, children=images, context=context).render()
    supported = Carousel({"thumbnails": "supported"}, children=images, context=context).render()

    assert "mj-carousel-thumbnail" not in hidden
    assert 'src="t.png"' in supported
    assert "display:none;overflow:hidden;" in supported
