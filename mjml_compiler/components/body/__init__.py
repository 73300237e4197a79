"""Body tags, one module per family of related tags."""

from .accordion import Accordion, AccordionElement, AccordionText, AccordionTitle
from .body import Body
from .button import Button
from .carousel import Carousel, CarouselImage
from .column import Column, Group
from .hero import Hero
from .image import Image
from .navbar import Navbar, NavbarLink
from .section import Section, Wrapper
from .social import Social, SocialElement
from .spacing import Divider, Spacer
from .text import Raw, Table, Text

BODY_COMPONENTS = (
    Body,
    Section,
    Wrapper,
    Column,
    Group,
    Hero,
    Text,
    Raw,
    Table,
    Button,
    Image,
    Divider,
    Spacer,
    Navbar,
    NavbarLink,
    Accordion,
    AccordionElement,
    AccordionTitle,
    AccordionText,
    Social,
    SocialElement,
    Carousel,
    CarouselImage,
)

__all__ = [
    "BODY_COMPONENTS",
    "Accordion",
    "AccordionElement",
    "AccordionText",
    "AccordionTitle",
    "Body",
    "Button",
    "Carousel",
    "CarouselImage",
    "Column",
    "Divider",
    "Group",
    "Hero",
    "Image",
    "Navbar",
    "NavbarLink",
    "Raw",
    "Section",
    "Social",
    "SocialElement",
    "Spacer",
    "Table",
    "Text",
    "Wrapper",
]
