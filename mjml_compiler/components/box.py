"""Box-model arithmetic shared by the layout components.

Section, wrapper, column, group and hero all work out their children's
``container_width`` the same way: take the declared (or evenly split) width,
subtract horizontal paddings and borders, and truncate to whole pixels. The
helpers here never raise on malformed input; they fall back to zero or to the
default split instead.

Examples
--------
>>> parse_shorthand("10px 25px", "left")
25
>>> parse_border_width("2px solid #000")
2
>>> BoxModel({"padding": "0 40px"}, 600).widths()
BoxWidths(content=520, paddings=80, borders=0)
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import math
import re

SIDES = ("top", "right", "bottom", "left")

WIDTH_PATTERN = re.compile(r"^\s*(-?\d*\.?\d+)\s*([a-z%]*)\s*$", re.IGNORECASE)
NUMBER_PATTERN = re.compile(r"^-?\d*\.?\d+")
BORDER_WIDTH_PATTERN = re.compile(r"(?:^|\s)(\d+)")


@dc.dataclass(frozen=True, slots=True)
class ParsedWidth:
    """A width split into its numeric value and unit (``px`` or ``%``)."""

    value: float
    unit: str = "px"

    @property
    def is_percent(self) -> bool:
        return self.unit == "%"

    def to_pixels(self, parent_width: int) -> float:
        """Resolve against ``parent_width`` when the width is a percentage."""
        if self.is_percent:
            return parent_width * self.value / 100
        return self.value

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


@dc.dataclass(frozen=True, slots=True)
class BoxWidths:
    """Content width plus the horizontal paddings and borders around it."""

    content: int
    paddings: int
    borders: int


def format_number(value: float) -> str:
    """Render ``value`` without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def parse_width(value: str | None) -> ParsedWidth | None:
    """Parse a CSS width; unit-less and unknown units are treated as px.

    Returns ``None`` when no numeric portion can be found.

    >>> parse_width("50%")
    ParsedWidth(value=50.0, unit='%')
    >>> parse_width("200") == parse_width("200px")
    True
    >>> parse_width("auto") is None
    True
    """
    if value is None:
        return None
    match = WIDTH_PATTERN.match(str(value))
    if match is None:
        return None
    unit = "%" if match.group(2) == "%" else "px"
    return ParsedWidth(float(match.group(1)), unit)


def leading_int(token: str | None) -> int:
    """Return the integer prefix of ``token`` such as ``12`` for ``12.5px``, or 0."""
    match = NUMBER_PATTERN.match((token or "").strip())
    if match is None:
        return 0
    return int(float(match.group(0)))


def parse_shorthand(value: str | None, side: str) -> int:
    """Return the pixel value for ``side`` of a 1-4 value CSS shorthand."""
    if not value:
        return 0
    tokens = str(value).split()
    match len(tokens):
        case 1:
            picked = tokens[0]
        case 2:
            picked = tokens[0] if side in {"top", "bottom"} else tokens[1]
        case 3:
            lookup = {"top": 0, "right": 1, "bottom": 2, "left": 1}
            picked = tokens[lookup[side]]
        case 4:
            picked = tokens[SIDES.index(side)]
        case _:
            return 0
    return leading_int(picked)


def parse_border_width(value: str | None) -> int:
    """Return the pixel width from a ``border`` declaration such as ``1px solid red``."""
    if not value or value.strip() in {"0", "none"}:
        return 0
    match = BORDER_WIDTH_PATTERN.search(value)
    if match is None:
        return 0
    return int(match.group(1))


class BoxModel:
    """Resolve widths, paddings and borders for one set of attributes."""

    def __init__(
        self, attributes: cabc.Mapping[str, str | None], container_width: int
    ) -> None:
        self.attributes = attributes
        self.container_width = container_width

    def shorthand(self, attribute: str, side: str) -> int:
        """Return ``attribute-side`` if set, otherwise the shorthand's value."""
        explicit = self.attributes.get(f"{attribute}-{side}")
        if explicit not in (None, ""):
            return leading_int(str(explicit))
        return parse_shorthand(self.attributes.get(attribute), side)

    def border(self, side: str, attribute: str = "border") -> int:
        """Return the border width on ``side``, preferring ``border-<side>``."""
        explicit = self.attributes.get(f"{attribute}-{side}")
        if explicit not in (None, ""):
            return parse_border_width(explicit)
        return parse_border_width(self.attributes.get(attribute))

    def horizontal_paddings(self, attribute: str = "padding") -> int:
        return self.shorthand(attribute, "left") + self.shorthand(attribute, "right")

    def horizontal_borders(self, attribute: str = "border") -> int:
        return self.border("left", attribute) + self.border("right", attribute)

    def widths(self) -> BoxWidths:
        """Return the content width left inside this box's container."""
        paddings = self.horizontal_paddings()
        borders = self.horizontal_borders()
        content = int(self.container_width - paddings - borders)
        return BoxWidths(content=content, paddings=paddings, borders=borders)

    def declared_width(self, non_raw_siblings: int) -> ParsedWidth:
        """Return the ``width`` attribute, or an even share of the container.

        An unparseable width falls back to the same even share.
        """
        parsed = parse_width(self.attributes.get("width"))
        if parsed is not None:
            return parsed
        share = max(non_raw_siblings, 1)
        return ParsedWidth(self.container_width / share, "px")

    def declared_width_percent(self, non_raw_siblings: int) -> ParsedWidth:
        """Return the declared width, or an even percentage share."""
        parsed = parse_width(self.attributes.get("width"))
        if parsed is not None:
            return parsed
        return ParsedWidth(float(int(100 / max(non_raw_siblings, 1))), "%")

    def pixel_width(self, non_raw_siblings: int) -> int:
        """Return the declared width in whole pixels of the container."""
        declared = self.declared_width(non_raw_siblings)
        return math.floor(declared.to_pixels(self.container_width))

    def content_width(
        self, non_raw_siblings: int, extra_border_attributes: cabc.Iterable[str] = ()
    ) -> int:
        """Return the width left for children after paddings and borders."""
        width = self.pixel_width(non_raw_siblings)
        width -= self.horizontal_paddings() + self.horizontal_borders()
        for attribute in extra_border_attributes:
            width -= self.horizontal_borders(attribute)
        return int(width)

    def mobile_width(self, non_raw_siblings: int) -> str:
        """Return the width as a percentage string of the container."""
        declared = self.declared_width_percent(non_raw_siblings)
        if declared.is_percent:
            return str(declared)
        if self.container_width <= 0:
            return "100%"
        percent = declared.value / self.container_width * 100
        return f"{int(percent)}%"


def width_class_name(parsed: ParsedWidth, prefix: str = "mj-column") -> str:
    """Return the CSS class keyed by a width, e.g. ``mj-column-per-33-5``."""
    kind = "per" if parsed.is_percent else "px"
    number = format_number(parsed.value).replace(".", "-")
    return f"{prefix}-{kind}-{number}"


__all__ = [
    "BoxModel",
    "BoxWidths",
    "ParsedWidth",
    "format_number",
    "leading_int",
    "parse_border_width",
    "parse_shorthand",
    "parse_width",
    "width_class_name",
]
