"""Scoped render context and the per-compile global accumulator."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from .._constants import (
    DEFAULT_BREAKPOINT,
    DEFAULT_CONTAINER_WIDTH,
    DEFAULT_DIRECTION,
    DEFAULT_LANGUAGE,
)
from ..components.box import format_number
from ..config.models import RenderOptions

logger = logging.getLogger(__name__)

Attributes = dict[str, str]


@dc.dataclass(slots=True)
class GlobalData:
    """Render-wide accumulator shared by reference through every context.

    A fresh instance is created for each compile; nothing here survives
    between calls.
    """

    media_queries: dict[str, str] = dc.field(default_factory=dict)
    component_head_styles: list[str] = dc.field(default_factory=list)
    head_styles: dict[str, str] = dc.field(default_factory=dict)
    inline_style_rules: list[str] = dc.field(default_factory=list)
    html_attributes: dict[str, Attributes] = dc.field(default_factory=dict)
    used_font_names: set[str] = dc.field(default_factory=set)
    errors: list[str] = dc.field(default_factory=list)

    def add_media_query(
        self, class_name: str, parsed_width: float, unit: str = "px"
    ) -> None:
        """Register the desktop width for ``class_name``; the first write wins.

        Examples
        --------
        >>> data = GlobalData()
        >>> data.add_media_query("mj-column-per-50", 50, "%")
        >>> data.add_media_query("mj-column-per-50", 75, "%")
        >>> data.media_queries["mj-column-per-50"]
        '{ width:50% !important; max-width: 50%; }'
        """
        if class_name in self.media_queries:
            return
        width = f"{format_number(parsed_width)}{unit}"
        self.media_queries[class_name] = (
            f"{{ width:{width} !important; max-width: {width}; }}"
        )

    def add_component_head_style(self, css: str) -> None:
        """Append a CSS block emitted once in the document head."""
        self.component_head_styles.append(css)

    def add_head_style(self, key: str, css: str) -> None:
        """Store ``css`` under ``key``; repeated keys keep their first position."""
        self.head_styles[key] = css

    def add_inline_style_rule(self, css: str) -> None:
        """Queue CSS rules for the post-render inliner."""
        self.inline_style_rules.append(css)

    def add_html_attributes(
        self, selector: str, attributes: cabc.Mapping[str, str]
    ) -> None:
        """Merge ``attributes`` into the set applied to ``selector`` matches."""
        self.html_attributes.setdefault(selector, {}).update(attributes)

    def record_font_usage(self, name: str) -> None:
        """Mark a font family as referenced by the rendered body."""
        cleaned = name.strip().strip("'\"").strip()
        if cleaned:
            self.used_font_names.add(cleaned.casefold())

    def is_font_used(self, name: str) -> bool:
        """Return whether ``name`` was recorded with :meth:`record_font_usage`."""
        return name.strip().casefold() in self.used_font_names

    def add_error(self, message: str) -> None:
        """Append a non-fatal validation message."""
        logger.debug("Render error: %s", message)
        self.errors.append(message)


@dc.dataclass(slots=True)
class AttributeCascade:
    """Defaults collected from ``mj-attributes`` in the document head."""

    global_attributes: Attributes = dc.field(default_factory=dict)
    tag_attributes: dict[str, Attributes] = dc.field(default_factory=dict)
    classes: dict[str, Attributes] = dc.field(default_factory=dict)
    class_defaults: dict[str, dict[str, Attributes]] = dc.field(default_factory=dict)

    def for_tag(self, tag_name: str) -> Attributes:
        """Return the per-tag defaults declared for ``tag_name``."""
        return self.tag_attributes.get(tag_name, {})

    def for_classes(self, class_names: cabc.Iterable[str]) -> Attributes:
        """Merge the attributes of each named class, later names winning."""
        merged: Attributes = {}
        for name in class_names:
            merged.update(self.classes.get(name, {}))
        return merged

    def nested_defaults(
        self, class_names: cabc.Iterable[str]
    ) -> dict[str, Attributes]:
        """Merge the per-tag descendant defaults of each named class."""
        merged: dict[str, Attributes] = {}
        for name in class_names:
            for tag_name, attrs in self.class_defaults.get(name, {}).items():
                merged.setdefault(tag_name, {}).update(attrs)
        return merged


@dc.dataclass(slots=True)
class RenderContext:
    """State visible to one subtree of the body.

    Body components never change a context in place. They describe the
    changes their children should see and the compiler calls
    :meth:`derive_child`. Head components run once against the root context
    before any derivation happens and may set its top-level fields directly.
    """

    global_data: GlobalData = dc.field(default_factory=GlobalData)
    options: RenderOptions = dc.field(default_factory=RenderOptions)
    title: str = ""
    preview: str = ""
    language: str = DEFAULT_LANGUAGE
    direction: str = DEFAULT_DIRECTION
    container_width: int = DEFAULT_CONTAINER_WIDTH
    breakpoint: str = DEFAULT_BREAKPOINT
    background_color: str | None = None
    fonts: dict[str, str] = dc.field(default_factory=dict)
    head_attributes: AttributeCascade = dc.field(default_factory=AttributeCascade)
    inherited_defaults: dict[str, Attributes] = dc.field(default_factory=dict)
    component_data: dict[str, typ.Any] = dc.field(default_factory=dict)
    is_root: bool = False

    @classmethod
    def create_root(
        cls, options: RenderOptions | None = None, *, global_data: GlobalData | None = None
    ) -> RenderContext:
        """Build the top-level context for a compile, seeded from ``options``."""
        resolved = options or RenderOptions()
        return cls(
            global_data=global_data or GlobalData(),
            options=resolved,
            fonts=dict(resolved.fonts),
            is_root=True,
        )

    def derive_child(
        self, overrides: cabc.Mapping[str, typ.Any] | None = None
    ) -> RenderContext:
        """Return a copy of this context with ``overrides`` applied.

        ``component_data`` and ``inherited_defaults`` overrides are merged into
        this context's slots rather than replacing them. ``container_width`` is
        clamped so it never exceeds this context's width (the root context is
        exempt because the body establishes the document width).

        Parameters
        ----------
        overrides : Mapping[str, Any], optional
            Field names mapped to their new values.

        Returns
        -------
        RenderContext
            A new context sharing this context's :class:`GlobalData`.

        Raises
        ------
        ValueError
            If ``overrides`` tries to replace ``global_data``.
        TypeError
            If ``overrides`` names a field the context does not define.

        Examples
        --------
        >>> parent = RenderContext(container_width=600)
        >>> parent.derive_child({"container_width": 800}).container_width
        600
        >>> child = parent.derive_child({"component_data": {"gap": "10px"}})
        >>> child.read_component_data("gap"), parent.read_component_data("gap")
        ('10px', None)
        """
        changes = dict(overrides or {})
        if "global_data" in changes:
            msg = "A derived context must share its parent's global data."
            raise ValueError(msg)
        if "component_data" in changes:
            changes["component_data"] = {
                **self.component_data,
                **changes["component_data"],
            }
        if "inherited_defaults" in changes:
            merged = {tag: dict(attrs) for tag, attrs in self.inherited_defaults.items()}
            for tag_name, attrs in changes["inherited_defaults"].items():
                merged.setdefault(tag_name, {}).update(attrs)
            changes["inherited_defaults"] = merged
        width = changes.get("container_width", self.container_width)
        ceiling = None if self.is_root else self.container_width
        changes["container_width"] = _clamp_width(width, ceiling)
        changes["is_root"] = False
        return dc.replace(self, **changes)

    def read_component_data(self, key: str) -> typ.Any | None:
        """Return the payload an ancestor published under ``key``."""
        return self.component_data.get(key)


def _clamp_width(value: typ.Any, ceiling: int | None) -> int:
    try:
        width = int(float(value))
    except (TypeError, ValueError):
        width = ceiling or DEFAULT_CONTAINER_WIDTH
    if ceiling is not None:
        width = min(width, ceiling)
    return max(width, 1)


__all__ = ["AttributeCascade", "GlobalData", "RenderContext"]
