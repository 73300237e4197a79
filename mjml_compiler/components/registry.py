"""Map MJML tag names to component classes."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

if typ.TYPE_CHECKING:
    from .base import Component


class Registry:
    """Pure tag-name lookup; the compiler skips names it cannot resolve.

    Examples
    --------
    >>> from mjml_compiler.components.body.text import Text
    >>> registry = Registry()
    >>> registry.register("mj-text", Text)
    >>> registry.get("mj-text") is Text, registry.get("mj-unknown")
    (True, None)
    """

    def __init__(self) -> None:
        self._components: dict[str, type[Component]] = {}

    def register(self, tag_name: str, component: type[Component]) -> None:
        self._components[tag_name] = component

    def register_component(self, component: type[Component]) -> None:
        """Register ``component`` under its own ``tag_name``."""
        if not component.tag_name:
            msg = f"{component.__name__} does not declare a tag_name."
            raise ValueError(msg)
        self.register(component.tag_name, component)

    def register_many(self, components: cabc.Iterable[type[Component]]) -> None:
        for component in components:
            self.register_component(component)

    def get(self, tag_name: str) -> type[Component] | None:
        return self._components.get(tag_name)

    def has(self, tag_name: str) -> bool:
        return tag_name in self._components

    def ending_tag_names(self) -> frozenset[str]:
        """Return the tags whose content must be kept verbatim by the parser."""
        return frozenset(
            name for name, component in self._components.items() if component.ending_tag
        )

    def items(self) -> list[tuple[str, type[Component]]]:
        return sorted(self._components.items())

    def __contains__(self, tag_name: object) -> bool:
        return tag_name in self._components

    def __len__(self) -> int:
        return len(self._components)


__all__ = ["Registry"]
