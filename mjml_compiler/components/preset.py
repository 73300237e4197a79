"""Populate a :class:`Registry` with every built-in head and body tag."""

from __future__ import annotations

from .body import BODY_COMPONENTS
from .head import HEAD_COMPONENTS
from .registry import Registry


def register_core(registry: Registry) -> Registry:
    """Register the built-in tags on ``registry`` and return it."""
    registry.register_many(HEAD_COMPONENTS)
    registry.register_many(BODY_COMPONENTS)
    return registry


def core_registry() -> Registry:
    """Return a new registry holding the built-in tags.

    Examples
    --------
    >>> registry = core_registry()
    >>> registry.has("mj-section") and registry.has("mj-title")
    True
    """
    return register_core(Registry())


__all__ = ["core_registry", "register_core"]
