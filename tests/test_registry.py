"""Unit tests for the tag registry and the built-in preset."""

from __future__ import annotations

import pytest

from mjml_compiler.components import Registry
from mjml_compiler.components.base import BodyComponent, HeadComponent
from mjml_compiler.components.body import BODY_COMPONENTS, Text
from mjml_compiler.components.head import HEAD_COMPONENTS
from mjml_compiler.components.preset import core_registry, register_core


def test_register_and_get() -> None:
    registry = Registry()

    registry.register("mj-text", Text)

    assert registry.get("mj-text") is Text
    assert registry.get("mj-unknown") is None
    assert "mj-text" in registry
    assert not registry.has("mj-unknown")


def test_register_component_requires_a_tag_name() -> None:
    class Nameless(BodyComponent):
        pass

    with pytest.raises(ValueError, match="tag_name"):
        Registry().register_component(Nameless)


def test_core_registry_holds_every_builtin_tag() -> None:
    registry = core_registry()

    assert len(registry) == len(HEAD_COMPONENTS) + len(BODY_COMPONENTS)
    for tag_name, component in registry.items():
        assert component.tag_name == tag_name
        assert issubclass(component, (HeadComponent, BodyComponent))


def test_ending_tag_names() -> None:
    names = core_registry().ending_tag_names()

    assert {"mj-text", "mj-raw", "mj-style", "mj-title"} <= names
    assert "mj-section" not in names


def test_register_core_extends_an_existing_registry() -> None:
    class Custom(BodyComponent):
        tag_name = "mj-custom"

    registry = Registry()
    registry.register_component(Custom)

    register_core(registry)

    assert registry.get("mj-custom") is Custom
    assert registry.has("mj-section")
