"""Tests for loading render options from YAML."""

from __future__ import annotations

from pathlib import Path

import pytest

from mjml_compiler._constants import DEFAULT_FONTS
from mjml_compiler.config import (
    ConfigError,
    RenderOptions,
    build_render_options,
    load_render_options,
)


def _write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "mjml.yaml"
    path.write_text(text.strip() + "\n", encoding="utf-8")
    return path


def test_load_render_options(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
options:
  keep_comments: false
  validation_level: strict
fonts:
  Raleway: " https://example.test/raleway.css "
""",
    )

    options = load_render_options(path)

    assert options.keep_comments is False
    assert options.validation_level == "strict"
    assert options.fonts["Raleway"] == "https://example.test/raleway.css"
    assert options.fonts["Lato"] == DEFAULT_FONTS["Lato"]


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    options = load_render_options(_write_config(tmp_path, ""))

    assert options == RenderOptions()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_render_options(tmp_path / "absent.yaml")


def test_top_level_must_be_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="mapping"):
        load_render_options(_write_config(tmp_path, "- one\n- two"))


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ({"options": {"beautify": True}}, "Unknown render options: beautify"),
        ({"options": {"keep_comments": "yes"}}, "keep_comments"),
        ({"options": {"validation_level": "skip"}}, "Unknown validation level"),
        ({"options": ["strict"]}, "'options' must be a mapping"),
        ({"fonts": {"Raleway": ""}}, "Raleway"),
        ({"fonts": ["Raleway"]}, "'fonts' must map"),
    ],
)
def test_invalid_options_are_rejected(raw: dict[str, object], message: str) -> None:
    with pytest.raises(ConfigError, match=message):
        build_render_options(raw)


def test_fonts_do_not_leak_between_option_sets() -> None:
    first = build_render_options({"fonts": {"Raleway": "https://example.test/r.css"}})
    second = RenderOptions()

    assert "Raleway" in first.fonts
    assert "Raleway" not in second.fonts
    assert "Raleway" not in DEFAULT_FONTS
