"""Tests for the ``mjml`` command functions.

The commands are called directly rather than through the Cyclopts ``app`` so
the tests exercise the behaviour without depending on argument parsing.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec.json
import pytest

from mjml_compiler import cli
from mjml_compiler.renderer.models import RenderError

_TEMPLATE = """
<mjml>
  <mj-head>
    <mj-title>Welcome</mj-title>
  </mj-head>
  <mj-body>
    <mj-section>
      <mj-column>
        <mj-text>Hello there</mj-text>
      </mj-column>
    </mj-section>
  </mj-body>
</mjml>
"""

_BROKEN_INLINE = """
<mjml>
  <mj-head>
    <mj-style inline="inline">[[ { color: red; }</mj-style>
  </mj-head>
  <mj-body></mj-body>
</mjml>
"""


def _write(tmp_path: Path, text: str, name: str = "welcome.mjml") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_render_prints_html(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.render(_write(tmp_path, _TEMPLATE))

    captured = capsys.readouterr()
    assert captured.out.startswith("<!doctype html>")
    assert "<title>Welcome</title>" in captured.out
    assert "Hello there" in captured.out
    assert captured.err == ""


def test_render_writes_output_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    output = tmp_path / "dist" / "welcome.html"

    cli.render(_write(tmp_path, _TEMPLATE), output=output)

    html = output.read_text(encoding="utf-8")
    assert html.endswith("</html>\n")
    assert capsys.readouterr().out.strip() == "wrote dist/welcome.html"


def test_render_json_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.render(_write(tmp_path, _BROKEN_INLINE), json=True)

    payload = msgspec.json.decode(capsys.readouterr().out)
    assert payload["html"].startswith("<!doctype html>")
    assert len(payload["errors"]) == 1
    assert payload["errors"][0].startswith("mj-style inline: Invalid CSS selector")


def test_render_reports_errors_on_stderr(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.render(_write(tmp_path, _BROKEN_INLINE))

    captured = capsys.readouterr()
    assert captured.err.startswith("error: mj-style inline: Invalid CSS selector")


def test_render_honours_config_file(tmp_path: Path) -> None:
    config = _write(tmp_path, "options:\n  validation_level: strict\n", "mjml.yaml")

    with pytest.raises(RenderError):
        cli.render(_write(tmp_path, _BROKEN_INLINE), config=config)


def test_components_lists_builtin_tags(capsys: pytest.CaptureFixture[str]) -> None:
    cli.components()

    lines: list[str] = capsys.readouterr().out.splitlines()
    entries: dict[str, typ.Any] = dict(line.split(": ", 1) for line in lines)
    assert entries["mj-title"] == "head (ending)"
    assert entries["mj-section"] == "body"
    assert entries["mj-raw"] == "body (ending, raw)"
