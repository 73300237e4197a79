"""Cyclopts CLI entrypoint for compiling MJML templates.

The ``mjml`` console script compiles a single MJML file into HTML and can list
the tags the built-in registry understands. Typical usage is ``mjml render
newsletter.mjml --output dist/newsletter.html`` during a template build, or
``mjml render newsletter.mjml --json`` when another tool consumes the result.

Examples
--------
Compile a template and print the HTML:

>>> from mjml_compiler.cli import main
>>> main()  # doctest: +SKIP

Compile into a file with options from YAML:

>>> from mjml_compiler.cli import app
>>> app(
...     ["render", "welcome.mjml", "--output", "dist/welcome.html", "--config", "mjml.yaml"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from .components.base import HeadComponent
from .components.preset import core_registry
from .config import RenderOptions, load_render_options
from .renderer.compiler import Compiler

app = App(name="mjml", config=cyclopts.config.Env("MJML_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Compile an MJML file into email-ready HTML.")
def render(
    source: typ.Annotated[Path, Parameter(help="MJML file to compile")],
    *,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write the HTML here instead of stdout", env_var="MJML_OUTPUT"),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to a YAML render options file", env_var="MJML_CONFIG"),
    ] = None,
    json: typ.Annotated[
        bool, Parameter(help="Print the full result as JSON")
    ] = False,
) -> None:
    """Compile ``source`` and emit the HTML.

    Parameters
    ----------
    source : Path
        MJML document to read (UTF-8).
    output : Path or None, optional
        Destination file; parent directories are created. When ``None`` the
        HTML is printed to stdout.
    config : Path or None, optional
        YAML file with ``options`` and ``fonts`` sections (overridable via
        ``MJML_CONFIG``).
    json : bool, optional
        Print ``{"html": ..., "errors": [...]}`` instead of raw HTML; ignores
        ``output``.

    Returns
    -------
    None
        Validation errors are reported on stderr, one per line.

    Raises
    ------
    FileNotFoundError
        If ``source`` or ``config`` does not exist.
    RenderError
        If the options select ``strict`` validation and errors were found.
    """
    options = load_render_options(config) if config else RenderOptions()
    result = Compiler(options=options).render(source.read_text(encoding="utf-8"))

    if json:
        print(msgspec_json.encode(result).decode("utf-8"))
        return

    if output is None:
        print(result.html)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        html = result.html if result.html.endswith("\n") else f"{result.html}\n"
        output.write_text(html, encoding="utf-8")
        print(f"wrote {_format_path(output)}")
    for error in result.errors:
        print(f"error: {error}", file=sys.stderr)


@app.command(help="List the tags the compiler understands.")
def components() -> None:
    """Print each registered tag with its phase and content flags."""
    for tag_name, component in core_registry().items():
        phase = "head" if issubclass(component, HeadComponent) else "body"
        flags = [
            flag
            for flag, enabled in (
                ("ending", component.ending_tag),
                ("raw", component.raw_element),
            )
            if enabled
        ]
        suffix = f" ({', '.join(flags)})" if flags else ""
        print(f"{tag_name}: {phase}{suffix}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``mjml`` console command.

    Returns
    -------
    None
        This function executes for its side effects of parsing CLI arguments
        and running the requested subcommand.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
