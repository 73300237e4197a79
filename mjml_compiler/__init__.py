"""Compile MJML email markup into responsive HTML.

This package exposes the compiler used by the ``mjml`` console script along
with the parser and result type for callers embedding it in their own
pipelines.

Exports
-------
- ``Compiler``: Compiles MJML text or a parsed tree.
- ``RenderResult``: The HTML plus non-fatal validation errors.
- ``parse``: Parse MJML text into an immutable tag tree.
- ``app``: Cyclopts application for the ``mjml`` command.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from mjml_compiler import Compiler
>>> result = Compiler().render(
...     "<mjml><mj-body><mj-section><mj-column>"
...     "<mj-text>Hello</mj-text>"
...     "</mj-column></mj-section></mj-body></mjml>"
... )
>>> "Hello" in result.html
True
"""

from __future__ import annotations

from .cli import app, main
from .parser import parse
from .renderer.compiler import Compiler
from .renderer.models import RenderResult

__all__ = ["Compiler", "RenderResult", "app", "main", "parse"]
