"""Load and validate render options for MJML compiles.

This subpackage parses an optional ``mjml.yaml`` file, merges its font table
with the built-in web fonts, and produces a :class:`RenderOptions` dataclass
the compiler consumes. The primary entry point is
:func:`load_render_options`.

Examples
--------
>>> from pathlib import Path
>>> from mjml_compiler.config import load_render_options
>>> options = load_render_options(Path("mjml.yaml"))  # doctest: +SKIP
>>> "Lato" in options.fonts  # doctest: +SKIP
True
"""

from .loader import build_render_options, load_render_options
from .models import ConfigError, RenderOptions

__all__ = [
    "ConfigError",
    "RenderOptions",
    "build_render_options",
    "load_render_options",
]
