"""Render-time state and result types.

The compiler itself lives in :mod:`.compiler` and is imported from there;
this package root stays import-light because components depend on
:mod:`.context`.
"""

from .context import AttributeCascade, GlobalData, RenderContext
from .models import RenderError, RenderResult

__all__ = [
    "AttributeCascade",
    "GlobalData",
    "RenderContext",
    "RenderError",
    "RenderResult",
]
