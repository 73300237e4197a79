"""Result types returned by :class:`~mjml_compiler.renderer.compiler.Compiler`."""

from __future__ import annotations

import dataclasses as dc


class RenderError(ValueError):
    """Raised in strict validation mode when a compile collected errors."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        detail = "; ".join(self.errors)
        super().__init__(f"MJML validation failed: {detail}")


@dc.dataclass(frozen=True, slots=True)
class RenderResult:
    """Rendered HTML plus the non-fatal errors collected along the way.

    Examples
    --------
    >>> RenderResult(html="<html></html>").has_errors
    False
    """

    html: str
    errors: list[str] = dc.field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


__all__ = ["RenderError", "RenderResult"]
