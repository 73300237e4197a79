"""Typed dataclasses describing compile-time rendering options."""

from __future__ import annotations

import dataclasses as dc

from .._constants import DEFAULT_FONTS

VALIDATION_LEVELS = ("soft", "strict")


class ConfigError(ValueError):
    """Raised when a render options file is invalid or incomplete."""


@dc.dataclass(slots=True)
class RenderOptions:
    """Options applied to a single compile.

    Attributes
    ----------
    fonts : dict[str, str]
        Web fonts known before the head is processed, keyed by family name.
        ``mj-font`` entries are added on top of these.
    keep_comments : bool
        Keep HTML comments found in ending-tag content. Outlook conditional
        comments are always kept.
    validation_level : str
        ``"soft"`` returns validation messages alongside the HTML;
        ``"strict"`` makes the compiler raise when any were collected.
    """

    fonts: dict[str, str] = dc.field(default_factory=lambda: dict(DEFAULT_FONTS))
    keep_comments: bool = True
    validation_level: str = "soft"

    def __post_init__(self) -> None:
        if self.validation_level not in VALIDATION_LEVELS:
            msg = (
                f"Unknown validation level {self.validation_level!r}; "
                f"expected one of {', '.join(VALIDATION_LEVELS)}."
            )
            raise ConfigError(msg)


__all__ = ["VALIDATION_LEVELS", "ConfigError", "RenderOptions"]
