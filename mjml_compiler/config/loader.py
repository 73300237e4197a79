"""Load render options YAML into :class:`RenderOptions`."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .._constants import DEFAULT_FONTS
from .models import ConfigError, RenderOptions

if typ.TYPE_CHECKING:
    from pathlib import Path

_OPTION_KEYS = frozenset({"keep_comments", "validation_level"})


def load_render_options(path: Path) -> RenderOptions:
    """Load the YAML file describing how documents should be compiled.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML options file (for example,
        ``mjml.yaml``).

    Returns
    -------
    RenderOptions
        Options with the default font table extended by any ``fonts``
        entries in the file.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ConfigError
        If the file is not a mapping, names unknown options, or holds values
        of the wrong type.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> options = load_render_options(Path("mjml.yaml"))  # doctest: +SKIP
    >>> options.validation_level  # doctest: +SKIP
    'soft'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ConfigError(msg)
    return build_render_options(loaded)


def build_render_options(raw: typ.Mapping[str, typ.Any]) -> RenderOptions:
    """Build :class:`RenderOptions` from an already-parsed mapping."""
    options_raw = raw.get("options") or {}
    if not isinstance(options_raw, dict):
        msg = "'options' must be a mapping."
        raise ConfigError(msg)
    unknown = sorted(set(options_raw) - _OPTION_KEYS)
    if unknown:
        msg = f"Unknown render options: {', '.join(unknown)}."
        raise ConfigError(msg)

    keep_comments = options_raw.get("keep_comments", True)
    if not isinstance(keep_comments, bool):
        msg = "'options.keep_comments' must be a boolean."
        raise ConfigError(msg)

    return RenderOptions(
        fonts=_build_fonts(raw.get("fonts")),
        keep_comments=keep_comments,
        validation_level=str(options_raw.get("validation_level", "soft")),
    )


def _build_fonts(value: object | None) -> dict[str, str]:
    fonts = dict(DEFAULT_FONTS)
    match value:
        case None:
            return fonts
        case dict():
            for name, href in value.items():
                if not isinstance(href, str) or not href.strip():
                    msg = f"Font '{name}' needs a non-empty URL."
                    raise ConfigError(msg)
                fonts[str(name)] = href.strip()
            return fonts
        case _:
            msg = "'fonts' must map font names to stylesheet URLs."
            raise ConfigError(msg)


__all__ = ["build_render_options", "load_render_options"]
