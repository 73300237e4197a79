"""MJML tag implementations and the machinery they share.

``base`` holds the head/body component contract, ``box`` the width
arithmetic used by layout tags, ``registry`` the tag-name lookup, and the
``head`` module and ``body`` subpackage the concrete tags. :mod:`.preset` wires the
full tag set into a :class:`Registry`.
"""

from .registry import Registry

__all__ = ["Registry"]
