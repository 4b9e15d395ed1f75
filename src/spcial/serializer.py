"""Serializer: VObject → SPCiaL text."""

from __future__ import annotations

import logging

from . import grammar
from .errors import SpcialValueError
from .evaluator import format_scalar
from .values import VList, VObject, VText, check_homogeneous

_LOGGER = logging.getLogger(__name__)

_KEY_ILLEGAL = ("=", "\n", "\r")


def serialize(obj: VObject, indent: int = 0) -> str:
    """Render *obj* one entry per line, each padded by *indent* spaces.

    Nested objects go four columns deeper; block-array elements get a
    ``*`` marker four columns deeper and object bodies eight.
    """
    if not isinstance(obj, VObject):
        raise SpcialValueError(obj, "only objects can be serialized")

    pad = " " * indent
    out: list[str] = []

    for key, value in obj.entries.items():
        is_header = isinstance(value, VObject)
        check_key(key, is_header)
        if is_header:
            out.append(f"{pad}{key}{grammar.OBJECT_HEADER}\n")
            out.append(serialize(value, indent + grammar.CHILD_INDENT))
        elif isinstance(value, VList) and _needs_block_form(value):
            out.append(f"{pad}{key} {grammar.ARRAY_HEADER}\n")
            out.extend(_serialize_block_array(value, indent))
        else:
            out.append(f"{pad}{key} {grammar.ASSIGN} {format_scalar(value)}\n")

    return "".join(out)


def check_key(key: str, is_header: bool = False) -> None:
    """Raise :class:`SpcialValueError` for keys that would not parse back."""
    if not isinstance(key, str):
        raise SpcialValueError(key, "object keys must be strings")
    if key != key.strip():
        raise SpcialValueError(key, "keys cannot have surrounding whitespace")
    if key.startswith((grammar.COMMENT, grammar.MARKER)):
        raise SpcialValueError(key, "keys cannot start with '#' or '*'")
    if any(ch in key for ch in _KEY_ILLEGAL):
        raise SpcialValueError(key, "keys cannot contain '=' or line breaks")
    if is_header and grammar.HEADER_ILLEGAL_RE.search(key):
        raise SpcialValueError(key, "object keys may only hold word characters and spaces")


def _needs_block_form(value: VList) -> bool:
    """Objects, and text ending in a backslash, cannot be written inline."""
    check_homogeneous(value.items)
    if not value.items:
        return False
    if isinstance(value.items[0], VObject):
        return True
    return isinstance(value.items[0], VText) and any(
        item.value.endswith("\\") for item in value.items
    )


def _serialize_block_array(value: VList, indent: int) -> list[str]:
    marker_pad = " " * (indent + grammar.CHILD_INDENT)
    out: list[str] = []
    for element in value.items:
        if isinstance(element, VObject):
            out.append(f"{marker_pad}{grammar.MARKER} {grammar.OBJECT_HEADER}\n")
            out.append(serialize(element, indent + grammar.ELEMENT_BODY_INDENT))
        else:
            out.append(f"{marker_pad}{grammar.MARKER} {format_scalar(element)}\n")
    _LOGGER.debug("Serialized block array of %d elements", len(value.items))
    return out
