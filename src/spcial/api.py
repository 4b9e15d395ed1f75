"""Public entry points."""

from __future__ import annotations

from typing import Any

from .errors import SpcialValueError
from .native import from_native, to_native
from .parser import parse
from .serializer import serialize
from .values import VObject


def to_object_from_string(text: str) -> VObject:
    """Parse SPCiaL *text* into a :class:`VObject`."""
    return parse(text)


def to_spcial_string(value: VObject) -> str:
    """Render *value* as SPCiaL text."""
    return serialize(value, 0)


def loads(text: str) -> dict[str, Any]:
    """Parse SPCiaL *text* into plain dicts, lists and scalars."""
    return to_native(parse(text))


def dumps(obj: Any) -> str:
    """Render a plain ``dict`` as SPCiaL text."""
    value = from_native(obj)
    if not isinstance(value, VObject):
        raise SpcialValueError(obj, "only mappings can be serialized")
    return serialize(value, 0)
