"""Conversion between plain Python values and SPCiaL Values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import SpcialValueError
from .values import Nothing, Value, VBool, VList, VNumber, VObject, VText, _Nothing


def from_native(obj: Any) -> Value:
    """Build a Value from dicts, lists, tuples and scalars.

    Types without a SPCiaL form (functions, sets, bytes, ...) and mapping
    keys that are not strings raise :class:`SpcialValueError`.
    """
    if obj is None:
        return Nothing
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, (int, float)):
        return VNumber(obj)
    if isinstance(obj, str):
        return VText(obj)
    if isinstance(obj, Mapping):
        entries: dict[str, Value] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise SpcialValueError(key, "object keys must be strings")
            entries[key] = from_native(item)
        return VObject(entries)
    if isinstance(obj, (list, tuple)):
        return VList([from_native(item) for item in obj])
    raise SpcialValueError(obj, "no SPCiaL representation")


def to_native(value: Value) -> Any:
    """Inverse of :func:`from_native`."""
    if isinstance(value, _Nothing):
        return None
    if isinstance(value, (VBool, VNumber, VText)):
        return value.value
    if isinstance(value, VList):
        return [to_native(item) for item in value.items]
    if isinstance(value, VObject):
        return {key: to_native(item) for key, item in value.entries.items()}
    raise SpcialValueError(value, "not a SPCiaL value")
