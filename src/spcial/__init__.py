"""SPCiaL: parser and serializer for an indentation-scoped configuration notation."""

from .api import dumps, loads, to_object_from_string, to_spcial_string
from .errors import SpcialError, SpcialSyntaxError, SpcialValueError
from .native import from_native, to_native
from .parser import parse
from .serializer import serialize
from .values import (
    Nothing,
    Tag,
    Value,
    VBool,
    VList,
    VNumber,
    VObject,
    VText,
    _Nothing,
    tag_of,
)

__all__ = [
    "to_object_from_string",
    "to_spcial_string",
    "loads",
    "dumps",
    "parse",
    "serialize",
    "from_native",
    "to_native",
    "Nothing",
    "Tag",
    "Value",
    "VBool",
    "VList",
    "VNumber",
    "VObject",
    "VText",
    "_Nothing",
    "tag_of",
    "SpcialError",
    "SpcialSyntaxError",
    "SpcialValueError",
]
