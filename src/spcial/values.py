"""Value types for SPCiaL."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Union

from .errors import SpcialValueError


class Tag(Enum):
    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    TEXT = auto()
    LIST = auto()
    OBJECT = auto()


@dataclass
class VBool:
    value: bool


@dataclass
class VNumber:
    value: int | float


@dataclass
class VText:
    value: str


@dataclass
class VList:
    """Ordered sequence whose elements all share one tag."""

    items: list["Value"] = field(default_factory=list)

    def __post_init__(self) -> None:
        check_homogeneous(self.items)

    def append(self, item: "Value") -> None:
        if self.items and tag_of(item) is not tag_of(self.items[-1]):
            raise SpcialValueError(item, "array elements must share one type")
        self.items.append(item)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class VObject:
    """Ordered mapping of keys to values."""

    entries: dict[str, "Value"] = field(default_factory=dict)

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]

    def __setitem__(self, key: str, value: "Value") -> None:
        self.entries[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


class _Nothing:
    """Singleton for the ``Nothing`` literal."""

    _instance: "_Nothing | None" = None

    def __new__(cls) -> "_Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing"

    def __bool__(self) -> bool:
        return False


Nothing = _Nothing()

Value = Union[VBool, VNumber, VText, VList, VObject, _Nothing]


_TAGS: dict[type, Tag] = {
    _Nothing: Tag.NULL,
    VBool: Tag.BOOL,
    VNumber: Tag.NUMBER,
    VText: Tag.TEXT,
    VList: Tag.LIST,
    VObject: Tag.OBJECT,
}


def tag_of(value: object) -> Tag:
    """Return the variant tag of *value*."""
    try:
        return _TAGS[type(value)]
    except KeyError:
        raise SpcialValueError(value, "not a SPCiaL value") from None


def check_homogeneous(items: Iterable[Value]) -> None:
    """Raise :class:`SpcialValueError` unless neighbouring items share a tag."""
    previous: Tag | None = None
    for item in items:
        tag = tag_of(item)
        if previous is not None and tag is not previous:
            raise SpcialValueError(item, "array elements must share one type")
        previous = tag
