"""Evaluator: SPCiaL literal tokens ⇄ scalar Values."""

from __future__ import annotations

import math
import re

from . import grammar
from .errors import SpcialSyntaxError, SpcialValueError
from .values import (
    Nothing,
    Value,
    VBool,
    VList,
    VNumber,
    VObject,
    VText,
    _Nothing,
    check_homogeneous,
)

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_PREFIXED_INT_RE = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_NON_FINITE = frozenset({"NaN", "Infinity", "+Infinity", "-Infinity"})
_BARE_WORD_RE = re.compile(r"^[^\"\[\]{},=#]+$")

# Integral floats print without a fraction below this magnitude.
_PLAIN_INT_LIMIT = 1e21


# ---------------------------------------------------------------------------
# Text → Value
# ---------------------------------------------------------------------------

def evaluate(token: str) -> Value:
    """Convert a literal token to its Value.

    Coercion order: ``True``/``False``, ``Nothing``, numbers, quoted text,
    bracketed inline arrays.  Anything else is a :class:`SpcialSyntaxError`.
    """
    token = token.strip()

    if token == grammar.TRUE:
        return VBool(True)
    if token == grammar.FALSE:
        return VBool(False)
    if token == grammar.NOTHING:
        return Nothing

    number = _parse_number(token)
    if number is not None:
        return number

    if len(token) >= 2 and token[0] == grammar.QUOTE and token[-1] == grammar.QUOTE:
        return VText(token[1:-1].replace(grammar.ESCAPED_QUOTE, grammar.QUOTE))

    if token.startswith("[") and token.endswith("]"):
        return _parse_inline_array(token)

    raise SpcialSyntaxError(reason=f"unrecognised literal {token!r}")


def evaluate_element(token: str) -> Value:
    """Evaluate a ``*`` element token; unmatched bare words become text."""
    try:
        return evaluate(token)
    except SpcialSyntaxError:
        stripped = token.strip()
        if _BARE_WORD_RE.match(stripped):
            return VText(stripped)
        raise


def _parse_number(token: str) -> VNumber | None:
    if token in _NON_FINITE:
        raise SpcialValueError(token, "non-finite numbers are not allowed")
    if _INT_RE.match(token):
        return VNumber(int(token))
    if _PREFIXED_INT_RE.match(token):
        return VNumber(int(token, 0))
    if _FLOAT_RE.match(token):
        value = float(token)
        if not math.isfinite(value):
            raise SpcialValueError(token, "non-finite numbers are not allowed")
        return VNumber(value)
    return None


def _parse_inline_array(token: str) -> VList:
    inner = token[1:-1].strip()
    if not inner:
        return VList()

    items: list[Value] = []
    for element in split_elements(inner):
        if not element:
            raise SpcialSyntaxError(reason="empty array element")
        if element.startswith("{"):
            raise SpcialSyntaxError(
                reason="objects inside arrays need the multi-line ':=' form"
            )
        items.append(evaluate(element))

    check_homogeneous(items)
    return VList(items)


def split_elements(inner: str) -> list[str]:
    """Split the inside of ``[...]`` at top-level commas.

    Commas inside quoted text or nested brackets do not split.
    """
    elements: list[str] = []
    current: list[str] = []
    depth = 0
    in_text = False
    prev = ""

    for ch in inner:
        if in_text:
            if ch == grammar.QUOTE and prev != "\\":
                in_text = False
        elif ch == grammar.QUOTE:
            in_text = True
        elif ch in "[{":
            depth += 1
        elif ch in "]}":
            depth -= 1
            if depth < 0:
                raise SpcialSyntaxError(reason="unbalanced brackets in array")
        elif ch == "," and depth == 0:
            elements.append("".join(current).strip())
            current = []
            prev = ch
            continue
        current.append(ch)
        prev = ch

    if in_text:
        raise SpcialSyntaxError(reason="unterminated text in array")
    if depth != 0:
        raise SpcialSyntaxError(reason="unbalanced brackets in array")
    elements.append("".join(current).strip())
    return elements


# ---------------------------------------------------------------------------
# Value → text
# ---------------------------------------------------------------------------

def format_number(value: int | float) -> str:
    if isinstance(value, bool):
        raise SpcialValueError(value, "booleans are not numbers")
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise SpcialValueError(value, "non-finite numbers are not allowed")
    if value.is_integer() and abs(value) < _PLAIN_INT_LIMIT:
        return str(int(value))
    return repr(value)


def format_text(value: str, in_array: bool = False) -> str:
    if "\n" in value or "\r" in value:
        raise SpcialValueError(value, "text cannot contain line breaks")
    # Inside [...] a trailing backslash would escape the closing quote.
    if in_array and value.endswith("\\"):
        raise SpcialValueError(value, "inline array text cannot end with a backslash")
    return grammar.QUOTE + value.replace(grammar.QUOTE, grammar.ESCAPED_QUOTE) + grammar.QUOTE


def format_scalar(value: Value, in_array: bool = False) -> str:
    """Render a scalar or an object-free array as a single literal token."""
    if isinstance(value, _Nothing):
        return grammar.NOTHING
    if isinstance(value, VBool):
        return grammar.TRUE if value.value else grammar.FALSE
    if isinstance(value, VNumber):
        return format_number(value.value)
    if isinstance(value, VText):
        return format_text(value.value, in_array)
    if isinstance(value, VList):
        check_homogeneous(value.items)
        return "[" + ",".join(format_scalar(item, True) for item in value.items) + "]"
    if isinstance(value, VObject):
        raise SpcialValueError(value, "objects cannot be written inline")
    raise SpcialValueError(value, "not a SPCiaL value")
