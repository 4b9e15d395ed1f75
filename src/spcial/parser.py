"""Parser: SPCiaL text → VObject, by recursive descent over indented blocks."""

from __future__ import annotations

import logging
from typing import Callable

from . import grammar
from .blocks import (
    Block,
    LineKind,
    children_end,
    classify,
    header_key,
    indent_of,
    is_valid_header,
    split_assignment,
)
from .errors import SpcialSyntaxError
from .evaluator import evaluate, evaluate_element
from .values import Value, VList, VObject

_LOGGER = logging.getLogger(__name__)


def parse(text: str) -> VObject:
    """Parse a whole SPCiaL document."""
    block = Block.from_text(text)
    _LOGGER.debug("Parsing document of %d lines", len(block))
    return parse_block(block)


def parse_block(block: Block) -> VObject:
    """Parse every line of *block* into one object.

    Headers consume their child lines; parsing resumes right after them.
    """
    obj = VObject()
    lines = block.lines
    i = block.start

    while i < block.end:
        line = lines[i]
        kind = classify(line)

        if kind is LineKind.SKIP:
            i += 1

        elif kind is LineKind.MARKER:
            raise SpcialSyntaxError(line, i, "array element outside an array block")

        elif kind is LineKind.ARRAY_HEADER:
            end = children_end(lines, i, block.end)
            obj[header_key(line, grammar.ARRAY_HEADER)] = _parse_array(block.sub(i + 1, end))
            i = end

        elif kind is LineKind.OBJECT_HEADER:
            if not is_valid_header(line):
                raise SpcialSyntaxError(line, i, "illegal character in object header")
            end = children_end(lines, i, block.end)
            obj[header_key(line, grammar.OBJECT_HEADER)] = parse_block(block.sub(i + 1, end))
            i = end

        elif kind is LineKind.ASSIGNMENT:
            key, rhs = split_assignment(line)
            obj[key] = _evaluate_at(evaluate, rhs, line, i)
            i += 1

        else:
            raise SpcialSyntaxError(line, i)

    return obj


# ---------------------------------------------------------------------------
# Multi-line arrays
# ---------------------------------------------------------------------------

def _parse_array(children: Block) -> VList:
    """Parse the child lines of a ``key :=`` header.

    Elements start at ``*`` lines indented like the first child; deeper lines
    belong to the element above them.
    """
    result = VList()
    for marker, body in _split_elements(children):
        result.append(_parse_element(marker, body))
    _LOGGER.debug(
        "Parsed array of %d elements from lines %d-%d",
        len(result), children.start, children.end,
    )
    return result


def _split_elements(children: Block) -> list[tuple[int, Block]]:
    lines = children.lines
    elements: list[tuple[int, Block]] = []
    level: int | None = None
    marker: int | None = None

    for i in range(children.start, children.end):
        line = lines[i]
        kind = classify(line)
        if kind is LineKind.SKIP:
            continue
        if level is None:
            if kind is not LineKind.MARKER:
                raise SpcialSyntaxError(line, i, "array element must start with '*'")
            level = indent_of(line)
        if kind is LineKind.MARKER and indent_of(line) == level:
            if marker is not None:
                elements.append((marker, children.sub(marker + 1, i)))
            marker = i

    if marker is not None:
        elements.append((marker, children.sub(marker + 1, children.end)))
    return elements


def _parse_element(marker: int, body: Block) -> Value:
    line = body.lines[marker]
    rest = line.strip()[len(grammar.MARKER):].strip()

    if rest.endswith(grammar.OBJECT_HEADER):
        if rest != grammar.OBJECT_HEADER:
            raise SpcialSyntaxError(line, marker, "object element must be written '* :'")
        return parse_block(body)

    for i in range(body.start, body.end):
        if classify(body.lines[i]) is not LineKind.SKIP:
            raise SpcialSyntaxError(body.lines[i], i, "unexpected line in scalar element")

    return _evaluate_at(evaluate_element, rest, line, marker)


def _evaluate_at(
    evaluator: Callable[[str], Value], token: str, line: str, line_num: int
) -> Value:
    """Evaluate *token*, pinning syntax errors to the line it came from."""
    try:
        return evaluator(token)
    except SpcialSyntaxError as err:
        raise SpcialSyntaxError(line, line_num, err.reason) from err
