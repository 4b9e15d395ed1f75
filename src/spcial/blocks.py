"""Line-level utilities: block windows, indentation scoping, line classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from . import grammar


# ---------------------------------------------------------------------------
# Block: window onto the shared source lines
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Block:
    """Half-open range ``[start, end)`` over a document's lines.

    Nested blocks share the same ``lines`` list, so line numbers stay
    absolute no matter how deep the recursion goes.
    """

    lines: list[str]
    start: int
    end: int

    @classmethod
    def from_text(cls, text: str) -> "Block":
        lines = text.split("\n")
        return cls(lines, 0, len(lines))

    def sub(self, start: int, end: int) -> "Block":
        return Block(self.lines, start, end)

    def __len__(self) -> int:
        return self.end - self.start


def indent_of(line: str) -> int:
    """Leading-whitespace width; every whitespace character is one column."""
    return len(line) - len(line.lstrip())


def children_end(lines: list[str], header: int, end: int) -> int:
    """Index one past the last child line of the header at *header*.

    A child is indented at least :data:`grammar.CHILD_INDENT` columns past the
    header.  The run stops at the first line that is not, so a blank line
    closes the block.
    """
    limit = indent_of(lines[header]) + grammar.CHILD_INDENT
    i = header + 1
    while i < end and indent_of(lines[i]) >= limit:
        i += 1
    return i


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------

class LineKind(Enum):
    SKIP = auto()           # blank or comment
    MARKER = auto()         # * element
    ARRAY_HEADER = auto()   # key :=
    OBJECT_HEADER = auto()  # key:
    ASSIGNMENT = auto()     # key = value
    INVALID = auto()


def classify(line: str) -> LineKind:
    stripped = line.strip()
    if not stripped or stripped.startswith(grammar.COMMENT):
        return LineKind.SKIP
    if stripped.startswith(grammar.MARKER):
        return LineKind.MARKER
    if stripped.endswith(grammar.ARRAY_HEADER):
        return LineKind.ARRAY_HEADER
    if stripped.endswith(grammar.OBJECT_HEADER):
        return LineKind.OBJECT_HEADER
    if grammar.ASSIGN in stripped:
        return LineKind.ASSIGNMENT
    return LineKind.INVALID


def is_valid_header(line: str) -> bool:
    """An object header may only hold word characters, spaces and ``:``."""
    return grammar.HEADER_ILLEGAL_RE.search(line) is None


def header_key(line: str, suffix: str) -> str:
    """Key of a header line, i.e. the text before *suffix*, trimmed."""
    stripped = line.strip()
    return stripped[: len(stripped) - len(suffix)].strip()


def split_assignment(line: str) -> tuple[str, str]:
    """Split ``key = value`` on the first ``=`` into trimmed key and rhs."""
    key, _, rhs = line.partition(grammar.ASSIGN)
    return key.strip(), strip_comment(rhs.strip())


def strip_comment(rhs: str) -> str:
    """Drop a trailing ``#`` comment that is not inside quoted text.

    Only a ``#`` after the last ``"`` on the line counts as a comment.
    """
    last_quote = rhs.rfind(grammar.QUOTE)
    hash_at = rhs.find(grammar.COMMENT, last_quote + 1)
    if hash_at == -1:
        return rhs
    return rhs[:hash_at].strip()
