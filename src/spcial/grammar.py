"""Lexical constants shared by the parser and the serializer."""

from __future__ import annotations

import re

# Columns a child line must be indented past its header.
CHILD_INDENT = 4
# Columns between a ``:=`` header and the body of an object element.
ELEMENT_BODY_INDENT = 8

TRUE = "True"
FALSE = "False"
NOTHING = "Nothing"

COMMENT = "#"
MARKER = "*"
ARRAY_HEADER = ":="
OBJECT_HEADER = ":"
ASSIGN = "="
QUOTE = '"'
ESCAPED_QUOTE = '\\"'

# Anything outside this class makes an object header line invalid.
HEADER_ILLEGAL_RE = re.compile(r"[^\w\d\s:]", re.ASCII)
