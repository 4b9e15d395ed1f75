"""Error taxonomy for SPCiaL conversion."""

from __future__ import annotations


class SpcialError(Exception):
    """Base class for every error raised while converting SPCiaL."""


class SpcialSyntaxError(SpcialError):
    """Text that does not conform to the SPCiaL grammar.

    ``line`` and ``line_num`` (0-based) point at the offending source line
    when the failure can be tied to one.
    """

    def __init__(self, line: str | None = None, line_num: int | None = None,
                 reason: str | None = None) -> None:
        self.line = line
        self.line_num = line_num
        self.reason = reason
        super().__init__(self._message())

    def _message(self) -> str:
        parts = [self.reason or "invalid syntax"]
        if self.line_num is not None:
            parts.append(f"at line {self.line_num}")
        if self.line is not None:
            parts.append(f"-> {self.line.strip()!r}")
        return " ".join(parts)


class SpcialValueError(SpcialError, ValueError):
    """A grammatical but illegal value (non-finite number, mixed array, ...)."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"{reason or 'illegal value'}: {value!r}")
