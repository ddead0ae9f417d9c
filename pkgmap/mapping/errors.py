from __future__ import annotations
from typing import Any, Optional


class MappingError(ValueError):
    """Base class for every error raised by the mapping subsystem."""


class FormatError(MappingError):
    """Mapping text (or a location inside it) violates the file grammar.

    Carries the source text and the offending offset so callers can point
    into the input.
    """

    def __init__(self, message: str, source: Optional[str] = None, offset: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.source = source
        self.offset = offset

    @property
    def line(self) -> Optional[int]:
        # 1-based; CR, LF and CRLF each end one line
        if self.source is None or self.offset is None:
            return None
        prefix = self.source[: self.offset].replace("\r\n", "\n").replace("\r", "\n")
        return prefix.count("\n") + 1

    @property
    def column(self) -> Optional[int]:
        if self.source is None or self.offset is None:
            return None
        head = self.source[: self.offset]
        cut = max(head.rfind("\n"), head.rfind("\r"))
        return self.offset - cut

    def render(self) -> str:
        """Message plus the offending line with a caret under the offset."""
        if self.source is None or self.offset is None:
            return str(self)
        start = max(self.source.rfind("\n", 0, self.offset), self.source.rfind("\r", 0, self.offset)) + 1
        end = self.offset
        while end < len(self.source) and self.source[end] not in "\r\n":
            end += 1
        text = self.source[start:end]
        return f"{self.message} (line {self.line}, column {self.column})\n{text}\n{' ' * (self.offset - start)}^"

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} (at offset {self.offset})"


class ArgumentError(MappingError):
    """A caller-supplied value violates a precondition."""

    def __init__(self, message: str, value: Any = None, name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.value = value
        self.name = name

    def __str__(self) -> str:
        if self.name is None:
            return self.message
        return f"invalid argument {self.name}={str(self.value)!r}: {self.message}"
