"""Error types raised by the value parsers."""

from __future__ import annotations

from typing import Optional

INVALID_SYNTAX = "invalid syntax"
OUT_OF_RANGE = "value out of range"


class ParseError(ValueError):
    """A raw environment value could not be converted to the requested type.

    :ivar raw: The offending string, exactly as read.
    :ivar type_name: Target type name (``int32``, ``duration``, ...).
    :ivar reason: ``invalid syntax`` or ``value out of range``.
    :ivar key: Environment variable name, when known.
    """

    def __init__(
        self,
        raw: str,
        type_name: str,
        reason: str = INVALID_SYNTAX,
        key: Optional[str] = None,
    ) -> None:
        self.raw = raw
        self.type_name = type_name
        self.reason = reason
        self.key = key
        super().__init__(raw, type_name, reason, key)

    def __str__(self) -> str:
        message = f"parsing {self.raw!r} as {self.type_name}: {self.reason}"
        if self.key is not None:
            return f"{self.key}: {message}"
        return message

    @property
    def out_of_range(self) -> bool:
        """Return True if the literal was well-formed but did not fit the type."""
        return self.reason == OUT_OF_RANGE
