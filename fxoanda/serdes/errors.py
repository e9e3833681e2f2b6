"""Decode error types for the JSON value codecs."""

from typing import Any


class DecodeError(ValueError):
    """Base class for all value decoding errors.

    ``path`` lists the wire field names (and list indexes) from the
    outermost object down to the failing value. It is filled in while the
    error propagates out of nested objects.
    """

    def __init__(self, reason: str, value: Any = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.value = value
        self.path: list[str | int] = []

    def push_path(self, segment: str | int) -> "DecodeError":
        """Prepend a path segment and return self for re-raising."""
        self.path.insert(0, segment)
        return self

    @property
    def path_str(self) -> str:
        """Render the path as ``candles[0].mid.o``."""
        out = ""
        for segment in self.path:
            if isinstance(segment, int):
                out += f"[{segment}]"
            elif out:
                out += f".{segment}"
            else:
                out = segment
        return out

    def __str__(self) -> str:
        if self.value is None:
            return self.reason
        return f"{self.reason}: {self.value!r}"


class InvalidFormatError(DecodeError):
    """The JSON value's shape or content does not fit the target type."""

    pass
