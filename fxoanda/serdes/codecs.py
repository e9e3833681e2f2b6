"""Field codecs bridging OANDA's JSON encodings and typed Python values.

Every codec maps ``None`` to JSON null and back; absence is never an error.
"""

import math
import re
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from fxoanda.serdes.errors import DecodeError, InvalidFormatError
from fxoanda.serdes.timestamp import Timestamp

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

ZERO_SENTINEL = "0"

_INT_STRING = re.compile(r"[+-]?[0-9]+")
_DECIMAL_STRING = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class Codec(ABC):
    """Paired encode/decode between a domain value and its JSON form."""

    @abstractmethod
    def encode(self, value: Any) -> Any:
        """Convert a domain value (or None) to a JSON-compatible value."""
        pass

    @abstractmethod
    def decode(self, value: Any) -> Any:
        """
        Convert a parsed JSON value to a domain value (or None).

        Raises:
            DecodeError: If the value cannot be interpreted.
        """
        pass


class NumericStringCodec(Codec):
    """Optional 32-bit integer written as a string, read from string or number."""

    def encode(self, value: int | None) -> str | None:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"expected an int, got {type(value).__name__}")
        if not INT32_MIN <= value <= INT32_MAX:
            raise ValueError(f"{value} is outside the 32-bit signed range")
        return str(value)

    def decode(self, value: Any) -> int | None:
        if value is None:
            return None

        # bool is an int subclass in Python but a distinct JSON type
        if isinstance(value, bool):
            raise InvalidFormatError("unsupported type for integer field", value)

        if isinstance(value, int):
            if INT32_MIN <= value <= INT32_MAX:
                return value
            raise InvalidFormatError("number is not a 32-bit signed integer", value)

        if isinstance(value, float):
            raise InvalidFormatError("number is not a 32-bit signed integer", value)

        if isinstance(value, str):
            if _INT_STRING.fullmatch(value):
                try:
                    parsed = int(value)
                except ValueError:
                    # past the interpreter's int digit limit
                    parsed = None
                if parsed is not None and INT32_MIN <= parsed <= INT32_MAX:
                    return parsed
            raise InvalidFormatError("not a valid integer string", value)

        raise InvalidFormatError("unsupported type for integer field", value)


class FlexibleTimestampCodec(Codec):
    """Optional timestamp as RFC3339; the string ``"0"`` reads as unset."""

    def encode(self, value: Timestamp | datetime | None) -> str | None:
        if value is None:
            return None
        if isinstance(value, datetime):
            value = Timestamp.from_datetime(value)
        if not isinstance(value, Timestamp):
            raise TypeError(f"expected Timestamp or datetime, got {type(value).__name__}")
        return value.isoformat()

    def decode(self, value: Any) -> Timestamp | None:
        if value is None:
            return None

        if not isinstance(value, str):
            raise InvalidFormatError("unsupported type for timestamp field", value)

        # Literal comparison: "00" and "0.0" must fall through and fail parsing.
        if value == ZERO_SENTINEL:
            return None

        try:
            return Timestamp.parse(value)
        except ValueError:
            raise InvalidFormatError("invalid RFC3339 timestamp", value) from None


class DecimalStringCodec(Codec):
    """Broker price/decimal values, sent as strings, held as Decimal."""

    def encode(self, value: Decimal | None) -> str | None:
        if value is None:
            return None
        return str(value)

    def decode(self, value: Any) -> Decimal | None:
        if value is None:
            return None
        if isinstance(value, bool):
            raise InvalidFormatError("unsupported type for decimal field", value)
        if isinstance(value, int):
            return Decimal(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidFormatError("not a finite decimal number", value)
            # go through repr so 1.1 stays 1.1 rather than its binary expansion
            return Decimal(repr(value))
        if isinstance(value, str):
            if _DECIMAL_STRING.fullmatch(value):
                try:
                    return Decimal(value)
                except InvalidOperation:
                    pass
            raise InvalidFormatError("not a valid decimal string", value)
        raise InvalidFormatError("unsupported type for decimal field", value)


class PlainCodec(Codec):
    """Default JSON behaviour with a type check."""

    def __init__(self, *types: type, name: str | None = None) -> None:
        self.types = types
        self.name = name or "/".join(t.__name__ for t in types)

    def encode(self, value: Any) -> Any:
        return value

    def decode(self, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, bool) and bool not in self.types:
            raise InvalidFormatError(f"unsupported type for {self.name} field", value)
        if not isinstance(value, self.types):
            raise InvalidFormatError(f"unsupported type for {self.name} field", value)
        return value


class EnumCodec(Codec):
    """String-valued Enum."""

    def __init__(self, enum_cls: type[Enum]) -> None:
        self.enum_cls = enum_cls

    def encode(self, value: Enum | None) -> Any:
        if value is None:
            return None
        return value.value

    def decode(self, value: Any) -> Enum | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise InvalidFormatError(
                f"unsupported type for {self.enum_cls.__name__} field", value
            )
        try:
            return self.enum_cls(value)
        except ValueError:
            raise InvalidFormatError(f"unknown {self.enum_cls.__name__} value", value) from None


class ListCodec(Codec):
    """JSON array whose items all use one codec."""

    def __init__(self, item_codec: Codec) -> None:
        self.item_codec = item_codec

    def encode(self, value: list | None) -> list | None:
        if value is None:
            return None
        return [self.item_codec.encode(item) for item in value]

    def decode(self, value: Any) -> list | None:
        if value is None:
            return None
        if not isinstance(value, list):
            raise InvalidFormatError("unsupported type for list field", value)

        items = []
        for index, raw in enumerate(value):
            try:
                items.append(self.item_codec.decode(raw))
            except DecodeError as e:
                raise e.push_path(index)
        return items


class ObjectCodec(Codec):
    """Nested JSON object decoded into a model with ``from_json``/``to_json``."""

    def __init__(self, model_cls: type) -> None:
        self.model_cls = model_cls

    def encode(self, value: Any) -> dict | None:
        if value is None:
            return None
        return value.to_json()

    def decode(self, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, dict):
            raise InvalidFormatError(
                f"unsupported type for {self.model_cls.__name__} field", value
            )
        return self.model_cls.from_json(value)


NUMERIC_STRING = NumericStringCodec()
FLEXIBLE_TIMESTAMP = FlexibleTimestampCodec()
DECIMAL_STRING = DecimalStringCodec()
STRING = PlainCodec(str, name="string")
BOOLEAN = PlainCodec(bool, name="boolean")
INTEGER = PlainCodec(int, name="integer")
