"""Explicit per-field codec selection for JSON objects.

A model lists its fields once, each with the wire name and the codec that
handles it. Decoding walks that list; nothing is inferred from annotations.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from fxoanda.serdes.codecs import Codec
from fxoanda.serdes.errors import DecodeError, InvalidFormatError


@dataclass(frozen=True)
class FieldSpec:
    """Attribute name, JSON key and codec for one model field."""

    attr: str
    wire_name: str
    codec: Codec


def decode_fields(payload: Any, fields: tuple[FieldSpec, ...]) -> dict[str, Any]:
    """
    Decode a JSON object into attribute values.

    Missing keys go through the codec as null. Keys not listed in
    ``fields`` are ignored.

    Raises:
        DecodeError: With ``path`` pointing at the failing field.
    """
    if not isinstance(payload, dict):
        raise InvalidFormatError("expected a JSON object", payload)

    values: dict[str, Any] = {}
    for spec in fields:
        try:
            values[spec.attr] = spec.codec.decode(payload.get(spec.wire_name))
        except DecodeError as e:
            raise e.push_path(spec.wire_name)
    return values


def encode_fields(
    values: dict[str, Any],
    fields: tuple[FieldSpec, ...],
    skip_none: bool = True,
) -> dict[str, Any]:
    """Encode attribute values into a JSON object keyed by wire name."""
    out: dict[str, Any] = {}
    for spec in fields:
        value = values.get(spec.attr)
        if value is None and skip_none:
            continue
        out[spec.wire_name] = spec.codec.encode(value)
    return out


class JsonModel:
    """Mixin for dataclasses that declare their wire layout in ``FIELDS``."""

    FIELDS: ClassVar[tuple[FieldSpec, ...]] = ()

    @classmethod
    def from_json(cls, payload: Any) -> Any:
        return cls(**decode_fields(payload, cls.FIELDS))

    def to_json(self) -> dict[str, Any]:
        return encode_fields(
            {spec.attr: getattr(self, spec.attr) for spec in self.FIELDS},
            self.FIELDS,
        )
