"""JSON value codecs for the OANDA v20 wire format."""

from fxoanda.serdes.codecs import (
    BOOLEAN,
    DECIMAL_STRING,
    FLEXIBLE_TIMESTAMP,
    INTEGER,
    NUMERIC_STRING,
    STRING,
    Codec,
    DecimalStringCodec,
    EnumCodec,
    FlexibleTimestampCodec,
    ListCodec,
    NumericStringCodec,
    ObjectCodec,
    PlainCodec,
)
from fxoanda.serdes.errors import DecodeError, InvalidFormatError
from fxoanda.serdes.fields import FieldSpec, JsonModel, decode_fields, encode_fields
from fxoanda.serdes.timestamp import Timestamp

__all__ = [
    "Codec",
    "NumericStringCodec",
    "FlexibleTimestampCodec",
    "DecimalStringCodec",
    "PlainCodec",
    "EnumCodec",
    "ListCodec",
    "ObjectCodec",
    "NUMERIC_STRING",
    "FLEXIBLE_TIMESTAMP",
    "DECIMAL_STRING",
    "STRING",
    "BOOLEAN",
    "INTEGER",
    "DecodeError",
    "InvalidFormatError",
    "FieldSpec",
    "JsonModel",
    "decode_fields",
    "encode_fields",
    "Timestamp",
]
