"""Tests for field-level codec selection and the supplemental codecs."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from fxoanda.definitions import CandlestickGranularity, WeeklyAlignment
from fxoanda.instrument import CandlesQuery, InstrumentCandlesResponse
from fxoanda.serdes import (
    DECIMAL_STRING,
    NUMERIC_STRING,
    STRING,
    DecodeError,
    EnumCodec,
    FieldSpec,
    InvalidFormatError,
    ListCodec,
    Timestamp,
    decode_fields,
    encode_fields,
)


def test_candles_query_scenario():
    """count as string, from as RFC3339, to as the "0" sentinel."""
    print("\n" + "=" * 60)
    print("Test: Mixed-encoding query decode")
    print("=" * 60)

    query = CandlesQuery.from_json(
        {"count": "25", "from": "2024-01-15T09:45:30Z", "to": "0"}
    )
    print(f"Decoded: {query}")

    assert query.count == 25
    assert query.from_time == Timestamp(datetime(2024, 1, 15, 9, 45, 30, tzinfo=timezone.utc))
    assert query.to_time is None
    assert query.granularity is None
    print("✅ PASS: count=25, from set, to absent")


def test_unknown_keys_ignored():
    query = CandlesQuery.from_json({"count": 5, "somethingNew": [1, 2, 3]})
    assert query.count == 5


class TestDecodeFields:
    """decode_fields walks the declared fields only."""

    FIELDS = (
        FieldSpec("name", "name", STRING),
        FieldSpec("trade_id", "tradeID", NUMERIC_STRING),
    )

    def test_missing_key_is_absent(self):
        assert decode_fields({"name": "x"}, self.FIELDS) == {"name": "x", "trade_id": None}

    def test_error_carries_wire_name(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_fields({"tradeID": "12a"}, self.FIELDS)
        assert exc_info.value.path == ["tradeID"]
        assert exc_info.value.path_str == "tradeID"

    def test_non_object_rejected(self):
        with pytest.raises(InvalidFormatError):
            decode_fields(["name"], self.FIELDS)

    def test_encode_skips_absent(self):
        assert encode_fields({"name": "x", "trade_id": None}, self.FIELDS) == {"name": "x"}

    def test_encode_keeps_nulls_when_asked(self):
        out = encode_fields({"name": None, "trade_id": 7}, self.FIELDS, skip_none=False)
        assert out == {"name": None, "tradeID": "7"}


class TestNestedPaths:
    """Failures deep inside a response report the full path."""

    def test_list_index_in_path(self):
        payload = {
            "candles": [
                {"time": "2024-01-15T09:45:30Z"},
                {"time": "00"},
            ]
        }
        with pytest.raises(InvalidFormatError) as exc_info:
            InstrumentCandlesResponse.from_json(payload)
        assert exc_info.value.path_str == "candles[1].time"
        assert exc_info.value.value == "00"

    def test_nested_object_in_path(self):
        payload = {"candles": [{"mid": {"o": "1.0951", "h": "abc"}}]}
        with pytest.raises(InvalidFormatError) as exc_info:
            InstrumentCandlesResponse.from_json(payload)
        assert exc_info.value.path_str == "candles[0].mid.h"

    def test_wrong_container_type(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            InstrumentCandlesResponse.from_json({"candles": {"time": "0"}})
        assert exc_info.value.reason == "unsupported type for list field"
        assert exc_info.value.path_str == "candles"


class TestDecimalStringCodec:
    def test_string_and_number(self):
        assert DECIMAL_STRING.decode("1.09512") == Decimal("1.09512")
        assert DECIMAL_STRING.decode(3) == Decimal(3)
        assert DECIMAL_STRING.decode(1.1) == Decimal("1.1")

    def test_trailing_zeros_kept(self):
        assert DECIMAL_STRING.encode(DECIMAL_STRING.decode("1.09630")) == "1.09630"

    @pytest.mark.parametrize("raw", ["", "NaN", "Infinity", " 1.0", "1,5", "abc"])
    def test_malformed_rejected(self, raw):
        with pytest.raises(InvalidFormatError) as exc_info:
            DECIMAL_STRING.decode(raw)
        assert exc_info.value.reason == "not a valid decimal string"

    @pytest.mark.parametrize("raw", [True, [], {}])
    def test_wrong_type_rejected(self, raw):
        with pytest.raises(InvalidFormatError):
            DECIMAL_STRING.decode(raw)


class TestEnumAndPlainCodecs:
    def test_enum_by_value(self):
        codec = EnumCodec(CandlestickGranularity)
        assert codec.decode("H4") is CandlestickGranularity.H4
        assert codec.encode(WeeklyAlignment.FRIDAY) == "Friday"

    def test_unknown_enum_value(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            EnumCodec(CandlestickGranularity).decode("H5")
        assert exc_info.value.reason == "unknown CandlestickGranularity value"

    def test_plain_type_check(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            STRING.decode(5)
        assert exc_info.value.reason == "unsupported type for string field"

    def test_list_codec_round_trip(self):
        codec = ListCodec(NUMERIC_STRING)
        assert codec.decode(["1", 2, None]) == [1, 2, None]
        assert codec.encode([1, 2]) == ["1", "2"]
