"""Tests for NumericStringCodec - integers sent as strings or numbers."""

import pytest

from fxoanda.serdes import InvalidFormatError, NumericStringCodec
from fxoanda.serdes.codecs import INT32_MAX, INT32_MIN


@pytest.fixture
def codec():
    return NumericStringCodec()


class TestEncode:
    """Encoding writes the decimal string form."""

    def test_none_is_null(self, codec):
        assert codec.encode(None) is None

    @pytest.mark.parametrize(
        "value,expected",
        [(0, "0"), (25, "25"), (-5, "-5"), (INT32_MAX, "2147483647"), (INT32_MIN, "-2147483648")],
    )
    def test_integer_is_string(self, codec, value, expected):
        assert codec.encode(value) == expected

    @pytest.mark.parametrize("value", [INT32_MAX + 1, INT32_MIN - 1, 2**40])
    def test_out_of_range_refused(self, codec, value):
        with pytest.raises(ValueError, match="32-bit"):
            codec.encode(value)

    @pytest.mark.parametrize("value", [True, False, "5", 5.0])
    def test_non_int_refused(self, codec, value):
        with pytest.raises(ValueError, match="expected an int"):
            codec.encode(value)


class TestDecode:
    """Decoding accepts numbers and numeric strings."""

    def test_null_is_absent(self, codec):
        assert codec.decode(None) is None

    def test_number_and_string_agree(self, codec):
        assert codec.decode(42) == codec.decode("42") == 42

    def test_signed_strings(self, codec):
        assert codec.decode("-17") == -17
        assert codec.decode("+7") == 7

    def test_leading_zeros_parse(self, codec):
        assert codec.decode("007") == 7

    def test_int32_bounds(self, codec):
        assert codec.decode(str(INT32_MAX)) == INT32_MAX
        assert codec.decode(str(INT32_MIN)) == INT32_MIN
        assert codec.decode(INT32_MIN) == INT32_MIN

    @pytest.mark.parametrize("raw", ["not_a_number", "", " 5", "5 ", "1.5", "1e3", "0x1A", "1_000"])
    def test_malformed_string_rejected(self, codec, raw):
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode(raw)
        assert exc_info.value.reason == "not a valid integer string"
        assert exc_info.value.value == raw

    @pytest.mark.parametrize("raw", ["2147483648", "-2147483649", "99999999999"])
    def test_out_of_range_string_rejected(self, codec, raw):
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode(raw)
        assert exc_info.value.reason == "not a valid integer string"

    @pytest.mark.parametrize("raw", [2**31, -(2**31) - 1, 42.0, 1.5])
    def test_number_outside_int32_rejected(self, codec, raw):
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode(raw)
        assert exc_info.value.reason == "number is not a 32-bit signed integer"

    @pytest.mark.parametrize("raw", [True, False, {}, {"value": 1}, [], [1]])
    def test_other_types_rejected(self, codec, raw):
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode(raw)
        assert exc_info.value.reason == "unsupported type for integer field"


def test_round_trip():
    """decode(encode(v)) == v across the 32-bit range."""
    codec = NumericStringCodec()
    for value in (0, 1, -1, 25, 86400, -99999, INT32_MAX, INT32_MIN, None):
        assert codec.decode(codec.encode(value)) == value


def test_error_message_includes_value():
    """The error renders reason and the offending string."""
    with pytest.raises(InvalidFormatError) as exc_info:
        NumericStringCodec().decode("abc")
    assert str(exc_info.value) == "not a valid integer string: 'abc'"
