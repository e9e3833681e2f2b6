"""Instrument endpoints: candles, order book and position book."""

from dataclasses import dataclass, field
from typing import Any, ClassVar
from urllib.parse import quote

from fxoanda.definitions import (
    Candlestick,
    CandlestickGranularity,
    OrderBook,
    PositionBook,
    WeeklyAlignment,
)
from fxoanda.errors import RequestValidationError, ValidationKind
from fxoanda.serdes import (
    BOOLEAN,
    FLEXIBLE_TIMESTAMP,
    NUMERIC_STRING,
    STRING,
    EnumCodec,
    FieldSpec,
    JsonModel,
    ListCodec,
    ObjectCodec,
    Timestamp,
    encode_fields,
)


def _query_params(values: dict[str, Any], fields: tuple[FieldSpec, ...]) -> dict[str, str]:
    """Encode fields for a query string: absent fields dropped, bools lowercased."""
    params = {}
    for key, value in encode_fields(values, fields).items():
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        else:
            params[key] = str(value)
    return params


def _instrument_path(template: str, instrument: str | None) -> str:
    if not instrument:
        raise RequestValidationError(ValidationKind.MISSING_INSTRUMENT)
    return template.format(instrument=quote(instrument, safe=""))


@dataclass
class CandlesQuery(JsonModel):
    """Query parameters for fetching candlesticks.

    ``count`` should not be combined with both ``from_time`` and ``to_time``;
    the range and granularity already fix the number of candles.
    """

    price: str | None = None  # any of "M", "B", "A"
    granularity: CandlestickGranularity | None = None
    count: int | None = None
    from_time: Timestamp | None = None
    to_time: Timestamp | None = None
    smooth: bool | None = None
    include_first: bool | None = None
    daily_alignment: int | None = None
    alignment_timezone: str | None = None
    weekly_alignment: WeeklyAlignment | None = None

    FIELDS = (
        FieldSpec("price", "price", STRING),
        FieldSpec("granularity", "granularity", EnumCodec(CandlestickGranularity)),
        FieldSpec("count", "count", NUMERIC_STRING),
        FieldSpec("from_time", "from", FLEXIBLE_TIMESTAMP),
        FieldSpec("to_time", "to", FLEXIBLE_TIMESTAMP),
        FieldSpec("smooth", "smooth", BOOLEAN),
        FieldSpec("include_first", "includeFirst", BOOLEAN),
        FieldSpec("daily_alignment", "dailyAlignment", NUMERIC_STRING),
        FieldSpec("alignment_timezone", "alignmentTimezone", STRING),
        FieldSpec("weekly_alignment", "weeklyAlignment", EnumCodec(WeeklyAlignment)),
    )

    def to_params(self) -> dict[str, str]:
        return _query_params(
            {spec.attr: getattr(self, spec.attr) for spec in self.FIELDS}, self.FIELDS
        )


@dataclass
class InstrumentCandlesResponse(JsonModel):
    instrument: str | None = None
    granularity: CandlestickGranularity | None = None
    candles: list[Candlestick] | None = None

    FIELDS = (
        FieldSpec("instrument", "instrument", STRING),
        FieldSpec("granularity", "granularity", EnumCodec(CandlestickGranularity)),
        FieldSpec("candles", "candles", ListCodec(ObjectCodec(Candlestick))),
    )


@dataclass
class OrderBookResponse(JsonModel):
    order_book: OrderBook | None = None

    FIELDS = (FieldSpec("order_book", "orderBook", ObjectCodec(OrderBook)),)


@dataclass
class PositionBookResponse(JsonModel):
    position_book: PositionBook | None = None

    FIELDS = (FieldSpec("position_book", "positionBook", ObjectCodec(PositionBook)),)


@dataclass
class InstrumentCandlesRequest:
    """Get Candlesticks: fetch candlestick data for an instrument."""

    instrument: str | None = None
    query: CandlesQuery = field(default_factory=CandlesQuery)

    URI: ClassVar[str] = "/v3/instruments/{instrument}/candles"
    response_cls: ClassVar[type] = InstrumentCandlesResponse

    def path(self) -> str:
        return _instrument_path(self.URI, self.instrument)

    def params(self) -> dict[str, str]:
        return self.query.to_params()


_BOOK_QUERY = (FieldSpec("time", "time", FLEXIBLE_TIMESTAMP),)


@dataclass
class OrderBookRequest:
    """Get Order Book: snapshot at ``time``, or the latest when unset."""

    instrument: str | None = None
    time: Timestamp | None = None

    URI: ClassVar[str] = "/v3/instruments/{instrument}/orderBook"
    response_cls: ClassVar[type] = OrderBookResponse

    def path(self) -> str:
        return _instrument_path(self.URI, self.instrument)

    def params(self) -> dict[str, str]:
        return _query_params({"time": self.time}, _BOOK_QUERY)


@dataclass
class PositionBookRequest:
    """Get Position Book: snapshot at ``time``, or the latest when unset."""

    instrument: str | None = None
    time: Timestamp | None = None

    URI: ClassVar[str] = "/v3/instruments/{instrument}/positionBook"
    response_cls: ClassVar[type] = PositionBookResponse

    def path(self) -> str:
        return _instrument_path(self.URI, self.instrument)

    def params(self) -> dict[str, str]:
        return _query_params({"time": self.time}, _BOOK_QUERY)
