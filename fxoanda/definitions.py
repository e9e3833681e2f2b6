"""Typed OANDA v20 definitions for the instrument endpoints."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from fxoanda.serdes import (
    BOOLEAN,
    DECIMAL_STRING,
    FLEXIBLE_TIMESTAMP,
    INTEGER,
    STRING,
    EnumCodec,
    FieldSpec,
    JsonModel,
    ListCodec,
    ObjectCodec,
    Timestamp,
)


class CandlestickGranularity(str, Enum):
    """Candle width; S=seconds, M=minutes, H=hours, D/W/M=day/week/month."""

    S5 = "S5"
    S10 = "S10"
    S15 = "S15"
    S30 = "S30"
    M1 = "M1"
    M2 = "M2"
    M4 = "M4"
    M5 = "M5"
    M10 = "M10"
    M15 = "M15"
    M30 = "M30"
    H1 = "H1"
    H2 = "H2"
    H3 = "H3"
    H4 = "H4"
    H6 = "H6"
    H8 = "H8"
    H12 = "H12"
    D = "D"
    W = "W"
    M = "M"


class WeeklyAlignment(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


@dataclass
class CandlestickData(JsonModel):
    """Open/high/low/close prices of one candle side."""

    o: Decimal | None = None
    h: Decimal | None = None
    l: Decimal | None = None  # noqa: E741
    c: Decimal | None = None

    FIELDS = (
        FieldSpec("o", "o", DECIMAL_STRING),
        FieldSpec("h", "h", DECIMAL_STRING),
        FieldSpec("l", "l", DECIMAL_STRING),
        FieldSpec("c", "c", DECIMAL_STRING),
    )


@dataclass
class Candlestick(JsonModel):
    """A candle with bid, ask and/or mid prices."""

    time: Timestamp | None = None
    bid: CandlestickData | None = None
    ask: CandlestickData | None = None
    mid: CandlestickData | None = None
    volume: int | None = None
    complete: bool | None = None

    FIELDS = (
        FieldSpec("time", "time", FLEXIBLE_TIMESTAMP),
        FieldSpec("bid", "bid", ObjectCodec(CandlestickData)),
        FieldSpec("ask", "ask", ObjectCodec(CandlestickData)),
        FieldSpec("mid", "mid", ObjectCodec(CandlestickData)),
        FieldSpec("volume", "volume", INTEGER),
        FieldSpec("complete", "complete", BOOLEAN),
    )

    @property
    def prices(self) -> CandlestickData | None:
        """Mid prices when present, else bid, else ask."""
        return self.mid or self.bid or self.ask


@dataclass
class OrderBookBucket(JsonModel):
    """Percentage of orders resting at one price bucket."""

    price: Decimal | None = None
    long_count_percent: Decimal | None = None
    short_count_percent: Decimal | None = None

    FIELDS = (
        FieldSpec("price", "price", DECIMAL_STRING),
        FieldSpec("long_count_percent", "longCountPercent", DECIMAL_STRING),
        FieldSpec("short_count_percent", "shortCountPercent", DECIMAL_STRING),
    )


@dataclass
class OrderBook(JsonModel):
    """Snapshot of the order book for an instrument."""

    instrument: str | None = None
    time: Timestamp | None = None
    price: Decimal | None = None
    bucket_width: Decimal | None = None
    buckets: list[OrderBookBucket] = field(default_factory=list)

    FIELDS = (
        FieldSpec("instrument", "instrument", STRING),
        FieldSpec("time", "time", FLEXIBLE_TIMESTAMP),
        FieldSpec("price", "price", DECIMAL_STRING),
        FieldSpec("bucket_width", "bucketWidth", DECIMAL_STRING),
        FieldSpec("buckets", "buckets", ListCodec(ObjectCodec(OrderBookBucket))),
    )

    def __post_init__(self) -> None:
        if self.buckets is None:
            self.buckets = []


@dataclass
class PositionBookBucket(JsonModel):
    """Percentage of positions held at one price bucket."""

    price: Decimal | None = None
    long_count_percent: Decimal | None = None
    short_count_percent: Decimal | None = None

    FIELDS = (
        FieldSpec("price", "price", DECIMAL_STRING),
        FieldSpec("long_count_percent", "longCountPercent", DECIMAL_STRING),
        FieldSpec("short_count_percent", "shortCountPercent", DECIMAL_STRING),
    )


@dataclass
class PositionBook(JsonModel):
    """Snapshot of the position book for an instrument."""

    instrument: str | None = None
    time: Timestamp | None = None
    price: Decimal | None = None
    bucket_width: Decimal | None = None
    buckets: list[PositionBookBucket] = field(default_factory=list)

    FIELDS = (
        FieldSpec("instrument", "instrument", STRING),
        FieldSpec("time", "time", FLEXIBLE_TIMESTAMP),
        FieldSpec("price", "price", DECIMAL_STRING),
        FieldSpec("bucket_width", "bucketWidth", DECIMAL_STRING),
        FieldSpec("buckets", "buckets", ListCodec(ObjectCodec(PositionBookBucket))),
    )

    def __post_init__(self) -> None:
        if self.buckets is None:
            self.buckets = []
