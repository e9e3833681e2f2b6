"""Unofficial async client for the OANDA v20 REST API.

Forex markets are extremely risky and automated trading more so. Use at
your own risk.
"""

from fxoanda.client import OandaClient
from fxoanda.definitions import (
    Candlestick,
    CandlestickData,
    CandlestickGranularity,
    OrderBook,
    OrderBookBucket,
    PositionBook,
    PositionBookBucket,
    WeeklyAlignment,
)
from fxoanda.errors import (
    ApiError,
    DeserializationError,
    FxError,
    HttpError,
    RequestValidationError,
    ValidationKind,
)
from fxoanda.instrument import (
    CandlesQuery,
    InstrumentCandlesRequest,
    InstrumentCandlesResponse,
    OrderBookRequest,
    OrderBookResponse,
    PositionBookRequest,
    PositionBookResponse,
)
from fxoanda.serdes import DecodeError, InvalidFormatError, Timestamp

__all__ = [
    "OandaClient",
    "Candlestick",
    "CandlestickData",
    "CandlestickGranularity",
    "WeeklyAlignment",
    "OrderBook",
    "OrderBookBucket",
    "PositionBook",
    "PositionBookBucket",
    "CandlesQuery",
    "InstrumentCandlesRequest",
    "InstrumentCandlesResponse",
    "OrderBookRequest",
    "OrderBookResponse",
    "PositionBookRequest",
    "PositionBookResponse",
    "FxError",
    "ApiError",
    "DeserializationError",
    "HttpError",
    "RequestValidationError",
    "ValidationKind",
    "DecodeError",
    "InvalidFormatError",
    "Timestamp",
]
