"""Test fixtures for fxoanda."""

from tests.fixtures.broker_payloads import (
    API_ERROR_400,
    CANDLES_H4,
    ORDER_BOOK,
    POSITION_BOOK,
    payload,
)

__all__ = [
    "API_ERROR_400",
    "CANDLES_H4",
    "ORDER_BOOK",
    "POSITION_BOOK",
    "payload",
]
