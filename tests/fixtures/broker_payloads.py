"""
Sample OANDA v20 response bodies.

Shapes follow what the practice server returns: prices and percentages
as strings, timestamps as RFC3339 with nine fractional digits.
"""

import copy
from typing import Any

CANDLES_H4 = {
    "instrument": "EUR_USD",
    "granularity": "H4",
    "candles": [
        {
            "complete": True,
            "volume": 18342,
            "time": "2024-01-15T06:00:00.000000000Z",
            "mid": {"o": "1.09512", "h": "1.09630", "l": "1.09455", "c": "1.09588"},
        },
        {
            "complete": False,
            "volume": 4021,
            "time": "2024-01-15T10:00:00.000000000Z",
            "bid": {"o": "1.09580", "h": "1.09611", "l": "1.09533", "c": "1.09597"},
            "ask": {"o": "1.09594", "h": "1.09625", "l": "1.09547", "c": "1.09611"},
        },
    ],
}

ORDER_BOOK = {
    "orderBook": {
        "instrument": "EUR_USD",
        "time": "2024-01-15T09:40:00Z",
        "price": "1.09500",
        "bucketWidth": "0.00050",
        "buckets": [
            {"price": "1.09000", "longCountPercent": "0.2000", "shortCountPercent": "0.1500"},
            {"price": "1.09050", "longCountPercent": "0.0000", "shortCountPercent": "0.3187"},
        ],
    }
}

POSITION_BOOK = {
    "positionBook": {
        "instrument": "USD_JPY",
        "time": "2024-01-15T09:00:00Z",
        "price": "145.210",
        "bucketWidth": "0.050",
        "buckets": [
            {"price": "145.150", "longCountPercent": "0.4211", "shortCountPercent": "0.1054"},
        ],
    }
}

API_ERROR_400 = {
    "errorCode": "INVALID_INSTRUMENT",
    "errorMessage": "Invalid value specified for 'instrument'",
}


def payload(name: str) -> dict[str, Any]:
    """Return a deep copy so tests can mutate freely."""
    return copy.deepcopy({
        "candles": CANDLES_H4,
        "order_book": ORDER_BOOK,
        "position_book": POSITION_BOOK,
        "api_error": API_ERROR_400,
    }[name])
