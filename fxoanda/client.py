"""Async HTTP client for the OANDA v20 REST API.

Usage::

    async with OandaClient(host="api-fxpractice.oanda.com", api_key=key) as client:
        response = await client.get_candles(
            InstrumentCandlesRequest(
                "EUR_USD",
                CandlesQuery(granularity=CandlestickGranularity.H4, count=10),
            )
        )
"""

import logging
import time
from typing import Any

import httpx

from fxoanda.config import Settings
from fxoanda.errors import ApiError, DeserializationError, HttpError
from fxoanda.instrument import (
    InstrumentCandlesRequest,
    InstrumentCandlesResponse,
    OrderBookRequest,
    OrderBookResponse,
    PositionBookRequest,
    PositionBookResponse,
)
from fxoanda.monitor.logger import get_http_logger
from fxoanda.serdes import DecodeError

logger = logging.getLogger(__name__)
http_logger = get_http_logger()

DEFAULT_TIMEOUT = 30.0
USER_AGENT = "fxoanda-python/0.1"


class OandaClient:
    """Client holding the HTTP connection pool, host and API token.

    Requests are not retried; callers decide on retry policy.
    """

    def __init__(
        self,
        host: str,
        api_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        datetime_format: str = "RFC3339",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.host = host
        self._client = httpx.AsyncClient(
            base_url=f"https://{host}",
            headers={
                "Authorization": f"Bearer {api_key}",
                "Accept-Datetime-Format": datetime_format,
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "OandaClient":
        return cls(
            host=settings.oanda.host,
            api_key=settings.oanda.api_key,
            timeout=settings.oanda.timeout,
            datetime_format=settings.oanda.datetime_format,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "OandaClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get_candles(self, request: InstrumentCandlesRequest) -> InstrumentCandlesResponse:
        """Fetch candlestick data for an instrument."""
        return await self._send(request)

    async def get_order_book(self, request: OrderBookRequest) -> OrderBookResponse:
        """Fetch an order book snapshot for an instrument."""
        return await self._send(request)

    async def get_position_book(self, request: PositionBookRequest) -> PositionBookResponse:
        """Fetch a position book snapshot for an instrument."""
        return await self._send(request)

    async def _send(self, request: Any) -> Any:
        """
        Execute a GET request and decode the response.

        Raises:
            RequestValidationError: If a required parameter is missing (no I/O happens).
            HttpError: If the request could not be completed.
            ApiError: If the API answered with a non-success status.
            DeserializationError: If the body does not match the response type.
        """
        path = request.path()
        params = request.params()

        started = time.monotonic()
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as e:
            logger.error("Request to %s failed: %r", path, e)
            raise HttpError(str(e) or type(e).__name__) from e

        elapsed_ms = round((time.monotonic() - started) * 1000, 1)
        request_id = response.headers.get("RequestID")
        http_logger.info(
            "GET %s -> %d",
            path,
            response.status_code,
            extra={
                "method": "GET",
                "url": str(response.request.url),
                "status_code": response.status_code,
                "request_id": request_id,
                "elapsed_ms": elapsed_ms,
            },
        )

        if not response.is_success:
            error = _api_error(response)
            logger.warning(
                "%s",
                error,
                extra={
                    "request_id": request_id,
                    "extra_data": {
                        "status_code": error.status_code,
                        "error_code": error.error_code,
                    },
                },
            )
            raise error

        try:
            payload = response.json()
        except ValueError as e:
            raise DeserializationError("", f"response body is not valid JSON: {e}") from e

        try:
            return request.response_cls.from_json(payload)
        except DecodeError as e:
            error = DeserializationError.from_decode_error(e)
            logger.error(
                "%s", error, extra={"request_id": request_id, "extra_data": {"path": error.path}}
            )
            raise error from e


def _api_error(response: httpx.Response) -> ApiError:
    """Build an ApiError from the body's errorCode/errorMessage."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if not isinstance(body, dict):
        return ApiError(
            response.status_code,
            "UNPARSEABLE_RESPONSE",
            "Could not parse error response",
        )

    error_code = body.get("errorCode")
    error_message = body.get("errorMessage")
    return ApiError(
        response.status_code,
        error_code if isinstance(error_code, str) else "UNKNOWN_ERROR_CODE",
        error_message if isinstance(error_message, str) else "Unknown error",
    )
