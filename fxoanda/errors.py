"""Normalized client error types."""

from enum import Enum

from fxoanda.serdes.errors import DecodeError


class FxError(Exception):
    """Base class for all client errors."""

    pass


class ValidationKind(str, Enum):
    """Which required request parameter was missing."""

    MISSING_ACCOUNT_ID = "Account ID"
    MISSING_TRADE_SPECIFIER = "Trade specifier"
    MISSING_INSTRUMENT = "Instrument"
    MISSING_TRANSACTION_ID = "Transaction ID"
    MISSING_ORDER_SPECIFIER = "Order specifier"


class RequestValidationError(FxError):
    """A request was missing a required parameter; nothing was sent."""

    def __init__(self, kind: ValidationKind) -> None:
        super().__init__(f"{kind.value} is required but was not provided")
        self.kind = kind


class ApiError(FxError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, error_code: str, error_message: str) -> None:
        super().__init__(
            f"OANDA API error (HTTP {status_code}): {error_message} ({error_code})"
        )
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = error_message


class DeserializationError(FxError):
    """A response body could not be decoded into the expected type."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Deserialization failed at path '{path}': {message}")
        self.path = path
        self.message = message

    @classmethod
    def from_decode_error(cls, err: DecodeError) -> "DeserializationError":
        return cls(err.path_str, str(err))


class HttpError(FxError):
    """The HTTP request itself failed (connect, timeout, protocol)."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"HTTP request failed: {detail}")
        self.detail = detail
