"""fxoanda - command line access to the instrument endpoints."""

import argparse
import asyncio
import json
import sys

from fxoanda.client import OandaClient
from fxoanda.config import Settings, load_settings
from fxoanda.definitions import CandlestickGranularity
from fxoanda.errors import FxError
from fxoanda.instrument import (
    CandlesQuery,
    InstrumentCandlesRequest,
    OrderBookRequest,
    PositionBookRequest,
)
from fxoanda.monitor.logger import setup_logging
from fxoanda.serdes import Timestamp


def _timestamp_arg(value: str) -> Timestamp:
    try:
        return Timestamp.parse(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an RFC3339 timestamp: {value}") from None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="fxoanda - query OANDA v20 instrument data"
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="API host without scheme (default: from config)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: from config)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    candles = commands.add_parser("candles", help="Fetch candlesticks")
    candles.add_argument("instrument", help="Instrument name, e.g. EUR_USD")
    candles.add_argument(
        "--granularity",
        choices=[g.value for g in CandlestickGranularity],
        default=None,
    )
    candles.add_argument("--count", type=int, default=None)
    candles.add_argument("--price", type=str, default=None, help="Any of M, B, A")
    candles.add_argument("--from", dest="from_time", type=_timestamp_arg, default=None)
    candles.add_argument("--to", dest="to_time", type=_timestamp_arg, default=None)

    for name, help_text in (
        ("orderbook", "Fetch an order book snapshot"),
        ("positionbook", "Fetch a position book snapshot"),
    ):
        book = commands.add_parser(name, help=help_text)
        book.add_argument("instrument", help="Instrument name, e.g. EUR_USD")
        book.add_argument("--time", type=_timestamp_arg, default=None)

    return parser.parse_args(argv)


def apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command line arguments to settings."""
    if args.host:
        settings.oanda.host = args.host

    if args.log_level:
        settings.logging.level = args.log_level

    return settings


def build_request(
    args: argparse.Namespace,
) -> InstrumentCandlesRequest | OrderBookRequest | PositionBookRequest:
    """Turn parsed arguments into an endpoint request."""
    if args.command == "candles":
        query = CandlesQuery(
            price=args.price,
            granularity=CandlestickGranularity(args.granularity) if args.granularity else None,
            count=args.count,
            from_time=args.from_time,
            to_time=args.to_time,
        )
        return InstrumentCandlesRequest(args.instrument, query)
    if args.command == "orderbook":
        return OrderBookRequest(args.instrument, args.time)
    return PositionBookRequest(args.instrument, args.time)


async def async_main(settings: Settings, args: argparse.Namespace) -> int:
    """Async main entry point."""
    request = build_request(args)

    async with OandaClient.from_settings(settings) as client:
        try:
            if isinstance(request, InstrumentCandlesRequest):
                response = await client.get_candles(request)
            elif isinstance(request, OrderBookRequest):
                response = await client.get_order_book(request)
            else:
                response = await client.get_position_book(request)
        except FxError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(json.dumps(response.to_json(), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    settings = load_settings()
    settings = apply_args_to_settings(args, settings)

    setup_logging(
        level=settings.logging.level,
        json_format=settings.logging.json_format,
        log_dir=settings.logging.log_dir,
    )

    if not settings.oanda.api_key:
        print("FXOANDA_OANDA__API_KEY is not set", file=sys.stderr)
        return 2

    return asyncio.run(async_main(settings, args))


if __name__ == "__main__":
    sys.exit(main())
