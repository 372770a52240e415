"""Command-line entry point: run one exchange command and print its latency.

    python -m deribit_ws book BTC-PERPETUAL --depth 5
    python -m deribit_ws buy BTC-PERPETUAL 10 25000
"""

from __future__ import annotations

import sys
import logging
import argparse
from typing import Any

import orjson

from deribit_ws.state import RuntimeDeps
from deribit_ws.errors import ExchangeClientError
from deribit_ws.metrics.report import format_summary
from deribit_ws.config.metrics import OP_TOTAL_OPERATION_TIME
from deribit_ws.config.rpc import DEFAULT_POSITIONS_KIND, DEFAULT_ORDER_BOOK_DEPTH
from deribit_ws.runtime import open_runtime, load_settings, configure_logging

logger = logging.getLogger("deribit_ws")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deribit_ws", description="Deribit JSON-RPC client")
    parser.add_argument("--detailed-metrics", action="store_true", help="Log every latency sample")
    sub = parser.add_subparsers(dest="command", required=True)

    buy = sub.add_parser("buy", help="Place a limit buy order")
    buy.add_argument("instrument")
    buy.add_argument("amount", type=float)
    buy.add_argument("price", type=float)

    cancel = sub.add_parser("cancel", help="Cancel an order")
    cancel.add_argument("order_id")

    edit = sub.add_parser("edit", help="Modify an order's price and amount")
    edit.add_argument("order_id")
    edit.add_argument("price", type=float)
    edit.add_argument("amount", type=float)

    book = sub.add_parser("book", help="Fetch an order-book snapshot")
    book.add_argument("instrument")
    book.add_argument("--depth", type=int, default=DEFAULT_ORDER_BOOK_DEPTH)

    positions = sub.add_parser("positions", help="List open positions")
    positions.add_argument("--kind", default=DEFAULT_POSITIONS_KIND)

    return parser


def _run_command(deps: RuntimeDeps, args: argparse.Namespace) -> dict[str, Any]:
    dispatcher = deps.dispatcher
    if args.command == "buy":
        return dispatcher.place_order(args.instrument, args.amount, args.price)
    if args.command == "cancel":
        return dispatcher.cancel_order(args.order_id)
    if args.command == "edit":
        return dispatcher.modify_order(args.order_id, args.price, args.amount)
    if args.command == "book":
        return dispatcher.get_order_book(args.instrument, args.depth)
    if args.command == "positions":
        return dispatcher.get_positions(args.kind)
    raise ValueError(f"unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging()
    settings = load_settings()

    try:
        deps = open_runtime(settings)
    except ExchangeClientError as exc:
        logger.error("Fatal system error: %s", exc)
        return 1

    deps.metrics.set_detailed_logging(args.detailed_metrics or settings.metrics.detailed_logging)
    try:
        if settings.credentials.present:
            deps.dispatcher.authenticate(settings.credentials.client_id, settings.credentials.client_secret)
        else:
            logger.info("no credentials configured; private methods will be rejected")

        checkpoint = deps.metrics.start(OP_TOTAL_OPERATION_TIME)
        result = _run_command(deps, args)
        deps.metrics.stop(checkpoint, OP_TOTAL_OPERATION_TIME)
        print(orjson.dumps(result, option=orjson.OPT_INDENT_2).decode("utf-8"))
    except ExchangeClientError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    finally:
        deps.shutdown()
        for line in format_summary(deps.metrics.all_stats()):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
