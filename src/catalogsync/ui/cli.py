from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from catalogsync.adapters.platform import (
    load_cart_discount_drafts,
    load_category_drafts,
    load_inventory_drafts,
    load_product_drafts,
)
from catalogsync.app import (
    sync_cart_discounts,
    sync_categories,
    sync_inventory_entries,
    sync_products,
)
from catalogsync.config import ConfigurationError, configure_logging, get_sync_config
from catalogsync.sync import SyncOptions

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from catalogsync.sync import SyncStatistics

log = logging.getLogger(__name__)

COMMANDS = {
    "products": "Sync product drafts",
    "categories": "Sync category drafts",
    "cart-discounts": "Sync cart discount drafts",
    "inventory": "Sync inventory entry drafts",
}


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def _add_sync_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="JSON file holding an array of drafts",
    )
    parser.add_argument(
        "--batch-size",
        type=_positive_int,
        default=None,
        help="Number of drafts per batch (defaults to config)",
    )
    parser.add_argument(
        "--parallelism",
        type=_positive_int,
        default=None,
        help="Maximum number of concurrent platform calls (defaults to config)",
    )
    parser.add_argument(
        "--ensure-channels",
        action="store_true",
        default=None,
        help="Create channels referenced by drafts when they do not exist",
    )
    parser.add_argument(
        "--keep-other-locales",
        action="store_true",
        help="Keep locales of localized fields that the drafts do not mention",
    )
    parser.add_argument(
        "--keep-other-set-entries",
        action="store_true",
        help="Keep categories and asset tags that the drafts do not mention",
    )
    parser.add_argument(
        "--keep-other-collection-entries",
        action="store_true",
        help="Keep prices, images and assets that the drafts do not mention",
    )
    parser.add_argument(
        "--keep-other-properties",
        action="store_true",
        help="Keep fields, attributes and custom fields that the drafts omit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log batch stages and requests",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synchronise catalog drafts with the platform")
    subparsers = parser.add_subparsers(dest="command", required=True)
    for command, help_text in COMMANDS.items():
        _add_sync_arguments(subparsers.add_parser(command, help=help_text))
    return parser.parse_args(list(argv))


def _build_options(args: argparse.Namespace) -> SyncOptions[Any, Any]:
    overrides: dict[str, object] = {
        "remove_other_locales": not args.keep_other_locales,
        "remove_other_set_entries": not args.keep_other_set_entries,
        "remove_other_collection_entries": not args.keep_other_collection_entries,
        "remove_other_properties": not args.keep_other_properties,
    }
    if args.batch_size is not None:
        overrides["batch_size"] = args.batch_size
    if args.parallelism is not None:
        overrides["parallelism"] = args.parallelism
    if args.ensure_channels is not None:
        overrides["ensure_channels"] = args.ensure_channels
    return SyncOptions.from_config(get_sync_config(), **overrides)


def _run_command(args: argparse.Namespace, options: SyncOptions[Any, Any]) -> SyncStatistics:
    if args.command == "products":
        return sync_products(load_product_drafts(args.input), options=options)
    if args.command == "categories":
        return sync_categories(load_category_drafts(args.input), options=options)
    if args.command == "cart-discounts":
        return sync_cart_discounts(load_cart_discount_drafts(args.input), options=options)
    if args.command == "inventory":
        return sync_inventory_entries(load_inventory_drafts(args.input), options=options)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
    try:
        options = _build_options(parsed_args)
    except ConfigurationError:
        log.exception("Invalid sync configuration")
        sys.exit(2)

    try:
        statistics = _run_command(parsed_args, options)
    except (ValueError, ConfigurationError):
        log.exception("Invalid input or configuration")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(1)

    print(statistics.report_message)  # noqa: T201
    if statistics.failed:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
