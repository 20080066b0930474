#!/usr/bin/env python3

import argparse
from collections.abc import Callable, Sequence

from tillscan.runtime.config import DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT


def _coerce_exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _run_command(command: Callable[[argparse.Namespace], None], args: argparse.Namespace) -> int:
    """
    Run a command handler that may call sys.exit().

    This keeps process termination centralized in this module's entrypoint.
    """
    try:
        command(args)
    except SystemExit as exc:
        return _coerce_exit_code(exc.code)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tillscan",
        description="Receipt OCR and parsing CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse <lines_file>         Parse a text file of OCR lines (no AWS call)
  scan <image>               OCR a receipt image with Textract and save it
  list                       List stored receipts
  show <id>                  Show one stored receipt
  labels <image>             Detect labels in an image (Rekognition)
  celebrities <image>        Recognize celebrities in an image (Rekognition)
  serve [--host] [--port]    Start the HTTP API server

Notes:
  Stored receipts live in $TILLSCAN_DATA_DIR (default ./tillscan-data/receipts)
""",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR); overrides TILLSCAN_LOG_LEVEL",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Parse a text file of OCR lines")
    parse_parser.add_argument("lines_file", help="Text file with one OCR line per row")
    parse_parser.add_argument("--json", action="store_true", help="Print the receipt as JSON")

    scan_parser = subparsers.add_parser("scan", help="OCR and parse a receipt image")
    scan_parser.add_argument("image", help="Path to receipt image or PDF")
    scan_parser.add_argument("--no-save", action="store_true", help="Parse only; do not store the receipt")
    scan_parser.add_argument("--json", action="store_true", help="Print the receipt as JSON")

    subparsers.add_parser("list", help="List stored receipts")

    show_parser = subparsers.add_parser("show", help="Show one stored receipt")
    show_parser.add_argument("receipt_id", type=int, help="Receipt id")
    show_parser.add_argument("--json", action="store_true", help="Print the receipt as JSON")

    labels_parser = subparsers.add_parser("labels", help="Detect labels in an image")
    labels_parser.add_argument("image", help="Path to image")
    labels_parser.add_argument(
        "--min-confidence", type=float, default=None, help="Minimum confidence 0-100 (default: 80.0)"
    )

    celebrities_parser = subparsers.add_parser("celebrities", help="Recognize celebrities in an image")
    celebrities_parser.add_argument("image", help="Path to image")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP API server")
    serve_parser.add_argument(
        "--host", default=DEFAULT_SERVER_HOST, help=f"Host to bind to (default: {DEFAULT_SERVER_HOST})"
    )
    serve_parser.add_argument(
        "--port", type=int, default=DEFAULT_SERVER_PORT, help=f"Port to bind to (default: {DEFAULT_SERVER_PORT})"
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    from tillscan.runtime import configure_logging

    configure_logging(args.log_level)

    from tillscan.cli import receipt as commands

    handlers: dict[str, Callable[[argparse.Namespace], None]] = {
        "parse": commands.cmd_parse,
        "scan": commands.cmd_scan,
        "list": commands.cmd_list,
        "show": commands.cmd_show,
        "labels": commands.cmd_labels,
        "celebrities": commands.cmd_celebrities,
        "serve": commands.cmd_serve,
    }
    handler = handlers.get(args.command)
    if handler is None:
        return 1
    return _run_command(handler, args)


if __name__ == "__main__":
    raise SystemExit(main())
