from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from apps.converter_cli.logging_utils import TraceAdapter, configure_logging
from packages.contracts.errors import ImageBase64Error
from packages.contracts.models import DEFAULT_FILENAME
from packages.contracts.utils import new_trace_id
from packages.image_base64 import decode, encode

logger = logging.getLogger("converter_cli.cli")


def _cmd_encode(args: argparse.Namespace) -> None:
    trace_id = new_trace_id()
    encoded = asyncio.run(encode(args.source, {"string": True, "local": args.local}, trace_id=trace_id))
    if args.output:
        Path(args.output).write_text(encoded, encoding="ascii")
        TraceAdapter(logger, {"trace_id": trace_id}).info("wrote %d chars to %s", len(encoded), args.output)
        return
    print(encoded)


def _cmd_decode(args: argparse.Namespace) -> None:
    trace_id = new_trace_id()
    if args.input and args.input != "-":
        payload = Path(args.input).read_text(encoding="utf-8")
    else:
        payload = sys.stdin.read()
    message = asyncio.run(decode(payload, {"filename": args.filename}, trace_id=trace_id))
    print(message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Image <-> Base64 converter")
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="print the Base64 text of an image")
    enc.add_argument("source", help="image URL, or a file path with --local")
    enc.add_argument("--local", action="store_true")
    enc.add_argument("--output", help="write the Base64 text to this file instead of stdout")
    enc.set_defaults(func=_cmd_encode)

    dec = sub.add_parser("decode", help="save a Base64 data URL as an image")
    dec.add_argument("--input", help="file holding the data URL; stdin when omitted or '-'")
    dec.add_argument("--filename", default=DEFAULT_FILENAME, help="base name of the .jpg to write")
    dec.set_defaults(func=_cmd_decode)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    try:
        args.func(args)
    except (ImageBase64Error, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
