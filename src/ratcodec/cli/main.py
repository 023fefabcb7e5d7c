"""Main CLI entry point for ratcodec."""

from __future__ import annotations

import argparse
import logging
import sys

import structlog
from structlog import get_logger

from .. import __version__
from ..codec.decoder import get_frac_i64
from ..codec.encoder import write_frac
from ..config import CodecConfig
from ..exceptions import RationalCodecError
from .inspect import format_bytes, inspect_stream, parse_hex, parse_rational, print_inspection

log = get_logger()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ratcodec command."""
    parser = argparse.ArgumentParser(
        prog="ratcodec",
        description="ratcodec: Compact Rational Number Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ratcodec encode 3/4 300              Encode values back to back
  ratcodec encode -5                   Encode a negative integer
  ratcodec decode 110304               Decode hex bytes
  ratcodec inspect "11 03 04 02 2c 01" Show the layout of each value
  ratcodec --version                   Show version
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ratcodec {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--den32-marker",
        action="store_true",
        help="Write/expect the 0x03 marker before 4-byte denominators",
    )

    subparsers = parser.add_subparsers(dest="command")

    encode_parser = subparsers.add_parser("encode", help="Encode integers or fractions")
    encode_parser.add_argument("values", nargs="+", metavar="VALUE", help="n or n/d")

    decode_parser = subparsers.add_parser("decode", help="Decode hex bytes")
    decode_parser.add_argument("data", nargs="+", metavar="HEX", help="Encoded bytes as hex")

    inspect_parser = subparsers.add_parser("inspect", help="Show the layout of hex bytes")
    inspect_parser.add_argument("data", nargs="+", metavar="HEX", help="Encoded bytes as hex")

    return parser


def configure_logging(verbose: bool) -> None:
    """Route structlog output to stderr at the requested level."""
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ratcodec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    config = CodecConfig(den32_marker=args.den32_marker)
    log.debug("resolved config", den32_marker=config.den32_marker)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "encode":
            buf = bytearray()
            for text in args.values:
                numerator, denominator = parse_rational(text)
                write_frac(numerator, denominator, buf, config=config)
            print(format_bytes(buf))
        elif args.command == "decode":
            rest = memoryview(parse_hex(" ".join(args.data)))
            while len(rest):
                numerator, denominator, rest = get_frac_i64(rest, config=config)
                print(numerator if denominator == 1 else f"{numerator}/{denominator}")
        elif args.command == "inspect":
            print_inspection(inspect_stream(parse_hex(" ".join(args.data)), config))
    except (RationalCodecError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
