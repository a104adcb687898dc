"""Main CLI entry point for jmutf."""

from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..codec.grammar import ENCODE_ERROR_POLICIES
from ..config import CodecOptions
from ..exceptions import JmutfError
from ..utils.sizing import encoded_length


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the jmutf CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="jmutf",
        description="jmutf: Java Modified UTF-8 Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  jmutf --encode 'café'            Print the modified UTF-8 bytes as hex
  jmutf --decode 'eda0bdedb2a9'     Decode hex bytes and print the text
  jmutf --size 'hello'              Print the encoded size in bytes
  jmutf --version                   Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--encode",
        metavar="TEXT",
        type=str,
        help="Encode TEXT and print the bytes as hex",
    )
    action.add_argument(
        "--decode",
        metavar="HEX",
        type=str,
        help="Decode hex-encoded bytes and print the text",
    )
    action.add_argument(
        "--size",
        metavar="TEXT",
        type=str,
        help="Print the encoded size of TEXT in bytes",
    )

    parser.add_argument(
        "--errors",
        choices=ENCODE_ERROR_POLICIES,
        default="strict",
        help="Policy for unpaired surrogates when encoding (default: strict)",
    )
    parser.add_argument(
        "--no-fast-path",
        action="store_true",
        help="Always run the full modified UTF-8 validator when decoding",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"jmutf {__version__}",
    )

    args = parser.parse_args(argv)
    options = CodecOptions(errors=args.errors, fast_path=not args.no_fast_path)

    try:
        if args.encode is not None:
            print(options.encode(args.encode).hex())
            return 0

        if args.decode is not None:
            data = bytes.fromhex(args.decode)
            # Lone surrogates are legal decoder output but not printable as-is
            print(options.decode(data).encode("utf-8", "backslashreplace").decode("utf-8"))
            return 0

        if args.size is not None:
            print(encoded_length(args.size, options.errors))
            return 0
    except (JmutfError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
