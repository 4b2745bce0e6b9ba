"""CLI entry point for the collection inflector."""

import argparse
import logging
import sys

from .errors import InflectionError
from .models import Operation
from .runner import run


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="collection-inflect",
        description="Pluralize, singularize or re-case words, or derive collection names from class names.",
    )
    parser.add_argument(
        "operation",
        choices=[op.value for op in Operation],
        help="Transform to apply",
    )
    parser.add_argument("words", nargs="*", help="Words or class names to transform")
    parser.add_argument("--input", help="File with one word per line ('-' for stdin)")
    parser.add_argument("--output", help="Output CSV file (default: stdout)")
    parser.add_argument(
        "--unknown-number",
        action="store_true",
        help="Input may already be in the target number; keep such words unchanged",
    )
    parser.add_argument(
        "--partition-key", help="Prefix collection names with '<key>-' (collection only)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if not args.words and not args.input:
        parser.error("give at least one word or --input")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        run(
            operation=Operation(args.operation),
            words=args.words,
            input_path=args.input,
            output=args.output,
            known_number=not args.unknown_number,
            partition_key=args.partition_key,
        )
    except (InflectionError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
