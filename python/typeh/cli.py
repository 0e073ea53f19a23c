"""CLI entry point for inspecting how typeh classifies values."""

import argparse
import ast
import logging
import sys
from typing import Any, Optional


def parse_value(text: str) -> Any:
    """Read a Python literal; anything else is taken as a plain string."""
    if text == "UNDEFINED":
        from typeh import UNDEFINED
        return UNDEFINED
    try:
        return ast.literal_eval(text)
    except (ValueError, SyntaxError):
        return text


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="typeh",
        description="typeh: runtime type detection and validation"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    sub = parser.add_subparsers(dest="command", required=True)

    classify = sub.add_parser("classify", help="Print the coarse and refined type of a value")
    classify.add_argument("value", help="Python literal, e.g. 12.5 or \"[1, 2]\"")

    check = sub.add_parser("check", help="Check a value against a type expression")
    check.add_argument("expression", help="Type expression, e.g. \"?int|float\"")
    check.add_argument("value", help="Python literal to check")

    sub.add_parser("version", help="Print the version")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    from typeh import TypeValidationError, __version__, coarse_type, refined_type, validate

    if args.command == "version":
        print(f"typeh version {__version__}")
        return 0

    value = parse_value(args.value)

    if args.command == "classify":
        print(f"value:   {value!r}")
        print(f"coarse:  {coarse_type(value)}")
        print(f"refined: {refined_type(value)}")
        return 0

    try:
        validate(args.expression, value)
    except TypeValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"✓ {value!r} matches [{args.expression}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
