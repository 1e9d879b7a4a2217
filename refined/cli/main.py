"""
refined CLI — evaluate and inspect the built-in character predicates.

Commands:
    refined list                     — List named predicates
    refined check <name> <value>     — Refine a value, exit 1 if rejected
    refined explain <name>           — Show the composition tree
    refined scan <name> <text>       — Refine each character of a text

The CLI only reads; predicates cannot be defined or changed from here.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from ..markers import MarkerMeta
from ..predicates import (
    AlphaNum,
    Digit,
    Letter,
    Lower,
    Upper,
    Whitespace,
    explain,
)
from ..refinement import short_repr, try_refine


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

BUILTIN_PREDICATES: dict[str, MarkerMeta] = {
    "alphanum": AlphaNum,
    "digit": Digit,
    "letter": Letter,
    "lower": Lower,
    "upper": Upper,
    "whitespace": Whitespace,
}

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


# =============================================================================
# HELPERS
# =============================================================================

def lookup_predicate(name: str) -> Optional[MarkerMeta]:
    """Find a built-in predicate by case-insensitive name."""
    return BUILTIN_PREDICATES.get(name.lower())


def print_unknown_predicate(name: str) -> None:
    print(f"Unknown predicate: {name}")
    print()
    print("Available predicates:")
    for known in sorted(BUILTIN_PREDICATES):
        print(f"  {known}")


def configure_logging(verbose: bool) -> None:
    """Route library logging to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_list(args: argparse.Namespace) -> int:
    """List the named predicates."""
    print("refined — Built-in Predicates")
    print("=" * 50)
    for name in sorted(BUILTIN_PREDICATES):
        pred = BUILTIN_PREDICATES[name]
        summary = (pred.__doc__ or "").strip().splitlines()[0:1]
        print(f"  {name:<12} {summary[0] if summary else pred.describe()}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Refine a single value."""
    pred = lookup_predicate(args.predicate)
    if pred is None:
        print_unknown_predicate(args.predicate)
        return 1

    result = try_refine(args.value, pred)
    if result.accepted:
        print(f"ACCEPTED: {short_repr(args.value)} satisfies {pred.describe()}")
        return 0

    print(f"REJECTED: {result.violation}")
    return 1


def cmd_explain(args: argparse.Namespace) -> int:
    """Show how a predicate is built."""
    pred = lookup_predicate(args.predicate)
    if pred is None:
        print_unknown_predicate(args.predicate)
        return 1

    print(explain(pred))
    return 0


def cmd_scan(args: argparse.Namespace) -> int:
    """Refine every character of a text and report rejections."""
    pred = lookup_predicate(args.predicate)
    if pred is None:
        print_unknown_predicate(args.predicate)
        return 1

    rejected = []
    for position, char in enumerate(args.text):
        result = try_refine(char, pred)
        if not result.accepted:
            rejected.append((position, char))

    print(f"Scanned {len(args.text)} characters against {pred.describe()}")
    print(f"  Accepted: {len(args.text) - len(rejected)}")
    print(f"  Rejected: {len(rejected)}")

    for position, char in rejected[:10]:
        print(f"  • position {position}: {char!r}")
    if len(rejected) > 10:
        print(f"  ... and {len(rejected) - 10} more")

    return 1 if rejected else 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="refined",
        description="refined — Inspect and evaluate refinement predicates",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # List command
    list_parser = subparsers.add_parser(
        "list",
        help="List named predicates",
    )
    list_parser.set_defaults(func=cmd_list)

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Evaluate a predicate against a value",
    )
    check_parser.add_argument("predicate", help="Predicate name")
    check_parser.add_argument("value", help="Value to refine")
    check_parser.set_defaults(func=cmd_check)

    # Explain command
    explain_parser = subparsers.add_parser(
        "explain",
        help="Show how a predicate is composed",
    )
    explain_parser.add_argument("predicate", help="Predicate name")
    explain_parser.set_defaults(func=cmd_explain)

    # Scan command
    scan_parser = subparsers.add_parser(
        "scan",
        help="Evaluate a predicate for each character of a text",
    )
    scan_parser.add_argument("predicate", help="Predicate name")
    scan_parser.add_argument("text", help="Text to scan")
    scan_parser.set_defaults(func=cmd_scan)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
