"""Command-line entry point for a handful of numeric helpers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .calendar_days import day_of_year, is_leap
from .compare import max4, median3, remainder
from .divisors import collatz


def _run_remainder(args: argparse.Namespace) -> None:
    result = remainder(args.x, args.y)
    print(f"{args.x:f} divided by {args.y:f} leaves {result:f}")


def _run_max4(args: argparse.Namespace) -> None:
    print(f"{max4(*args.numbers):f}")


def _run_median(args: argparse.Namespace) -> None:
    print(median3(*args.numbers))


def _run_day_of_year(args: argparse.Namespace) -> None:
    ordinal = day_of_year(args.day, args.month, args.year)
    print(ordinal)
    print(f"leap year: {'yes' if is_leap(args.year) else 'no'}")


def _run_collatz(args: argparse.Namespace) -> None:
    sequence = collatz(args.n)
    print(" ".join(str(value) for value in sequence))
    print(f"{len(sequence)} elements")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numcraft", description="Small numeric utilities."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    rem = commands.add_parser("remainder", help="floating-point remainder of x / y")
    rem.add_argument("x", type=float)
    rem.add_argument("y", type=float)
    rem.set_defaults(handler=_run_remainder)

    biggest = commands.add_parser("max4", help="largest of four real numbers")
    biggest.add_argument("numbers", type=float, nargs=4)
    biggest.set_defaults(handler=_run_max4)

    median = commands.add_parser("median", help="middle value of three integers")
    median.add_argument("numbers", type=int, nargs=3)
    median.set_defaults(handler=_run_median)

    doy = commands.add_parser("day-of-year", help="ordinal day of a date")
    doy.add_argument("day", type=int)
    doy.add_argument("month", type=int)
    doy.add_argument("year", type=int)
    doy.set_defaults(handler=_run_day_of_year)

    chain = commands.add_parser("collatz", help="Collatz sequence of a number")
    chain.add_argument("n", type=int)
    chain.set_defaults(handler=_run_collatz)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv``, run the chosen command and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        args.handler(args)
    except (ValueError, ZeroDivisionError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())