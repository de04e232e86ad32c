"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.printf import printf
from pushswap.sorting import solve
from pushswap.validation import InputError, parse_arguments, report_error


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on ``argv`` (the process arguments by default); return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_arguments(args)
    except InputError:
        return report_error()
    for operation in solve(numbers):
        printf("%s\n", operation)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())