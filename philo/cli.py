"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philo.dinner import Dinner
from philo.parsing import ParseError, parse_input
from philo.status import BLUE, RED, RESET, StatusWriter
from philo.table import Table


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the dinner and return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_input(args)
    except ParseError as exc:
        sys.stdout.write(f"{RED}{exc}\n{RESET}")
        sys.stdout.flush()
        return 1
    table = Table(config)
    Dinner(table, StatusWriter(table, sys.stdout, True)).run()
    sys.stdout.write(f"{BLUE}simulation terminer{RESET}")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())