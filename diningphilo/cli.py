"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from diningphilo.arguments import ArgumentError, parse_arguments
from diningphilo.simulation import run_simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_arguments(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    run_simulation(settings, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())