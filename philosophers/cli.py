"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from philosophers.parsing import ArgumentError, parse_args
from philosophers.simulation import run_simulation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Usage: philosophers COUNT DIE EAT SLEEP [MEALS]."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_args(args)
    except ArgumentError:
        print("Error: Invalid argument")
        return 1
    run_simulation(settings, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())