"""Command-line entry point of the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from dining.parsing import InputError, parse_input
from dining.simulation import Simulation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments and run a simulation; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_input(args)
    except InputError as error:
        sys.stdout.write(error.message + error.usage)
        return 1
    Simulation(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())