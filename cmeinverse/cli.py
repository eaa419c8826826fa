"""Command line tool turning CME parameter sets into a coefficient table."""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from pathlib import Path

from .coefficients import DEFAULT_MAX_EVALUATIONS, dump_table, parse_params, precompute


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Convert CME coefficients from JSON to a precomputed table."
    )
    parser.add_argument(
        "-i", "--input", type=Path, required=True, help="JSON coefficients file path."
    )
    parser.add_argument(
        "-o", "--output", type=Path, required=True, help="Output table file path."
    )
    parser.add_argument(
        "-m",
        "--max-evaluations",
        type=int,
        default=DEFAULT_MAX_EVALUATIONS,
        help="Max evaluations to calculate.",
    )
    parser.add_argument(
        "-r",
        "--raw",
        action="store_true",
        help="Export the raw coefficients instead of precalculated values.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        params = parse_params(args.input.read_text(encoding="utf-8"))
        if args.raw:
            output = json.dumps([param.to_mapping() for param in params])
        else:
            output = dump_table(precompute(params, args.max_evaluations))
        args.output.write_text(output + "\n", encoding="utf-8")
    except (OSError, ValueError) as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())