#!/usr/bin/env python3
"""Print the parameter grids described by a TOML config."""

import argparse
import sys

from paramgrid.core.config import GridConfig
from paramgrid.core.logging import setup_logging
from paramgrid.ml import count_combinations, grids_frame, svm_default_grids


def main() -> int:
    parser = argparse.ArgumentParser(description="Show paramgrid search grids")
    parser.add_argument("--config", default="config/grids.toml", help="Path to TOML config file")
    parser.add_argument("--logging.level", dest="logging_level")
    parser.add_argument("--grid", action="append", default=[], metavar="NAME.FIELD=VALUE",
                        help="Override a grid field, e.g. C.max_val=1000")
    parser.add_argument("--svm-defaults", action="store_true",
                        help="Include the default SVM grids not set in the config")
    args = parser.parse_args()

    # Build overrides from CLI args
    overrides: dict[str, object] = {}
    if args.logging_level is not None:
        overrides["logging.level"] = args.logging_level
    for item in args.grid:
        key, sep, value = item.partition("=")
        if not sep:
            parser.error(f"--grid expects NAME.FIELD=VALUE, got {item!r}")
        overrides[f"grids.{key}"] = value

    try:
        cfg = GridConfig.load_with_overrides(args.config, **overrides)
        setup_logging(cfg.logging.level)

        grids = dict(cfg.grids)
        if args.svm_defaults:
            for name, grid in svm_default_grids().items():
                grids.setdefault(name, grid)
        _report(grids)
    except ValueError as exc:
        # InvalidRange, unknown SVM names and non-numeric overrides
        print(f"Invalid grid config: {exc}", file=sys.stderr)
        return 2
    return 0


def _report(grids) -> None:
    if not grids:
        print("No grids configured.")
        return

    print("Grids:")
    print(grids_frame(grids).to_string())
    print("\nCandidates:")
    for name, grid in grids.items():
        values = ", ".join(f"{v:g}" for v in grid)
        print(f"  {name}: {values}")
    print(f"\nCombinations: {count_combinations(grids):,}")


if __name__ == "__main__":
    sys.exit(main())
