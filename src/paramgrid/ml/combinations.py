from __future__ import annotations

import itertools
import math
from collections.abc import Iterator, Mapping

import pandas as pd

from paramgrid.ml.param_grid import ParamGrid


def grid_combinations(grids: Mapping[str, ParamGrid]) -> Iterator[dict[str, float]]:
    """Yield every combination of candidates across the named grids.

    Candidates of each grid are materialised once; combinations are produced
    lazily in mapping order, the last grid varying fastest.
    """
    names = list(grids)
    for combo in itertools.product(*(grids[n] for n in names)):
        yield dict(zip(names, combo))


def count_combinations(grids: Mapping[str, ParamGrid]) -> int:
    return math.prod(g.n_values for g in grids.values())


def grids_frame(grids: Mapping[str, ParamGrid]) -> pd.DataFrame:
    """Summary table with one row per grid, indexed by parameter name."""
    rows = []
    for name, grid in grids.items():
        row = grid.to_dict()
        row["n_values"] = grid.n_values
        row["name"] = name
        rows.append(row)
    if not rows:
        return pd.DataFrame(columns=["min_val", "max_val", "log_step", "n_values"])
    return pd.DataFrame(rows).set_index("name")
