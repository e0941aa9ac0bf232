"""Parameter grids: logarithmic search ranges for model hyperparameters."""

from paramgrid.ml.combinations import count_combinations, grid_combinations, grids_frame
from paramgrid.ml.errors import InvalidRange
from paramgrid.ml.param_grid import ParamGrid
from paramgrid.ml.svm_grids import SvmParam, svm_default_grid, svm_default_grids

__all__ = [
    "InvalidRange",
    "ParamGrid",
    "SvmParam",
    "count_combinations",
    "grid_combinations",
    "grids_frame",
    "svm_default_grid",
    "svm_default_grids",
]
