"""Default search grids for SVM hyperparameters, as used by automatic SVM training."""

from __future__ import annotations

import logging
from enum import IntEnum

from paramgrid.ml.param_grid import ParamGrid

logger = logging.getLogger(__name__)


class SvmParam(IntEnum):
    C = 0
    GAMMA = 1
    P = 2
    NU = 3
    COEF = 4
    DEGREE = 5

    @classmethod
    def parse(cls, value: SvmParam | int | str) -> SvmParam:
        """Resolve an enum member, an integer id or a case-insensitive name."""
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown SVM parameter name: {value!r}") from None
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown SVM parameter id: {value!r}") from None


# (min_val, max_val, log_step)
_DEFAULTS: dict[SvmParam, tuple[float, float, float]] = {
    SvmParam.C: (0.1, 500.0, 5.0),
    SvmParam.GAMMA: (1e-5, 0.6, 15.0),
    SvmParam.P: (0.01, 100.0, 7.0),
    SvmParam.NU: (0.01, 0.2, 3.0),
    SvmParam.COEF: (0.1, 300.0, 14.0),
    SvmParam.DEGREE: (0.01, 4.0, 7.0),
}


def svm_default_grid(param: SvmParam | int | str) -> ParamGrid:
    key = SvmParam.parse(param)
    grid = ParamGrid(*_DEFAULTS[key])
    logger.debug("Default grid for %s: %s", key.name, grid)
    return grid


def svm_default_grids() -> dict[str, ParamGrid]:
    return {p.name.lower(): svm_default_grid(p) for p in SvmParam}
