from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import asdict, dataclass

import numpy as np

from paramgrid.ml.errors import InvalidRange

# Rounding slack, in ULPs of max_val, allowed when a multiplied candidate lands on the bound
_ULP_SLACK = 4


@dataclass(frozen=True, slots=True)
class ParamGrid:
    """Logarithmic search range for one hyperparameter.

    Candidates start at ``min_val`` and are multiplied by ``log_step`` until
    they pass ``max_val``. A grid with ``min_val == max_val`` is degenerate
    and holds a single candidate whatever its step.

    ``ParamGrid()`` is the library default ``(0.0, 0.0, 1.0)``.
    """

    min_val: float = 0.0
    max_val: float = 0.0
    log_step: float = 1.0

    def __post_init__(self) -> None:
        for name in ("min_val", "max_val", "log_step"):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise InvalidRange(f"{name} must be finite, got {value!r}")
            object.__setattr__(self, name, value)

        if self.max_val < self.min_val:
            raise InvalidRange(
                f"max_val ({self.max_val}) must not be below min_val ({self.min_val})"
            )
        if self.max_val > self.min_val and self.log_step <= 1.0:
            raise InvalidRange(
                f"log_step must be greater than 1.0 for a non-degenerate grid, "
                f"got {self.log_step}"
            )

    @property
    def is_degenerate(self) -> bool:
        return self.min_val == self.max_val

    def __iter__(self) -> Iterator[float]:
        if self.is_degenerate:
            yield self.min_val
            return
        if self.min_val <= 0:
            # Multiplying a non-positive start never reaches max_val
            raise InvalidRange(
                f"cannot enumerate from non-positive min_val ({self.min_val})"
            )

        limit = self.max_val + _ULP_SLACK * math.ulp(self.max_val)
        value = self.min_val
        while value <= limit:
            yield value
            value *= self.log_step

    def values(self) -> tuple[float, ...]:
        return tuple(self)

    def to_array(self) -> np.ndarray:
        return np.fromiter(self, dtype=np.float64)

    @property
    def n_values(self) -> int:
        return sum(1 for _ in self)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> ParamGrid:
        defaults = cls()
        return cls(
            min_val=d.get("min_val", defaults.min_val),
            max_val=d.get("max_val", defaults.max_val),
            log_step=d.get("log_step", defaults.log_step),
        )
