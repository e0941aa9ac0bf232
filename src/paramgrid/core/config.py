"""Configuration management for paramgrid using TOML files + kwargs overrides."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path

from paramgrid.ml.param_grid import ParamGrid
from paramgrid.ml.svm_grids import svm_default_grid

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

_GRID_FIELDS = ("min_val", "max_val", "log_step")


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class GridConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    grids: dict[str, ParamGrid] = field(default_factory=dict)

    @staticmethod
    def defaults() -> GridConfig:
        return GridConfig()

    @staticmethod
    def load(path: str | Path) -> GridConfig:
        """Load config from a TOML file. Missing file returns defaults.

        Raises ``InvalidRange`` if any ``[grids.<name>]`` table describes
        an invalid range.
        """
        cfg = GridConfig()
        p = Path(path)
        if not p.exists():
            logger.debug("Config %s not found, using defaults", p)
            return cfg

        with open(p, "rb") as f:
            data = tomllib.load(f)

        _apply_toml(cfg, data)
        logger.debug("Loaded %d grid(s) from %s", len(cfg.grids), p)
        return cfg

    @staticmethod
    def load_with_overrides(path: str | Path, **kwargs: object) -> GridConfig:
        """Load from TOML, then apply keyword overrides.

        Override keys use dot notation:
          logging.level=DEBUG
          grids.C.max_val=1000
          grids.gamma.log_step=10
        """
        cfg = GridConfig.load(path)
        _apply_overrides(cfg, kwargs)
        return cfg


def _grid_from_table(table: dict) -> ParamGrid:
    base = svm_default_grid(table["svm"]) if "svm" in table else ParamGrid()
    fields = {k: float(table[k]) for k in _GRID_FIELDS if k in table}
    return replace(base, **fields)


def _apply_toml(cfg: GridConfig, data: dict) -> None:
    if "logging" in data:
        lg = data["logging"]
        if "level" in lg:
            cfg.logging.level = str(lg["level"])

    if "grids" in data:
        for name, table in data["grids"].items():
            cfg.grids[name] = _grid_from_table(table)


def _apply_overrides(cfg: GridConfig, overrides: dict[str, object]) -> None:
    for key, value in overrides.items():
        if key == "logging.level":
            cfg.logging.level = str(value)
            continue

        if not key.startswith("grids."):
            continue
        name, _, attr = key[len("grids."):].rpartition(".")
        if not name or attr not in _GRID_FIELDS:
            continue
        # Frozen grids are rebuilt, which re-runs validation
        base = cfg.grids.get(name, ParamGrid())
        cfg.grids[name] = replace(base, **{attr: float(value)})  # type: ignore[arg-type]
