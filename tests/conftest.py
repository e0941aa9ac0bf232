import pytest

from paramgrid.ml.param_grid import ParamGrid


@pytest.fixture
def decade_grid():
    """1, 10, 100."""
    return ParamGrid(1.0, 100.0, 10.0)


@pytest.fixture
def single_grid():
    return ParamGrid(5.0, 5.0, 2.0)


@pytest.fixture
def write_toml(tmp_path):
    """Write TOML text to a temp file and return its path."""
    def _write(content: str, name: str = "grids.toml"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write
