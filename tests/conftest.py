"""Shared pytest fixtures for pyphystools tests."""
from decimal import Decimal
from pathlib import Path

import pytest

from pyphystools.core.piecewise_function import PiecewiseFunction


@pytest.fixture
def linear_function():
    """f(x) = x sampled at 0, 1 and 2."""
    return PiecewiseFunction({0: 0, 1: 1, 2: 2})


@pytest.fixture
def ramp_function():
    """Increasing function sampled at irregular abscissas."""
    return PiecewiseFunction({Decimal("0"): Decimal("1"), Decimal("0.5"): Decimal("2"),
                              Decimal("2"): Decimal("5"), Decimal("3"): Decimal("4")})


@pytest.fixture
def write_data_file(tmp_path):
    """Write a data file in the temporary directory and return its path."""
    def _write(content: str, name: str = "data.txt") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def material_config():
    """Material configuration with constant carrier times."""
    return {
        "name": "GaAs",
        "bandgap": 1.42,
        "effectiveMass_electron": "0.067",
        "effectiveMass_hole": "0.45",
        "capturetimes_ps": 2.5,
        "escapetimes_ns": "1",
        "recombinationtimes_ns": 1.5,
    }


@pytest.fixture
def resource_tree(tmp_path):
    """Resource directory holding capture, escape and recombination time files."""
    resources = tmp_path / "ressources"
    for kind, content in (("capturetimes", "1\t2\n3\t4\n"),
                          ("escapetimes", "1\t10\n2\t20\n"),
                          ("recombinationtimes", "0\t100\n5\t200\n")):
        (resources / kind).mkdir(parents=True)
        (resources / kind / f"{kind}.txt").write_text(content, encoding="utf-8")
    return resources
