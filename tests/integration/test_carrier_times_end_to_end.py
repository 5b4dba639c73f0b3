"""End-to-end tests from data files and YAML configurations to computed quantities."""

from decimal import Decimal

import sympy as sp

import pyphystools
from pyphystools import (DelimitedFileLoader, FunctionVisualizer, PiecewiseBuilder, UnitsPrefix, create_material,
                         create_metamaterial, load_function)


def _write_material(directory, name, capture_file):
    path = directory / f"{name}.yaml"
    path.write_text(f"name: {name}\n"
                    "bandgap: 1.42\n"
                    "effectiveMass_electron: 0.067\n"
                    "effectiveMass_hole: 0.45\n"
                    f"capturetimes_file_nm_ps: {capture_file}\n"
                    "escapetimes_ns: 2\n"
                    "recombinationtimes: 0\n", encoding="utf-8")
    return path


class TestEndToEnd:
    """Complete workflows through the public API."""

    def test_public_api(self):
        assert pyphystools.__version__
        assert "PiecewiseFunction" in pyphystools.__all__

    def test_material_workflow(self, tmp_path):
        resources = tmp_path / "ressources" / "capturetimes"
        resources.mkdir(parents=True)
        (resources / "inas.txt").write_text("size\ttime\n2\t1\n4\t3\n6\t3\n", encoding="utf-8")
        (resources / "gaas.txt").write_text("2\t5\n6\t5\n", encoding="utf-8")
        inas = create_material(_write_material(tmp_path, "InAs", "inas.txt"), DelimitedFileLoader())
        gaas = create_material(_write_material(tmp_path, "GaAs", "gaas.txt"), DelimitedFileLoader())

        assert inas.capture_time("3e-9") == Decimal("2e-12")
        assert inas.escape_time(0) == Decimal("2e-9")
        assert inas.recombination_time(1) == Decimal(0)

        # Mean capture time over the sizes, then the ratio of capture times
        mean_capture = inas.capture_times.integrate() / (inas.capture_times.end() - inas.capture_times.start())
        assert mean_capture == Decimal("2.5e-12")
        ratio = gaas.capture_times.divide(inas.capture_times)
        assert ratio.value_at("2e-9") == Decimal(5)

        structure = tmp_path / "structure.yaml"
        structure.write_text("material_QD: InAs\nmaterial_barrier: GaAs\noffset_InAsGaAs: 0.5\n", encoding="utf-8")
        metamaterial = create_metamaterial(structure, {"InAs": inas, "GaAs": gaas})
        assert metamaterial.get_offset("GaAs", "InAs") == Decimal("0.5") * pyphystools.PhysicalConstants.EV

    def test_recombination_with_zeros_can_be_inverted(self, tmp_path):
        path = tmp_path / "rates.txt"
        path.write_text("0\t0\n1\t2\n2\t0\n", encoding="utf-8")
        rates = load_function(path, UnitsPrefix.NANO)
        times = rates.avoid_zeros().invert()
        assert times.value_at("1e-9") == Decimal("0.5")
        assert all(value > 0 for value in times.as_dict().values())

    def test_export_and_plot(self, tmp_path):
        path = tmp_path / "times.txt"
        path.write_text("1\t10\n2\t30\n", encoding="utf-8")
        times = load_function(path, UnitsPrefix.NANO, UnitsPrefix.PICO)
        x = sp.Symbol('x')
        expr = PiecewiseBuilder.build_from_function(times, x)
        assert expr.subs(x, sp.Rational(3, 2) * sp.Rational(1, 10 ** 9)) == sp.Rational(2, 10 ** 11)
        visualizer = FunctionVisualizer(UnitsPrefix.NANO, UnitsPrefix.PICO, title="Times")
        visualizer.plot_function(times, label="times")
        assert visualizer.save_plot(tmp_path / "times.png", dpi=50).exists()
