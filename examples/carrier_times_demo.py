"""Demonstration script for carrier-time functions and material configurations."""
import logging
import tempfile
from pathlib import Path

from pyphystools import (DelimitedFileLoader, FunctionVisualizer, PhysicalConstants, UnitsPrefix, create_material,
                         create_metamaterial)

MATERIAL_TEMPLATE = """name: {name}
bandgap: {bandgap}
effectiveMass_electron: {electron_mass}
effectiveMass_hole: {hole_mass}
capturetimes_file_nm_ps: {name}.txt
escapetimes_file_nm_ns: {name}.txt
recombinationtimes_ns: 1.2
"""

CAPTURE_TIMES = {
    "InAs": "size\ttime\n2\t3.1\n4\t2.4\n6\t1.9\n8\t1.7\n",
    "GaAs": "size\ttime\n2\t5.0\n8\t4.1\n",
}
ESCAPE_TIMES = {
    "InAs": "2\t0.8\n8\t12.5\n",
    "GaAs": "2\t0.1\n8\t0.4\n",
}
MATERIAL_PARAMETERS = {
    "InAs": {"bandgap": 0.354, "electron_mass": 0.023, "hole_mass": 0.41},
    "GaAs": {"bandgap": 1.424, "electron_mass": 0.067, "hole_mass": 0.45},
}


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('fontTools').setLevel(logging.WARNING)


def write_configuration(directory: Path) -> None:
    """Write material configurations and their carrier-time files."""
    for kind, tables in (("capturetimes", CAPTURE_TIMES), ("escapetimes", ESCAPE_TIMES)):
        (directory / "ressources" / kind).mkdir(parents=True, exist_ok=True)
        for name, content in tables.items():
            (directory / "ressources" / kind / f"{name}.txt").write_text(content, encoding="utf-8")
    for name, parameters in MATERIAL_PARAMETERS.items():
        (directory / f"{name}.yaml").write_text(MATERIAL_TEMPLATE.format(name=name, **parameters), encoding="utf-8")
    (directory / "dot_in_well.yaml").write_text("material_QD: InAs\nmaterial_barrier: GaAs\noffset_InAsGaAs: 0.7\n",
                                                encoding="utf-8")


def demonstrate_carrier_times():
    """Demonstrate material creation and carrier-time evaluation."""
    setup_logging()
    with tempfile.TemporaryDirectory() as workdir:
        directory = Path(workdir)
        write_configuration(directory)
        loader = DelimitedFileLoader()
        materials = {name: create_material(directory / f"{name}.yaml", function_loader=loader)
                     for name in MATERIAL_PARAMETERS}
        metamaterial = create_metamaterial(directory / "dot_in_well.yaml", materials)
        dot = metamaterial.get_material("QD")
        print(f"\n{'=' * 80}")
        print(f"MATERIAL: {dot.name}")
        print(f"{'=' * 80}")
        print(f"Bandgap: {dot.bandgap / PhysicalConstants.EV} eV")
        print(f"Electron effective mass: {dot.electron_effective_mass} kg")
        print(f"Band offset with GaAs: {metamaterial.get_offset('InAs', 'GaAs') / PhysicalConstants.EV} eV")
        for size in ("2e-9", "3e-9", "5e-9", "8e-9"):
            print(f"  size {size} m -> capture {dot.capture_time(size)} s, escape {dot.escape_time(size)} s")
        capture = dot.capture_times
        mean = capture.integrate() / (capture.end() - capture.start())
        print(f"Mean capture time: {mean} s")
        print(f"Capture/escape ratio:\n{capture.divide(dot.escape_times)}")

        visualizer = FunctionVisualizer(UnitsPrefix.NANO, UnitsPrefix.PICO, title="Capture times",
                                        abscissa_label="Quantum dot size", value_label="Capture time",
                                        abscissa_si_unit="m", value_si_unit="s")
        for name, material in materials.items():
            visualizer.plot_function(material.capture_times, label=name)
        plot_path = visualizer.save_plot(Path.cwd() / "pyphystools_plots" / "capture_times.png")
        print(f"Plot saved to {plot_path}")


if __name__ == "__main__":
    demonstrate_carrier_times()
