import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional

from pyphystools.algorithms.interpolation import to_decimal
from pyphystools.core.exceptions import (FunctionArgumentError, MaterialConfigurationError,
                                         OffsetNotDefinedError)
from pyphystools.core.piecewise_function import Number, PiecewiseFunction

logger = logging.getLogger(__name__)


@dataclass
class Material:
    """
    Semiconductor material with its band and carrier-time properties, in SI units.

    Capture, escape and recombination times are functions of the quantum dot size.
    They are None for materials created without time definitions.
    """
    name: str
    bandgap: Decimal  # J
    electron_effective_mass: Decimal  # kg
    hole_effective_mass: Decimal  # kg
    capture_times: Optional[PiecewiseFunction] = None
    escape_times: Optional[PiecewiseFunction] = None
    recombination_times: Optional[PiecewiseFunction] = None

    def __post_init__(self) -> None:
        logger.info("Initializing material: %s", self.name)
        if not self.name:
            raise MaterialConfigurationError("Material name cannot be empty")
        try:
            self.bandgap = to_decimal(self.bandgap)
            self.electron_effective_mass = to_decimal(self.electron_effective_mass)
            self.hole_effective_mass = to_decimal(self.hole_effective_mass)
        except FunctionArgumentError as e:
            raise MaterialConfigurationError(f"Invalid numeric property for material {self.name}: {e}") from e

    def _time_function(self, function: Optional[PiecewiseFunction], kind: str) -> PiecewiseFunction:
        if function is None:
            raise MaterialConfigurationError(f"{kind} times are not defined for material {self.name}")
        return function

    def capture_time(self, size: Number) -> Decimal:
        """Capture time for a quantum dot of the given size."""
        return self._time_function(self.capture_times, "Capture").value_at(size)

    def escape_time(self, size: Number) -> Decimal:
        """Escape time for a quantum dot of the given size."""
        return self._time_function(self.escape_times, "Escape").value_at(size)

    def recombination_time(self, size: Number) -> Decimal:
        """Recombination time for a quantum dot of the given size."""
        return self._time_function(self.recombination_times, "Recombination").value_at(size)

    def copy(self) -> "Material":
        return Material(
            name=self.name,
            bandgap=self.bandgap,
            electron_effective_mass=self.electron_effective_mass,
            hole_effective_mass=self.hole_effective_mass,
            capture_times=self.capture_times.copy() if self.capture_times is not None else None,
            escape_times=self.escape_times.copy() if self.escape_times is not None else None,
            recombination_times=self.recombination_times.copy() if self.recombination_times is not None else None,
        )

    def __str__(self) -> str:
        return f"Material: {self.name} (bandgap: {self.bandgap} J)"


@dataclass
class Metamaterial:
    """
    Composite of several materials, with the conduction band offsets between them.

    Materials are indexed by their identifier in the composite; offsets are indexed by
    the concatenated names of the two materials they separate.
    """
    materials: Dict[str, Material]
    offsets: Dict[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        logger.info("Initializing metamaterial with %d materials and %d offsets",
                    len(self.materials), len(self.offsets))
        if not self.materials:
            raise MaterialConfigurationError("No material in the metamaterial")

    def get_material(self, material_id: str) -> Material:
        """Copy of the material registered under the identifier."""
        if material_id not in self.materials:
            raise MaterialConfigurationError(f"No material '{material_id}' in this metamaterial. "
                                             f"Available: {', '.join(sorted(self.materials))}")
        return self.materials[material_id].copy()

    def get_offset(self, material1: str, material2: str) -> Decimal:
        """
        Band offset between two materials, whatever their order.
        Raises:
            OffsetNotDefinedError: If no offset is defined for the pair
        """
        for compound in (material1 + material2, material2 + material1):
            if compound in self.offsets:
                return self.offsets[compound]
        raise OffsetNotDefinedError(f"No offset defined between {material1} and {material2} in this metamaterial")

    def copy(self) -> "Metamaterial":
        return Metamaterial(materials={key: material.copy() for key, material in self.materials.items()},
                            offsets=dict(self.offsets))
