from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from pyphystools.data.constants.processing_constants import DECIMAL_CONTEXT


@dataclass(frozen=True)
class PhysicalConstants:
    """
    Fundamental constants as exact decimals, in SI units.

    Attributes:
        PI (Decimal): Truncated value of pi used throughout the carrier-time models.
        KB (Decimal): Boltzmann constant in J/K.
        ME (Decimal): Electron rest mass in kg.
        Q (Decimal): Elementary charge in C.
        EV (Decimal): Electron volt in J.
        C (Decimal): Speed of light in vacuum in m/s.
        H (Decimal): Planck constant in J·s.
        HBAR (Decimal): Reduced Planck constant in J·s.
    """
    PI: Final[Decimal] = Decimal("3.1415926535")
    KB: Final[Decimal] = Decimal("1.380649e-23")  # J/K
    ME: Final[Decimal] = Decimal("9.10938188e-31")  # kg
    Q: Final[Decimal] = Decimal("1.60217733e-19")  # C
    EV: Final[Decimal] = Decimal("1.602176634e-19")  # J
    C: Final[Decimal] = Decimal("299792458")  # m/s
    H: Final[Decimal] = Decimal("6.62607015e-34")  # J·s
    HBAR: Final[Decimal] = DECIMAL_CONTEXT.divide(Decimal("6.62607015e-34"),
                                                  DECIMAL_CONTEXT.multiply(Decimal("3.1415926535"), Decimal(2)))

    @classmethod
    def get_all_constants(cls) -> dict:
        """Return a dictionary of all constants with their values."""
        return {name: getattr(cls, name) for name in dir(cls)
                if not name.startswith('_') and not callable(getattr(cls, name))}

    @classmethod
    def get_constant(cls, name: str) -> Decimal:
        """Get a specific constant by name."""
        constants = cls.get_all_constants()
        if name in constants:
            return constants[name]
        raise AttributeError(f"Constant '{name}' not found. Available constants: {sorted(constants)}")
