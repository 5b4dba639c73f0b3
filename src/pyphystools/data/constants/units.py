import logging
from decimal import Decimal
from enum import Enum

logger = logging.getLogger(__name__)


class UnitsPrefix(Enum):
    """
    Decimal order-of-magnitude prefixes and their multiplier to SI.

    UNITY stands for the plain SI unit (m, s, g...).
    """
    FEMTO = ("1e-15", "f")
    PICO = ("1e-12", "p")
    NANO = ("1e-9", "n")
    MICRO = ("1e-6", "μ")
    MILLI = ("1e-3", "m")
    CENTI = ("1e-2", "c")
    UNITY = ("1.0", "")

    def __init__(self, multiplier: str, prefix: str) -> None:
        self._multiplier = Decimal(multiplier)
        self._prefix = prefix

    @property
    def multiplier(self) -> Decimal:
        return self._multiplier

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def scale(self) -> int:
        """Number of fractional digits of the multiplier."""
        return -self._multiplier.as_tuple().exponent

    @classmethod
    def select_prefix(cls, unit: str) -> "UnitsPrefix":
        """
        Select the prefix of a unit string from its first character.
        Args:
            unit: Unit such as 'nm', 'fs' or 'ps'
        Returns:
            The matching prefix, UNITY when the unit carries none
        """
        if not unit:
            return cls.UNITY
        prefix = _PREFIX_ALIASES.get(unit[0], cls.UNITY)
        logger.debug("Unit '%s' resolved to prefix %s", unit, prefix.name)
        return prefix


_PREFIX_ALIASES = {
    'f': UnitsPrefix.FEMTO,
    'p': UnitsPrefix.PICO,
    'n': UnitsPrefix.NANO,
    'μ': UnitsPrefix.MICRO,
    'µ': UnitsPrefix.MICRO,
    'u': UnitsPrefix.MICRO,
    'm': UnitsPrefix.MILLI,
    'c': UnitsPrefix.CENTI,
}
