import logging
from decimal import Decimal
from typing import Dict, Mapping, Sequence

from pyphystools.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def _sign(value: Decimal) -> int:
    if value.is_zero():
        return 0
    return -1 if value.is_signed() else 1


def avoid_zeros(abscissa: Sequence[Decimal], values: Mapping[Decimal, Decimal]) -> Dict[Decimal, Decimal]:
    """
    Replace every exact zero by the smallest representable magnitude, signed after its neighbours.

    Abscissas are scanned in ascending order:
    - a lone zero point becomes positive;
    - a zero first point takes the sign of the next raw value;
    - a zero last point takes the sign of the previous raw value;
    - a zero interior point takes the sign of whichever neighbour is closer to zero, where
      the previous neighbour is its already adjusted value, so runs of zeros carry the
      sign of the nearest earlier decision.
    When the chosen neighbour is itself zero, the previous adjusted value decides, and a
    leading run of zeros is positive.
    Args:
        abscissa: Abscissas in ascending order
        values: Value at each abscissa
    Returns:
        The adjusted abscissa to value mapping, in ascending order
    """
    magnitude = ProcessingConstants.ZERO_REPLACEMENT_MAGNITUDE
    last_index = len(abscissa) - 1
    adjusted: Dict[Decimal, Decimal] = {}
    replaced = 0
    for index, position in enumerate(abscissa):
        value = values[position]
        if not value.is_zero():
            adjusted[position] = value
            continue
        if last_index == 0:
            sign = 1
        elif index == 0:
            sign = _sign(values[abscissa[1]]) or 1
        elif index == last_index:
            previous_position = abscissa[index - 1]
            sign = _sign(values[previous_position]) or _sign(adjusted[previous_position])
        else:
            following = values[abscissa[index + 1]]
            previous = adjusted[abscissa[index - 1]]
            if following.copy_abs() > previous.copy_abs():
                sign = _sign(previous)
            else:
                sign = _sign(following) or _sign(previous)
        adjusted[position] = magnitude if sign > 0 else -magnitude
        replaced += 1
    logger.debug("Replaced %d zero values out of %d points", replaced, len(abscissa))
    return adjusted
