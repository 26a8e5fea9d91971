"""Candle validation rules.

Every rule is evaluated; violations are reported together in a fixed order
so a single bad record can be fully diagnosed at once.
"""

import logging
import math
from typing import TYPE_CHECKING

from candlekit.models.result import Invalid, Valid, ValidationResult

if TYPE_CHECKING:
    from candlekit.models.candle import Candle

logger = logging.getLogger(__name__)

OPEN_NOT_FINITE = "Open price must be finite"
HIGH_NOT_FINITE = "High price must be finite"
LOW_NOT_FINITE = "Low price must be finite"
CLOSE_NOT_FINITE = "Close price must be finite"
HIGH_BELOW_LOW = "High price must be greater than or equal to low price"
INVALID_VOLUME = "Volume must be non-negative and finite"
ZERO_TIMESTAMP = "Timestamp must be non-zero"


def is_finite(value: float) -> bool:
    """True unless value is NaN or +/- infinity."""
    return math.isfinite(value)


def validate(candle: "Candle") -> ValidationResult:
    """Validate a candle against all OHLC rules.

    Args:
        candle: Candle to check. It may have been built with invalid values.

    Returns:
        ``Valid`` when every rule holds, otherwise ``Invalid`` with one
        message per violated rule.
    """
    errors = []

    if not is_finite(candle.open):
        errors.append(OPEN_NOT_FINITE)
    if not is_finite(candle.high):
        errors.append(HIGH_NOT_FINITE)
    if not is_finite(candle.low):
        errors.append(LOW_NOT_FINITE)
    if not is_finite(candle.close):
        errors.append(CLOSE_NOT_FINITE)

    # NaN compares False, so a NaN high or low only reports as non-finite
    if candle.high < candle.low:
        errors.append(HIGH_BELOW_LOW)

    if candle.volume is not None:
        if not is_finite(candle.volume) or candle.volume < 0:
            errors.append(INVALID_VOLUME)

    if candle.timestamp == 0:
        errors.append(ZERO_TIMESTAMP)

    if errors:
        logger.debug("Candle at %s failed %d check(s)", candle.timestamp, len(errors))
        return Invalid(errors=errors)
    return Valid()
