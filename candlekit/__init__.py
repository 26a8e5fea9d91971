"""candlekit - OHLC candle validation and slice utilities."""

from candlekit.errors import CandleFormatError, CandleValidationError
from candlekit.models import Candle, Direction, Invalid, Valid, ValidationResult
from candlekit.series import FilterOptions, closes, filter_candles, highs, lows, opens
from candlekit.validation import validate

__all__ = [
    "Candle",
    "CandleFormatError",
    "CandleValidationError",
    "Direction",
    "FilterOptions",
    "Invalid",
    "Valid",
    "ValidationResult",
    "closes",
    "filter_candles",
    "highs",
    "lows",
    "opens",
    "validate",
]
