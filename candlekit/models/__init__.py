"""Data models for candlekit."""

from candlekit.models.candle import Candle
from candlekit.models.direction import Direction
from candlekit.models.result import Invalid, Valid, ValidationResult

__all__ = [
    "Candle",
    "Direction",
    "Invalid",
    "Valid",
    "ValidationResult",
]
