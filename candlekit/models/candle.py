"""Candle (OHLC) data model."""

from typing import Optional

from pydantic import BaseModel, Field

from candlekit.models.direction import Direction
from candlekit.models.result import Valid, ValidationResult
from candlekit.validation import validate


class Candle(BaseModel):
    """Represents a single OHLC candle with optional volume.

    Construction checks types only. Price and timestamp rules are enforced
    by ``check()`` / ``build()``, so an unchecked candle may hold NaN prices,
    a high below its low or a zero timestamp.
    """

    open: float = Field(..., description="Opening price")
    high: float = Field(..., description="High price")
    low: float = Field(..., description="Low price")
    close: float = Field(..., description="Closing price")
    volume: Optional[float] = Field(default=None, description="Traded volume, None if unknown")
    timestamp: int = Field(..., ge=0, description="Candle time, caller-defined unit")

    model_config = {"frozen": True}

    @classmethod
    def new(cls, open: float, high: float, low: float, close: float, timestamp: int) -> "Candle":
        """Create a candle without volume. Values are not validated."""
        return cls(open=open, high=high, low=low, close=close, timestamp=timestamp)

    @classmethod
    def build(
        cls, open: float, high: float, low: float, close: float, timestamp: int
    ) -> ValidationResult:
        """Create and validate a candle.

        Returns:
            ``Valid`` holding the candle, or ``Invalid`` holding every
            violated rule.
        """
        candle = cls.new(open, high, low, close, timestamp)
        result = validate(candle)
        if not result.ok:
            return result
        return Valid(value=candle)

    def with_volume(self, volume: float) -> "Candle":
        """Return a copy of this candle with volume set.

        The volume is type-checked like the other fields but not validated.
        """
        return self.model_validate({**self.model_dump(), "volume": volume})

    def check(self) -> ValidationResult:
        """Validate this candle. See ``candlekit.validation.validate``."""
        return validate(self)

    def direction(self) -> Direction:
        """Return the direction of the candle.

        Open and close are compared exactly; equal values are NEUTRAL.
        """
        if self.close > self.open:
            return Direction.BULLISH
        if self.open > self.close:
            return Direction.BEARISH
        return Direction.NEUTRAL
