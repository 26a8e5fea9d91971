"""Functions over ordered sequences of candles.

All functions keep input order and never modify their inputs.
"""

from typing import Optional, Sequence

from pydantic import BaseModel, Field

from candlekit.models.candle import Candle


class FilterOptions(BaseModel):
    """Inclusive timestamp bounds for ``filter_candles``.

    A bound of None imposes no constraint. Zero is a real bound.
    """

    exclude_before: Optional[int] = Field(
        default=None, ge=0, description="Drop candles with timestamp below this"
    )
    exclude_after: Optional[int] = Field(
        default=None, ge=0, description="Drop candles with timestamp above this"
    )

    model_config = {"frozen": True}


def opens(candles: Sequence[Candle]) -> list[float]:
    """All opens from a sequence of candles."""
    return [candle.open for candle in candles]


def highs(candles: Sequence[Candle]) -> list[float]:
    """All highs from a sequence of candles."""
    return [candle.high for candle in candles]


def lows(candles: Sequence[Candle]) -> list[float]:
    """All lows from a sequence of candles."""
    return [candle.low for candle in candles]


def closes(candles: Sequence[Candle]) -> list[float]:
    """All closes from a sequence of candles."""
    return [candle.close for candle in candles]


def filter_candles(candles: Sequence[Candle], options: FilterOptions) -> list[Candle]:
    """Keep the candles whose timestamp lies within the option bounds.

    Args:
        candles: Candles in any timestamp order.
        options: Inclusive lower/upper timestamp bounds.

    Returns:
        Matching candles in input order. Nothing is sorted or deduplicated.
    """
    result = []
    for candle in candles:
        if options.exclude_before is not None and candle.timestamp < options.exclude_before:
            continue
        if options.exclude_after is not None and candle.timestamp > options.exclude_after:
            continue
        result.append(candle)
    return result
