"""Trend direction of a single candle."""

from enum import IntEnum


class Direction(IntEnum):
    """Direction of a candle, from close compared to open."""

    BULLISH = 1
    BEARISH = -1
    NEUTRAL = 0
