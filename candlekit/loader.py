"""Read candles from CSV or JSON files.

Rows are turned into candles with ``Candle.new`` and are not validated, so
callers can report every bad row instead of stopping at the first one.
"""

import csv
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from candlekit.errors import CandleFormatError
from candlekit.models import Candle

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("timestamp", "open", "high", "low", "close")


def candle_from_row(row: Mapping[str, Any], row_number: int) -> Candle:
    """Convert one mapping of field names to values into a candle.

    Args:
        row: Mapping with timestamp, open, high, low, close and optional volume.
        row_number: 1-based position of the row, used in error messages.

    Raises:
        CandleFormatError: If a field is missing or not a number.
    """
    if not isinstance(row, Mapping):
        raise CandleFormatError(row_number, "expected an object of candle fields")

    missing = [name for name in REQUIRED_FIELDS if row.get(name) in (None, "")]
    if missing:
        raise CandleFormatError(row_number, f"missing {', '.join(missing)}")

    try:
        candle = Candle.new(
            open=float(row["open"]),
            high=float(row["high"]),
            low=float(row["low"]),
            close=float(row["close"]),
            timestamp=row["timestamp"],
        )
        volume = row.get("volume")
        if volume not in (None, ""):
            candle = candle.with_volume(float(volume))
    except (TypeError, ValueError, OverflowError) as e:
        raise CandleFormatError(row_number, str(e)) from e

    return candle


def candles_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[Candle]:
    """Convert rows to candles, keeping row order."""
    return [candle_from_row(row, i) for i, row in enumerate(rows, start=1)]


def load_candles(path: Path) -> list[Candle]:
    """Load candles from a ``.csv`` or ``.json`` file.

    JSON files hold a list of objects with the same keys as the CSV header.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in (".csv", ".json"):
        raise CandleFormatError(0, f"unsupported file type '{path.suffix}'")

    try:
        with open(path, newline="", encoding="utf-8") as f:
            if suffix == ".csv":
                rows = list(csv.DictReader(f))
            else:
                rows = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, csv.Error) as e:
        raise CandleFormatError(0, f"could not parse {path.name}: {e}") from e

    if suffix == ".json" and not isinstance(rows, list):
        raise CandleFormatError(0, "expected a JSON list of candle objects")

    candles = candles_from_rows(rows)

    logger.debug("Read %d candles from %s", len(candles), path)
    return candles
