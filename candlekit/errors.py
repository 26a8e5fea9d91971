"""Exceptions raised by candlekit."""


class CandleValidationError(ValueError):
    """Raised when an invalid result is unwrapped.

    The full ordered list of violations is kept on ``errors``.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class CandleFormatError(ValueError):
    """Raised when a row of candle data cannot be read."""

    def __init__(self, row: int, message: str):
        self.row = row
        super().__init__(f"Row {row}: {message}")
