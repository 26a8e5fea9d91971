"""Validation result variants."""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from candlekit.errors import CandleValidationError


class Valid(BaseModel):
    """Successful validation, optionally carrying the validated value."""

    ok: Literal[True] = True
    value: Optional[Any] = Field(default=None, description="Validated value")

    model_config = {"frozen": True}

    def unwrap(self) -> Any:
        """Return the validated value."""
        return self.value


class Invalid(BaseModel):
    """Failed validation with every violated rule, in check order."""

    ok: Literal[False] = False
    errors: list[str] = Field(..., min_length=1, description="Violation messages")

    model_config = {"frozen": True}

    def unwrap(self) -> Any:
        """Raise ``CandleValidationError`` with every violation."""
        raise CandleValidationError(self.errors)


ValidationResult = Union[Valid, Invalid]
