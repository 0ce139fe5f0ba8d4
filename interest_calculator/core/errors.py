"""Failure kinds raised by the compound interest calculator."""

from __future__ import annotations

from typing import Any, Dict, Optional


class CalculationError(ValueError):
    """Base class for every input the calculator refuses."""

    field: Optional[str] = None
    message: str = "Calculation failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "field": self.field, "message": str(self)}


class InvalidPrincipal(CalculationError):
    field = "principal"
    message = "Principal must be a valid positive number"


class InvalidRate(CalculationError):
    field = "rate"
    message = "Interest rate must be a valid non-negative number"


class InvalidTime(CalculationError):
    field = "time"
    message = "Time period must be a valid positive number"


class InvalidFrequency(CalculationError):
    field = "compound"
    message = "Compounding frequency must be a valid positive number"


class ResultOutOfRange(CalculationError):
    message = "Result is too large to represent"
