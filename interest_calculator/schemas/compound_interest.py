"""Data contracts for the compound interest endpoint."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from interest_calculator.core.compound_interest import CalculationResult
from interest_calculator.core.formatting import format_currency


class CompoundInterestRequest(BaseModel):
    """Raw form fields; the calculator parses and checks the values."""

    model_config = ConfigDict(extra="forbid")

    principal: Any = Field(None, description="Initial amount.")
    rate: Any = Field(None, description="Annual rate in percent (e.g. 5 for 5%).")
    time: Any = Field(None, description="Duration in years.")
    compound: Any = Field(None, description="Compounding periods per year.")


class DisplayAmounts(BaseModel):
    """Amounts formatted for the result panel."""

    principal: str
    interest: str
    total: str


class CompoundInterestResponse(BaseModel):
    principal: float = Field(..., ge=0)
    interest: float = Field(..., ge=0)
    total: float = Field(..., ge=0)
    display: DisplayAmounts

    @classmethod
    def from_result(cls, result: CalculationResult) -> "CompoundInterestResponse":
        return cls(
            principal=result.principal,
            interest=result.interest,
            total=result.total,
            display=DisplayAmounts(
                principal=format_currency(result.principal),
                interest=format_currency(result.interest),
                total=format_currency(result.total),
            ),
        )


class CalculationErrorBody(BaseModel):
    kind: str
    field: Optional[str] = None
    message: str


class CalculationErrorResponse(BaseModel):
    error: CalculationErrorBody
