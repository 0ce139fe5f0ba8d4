"""Compound interest calculation and its input rules."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Optional, Type

from pydantic import BaseModel, ConfigDict

from interest_calculator.core.errors import (
    CalculationError,
    InvalidFrequency,
    InvalidPrincipal,
    InvalidRate,
    InvalidTime,
    ResultOutOfRange,
)


@dataclass(frozen=True)
class CalculationInput:
    principal: float
    rate: float
    time: float
    compounding_frequency: float

    @property
    def rate_decimal(self) -> float:
        return self.rate / 100


class CalculationResult(BaseModel):
    """Amounts rounded to cents; interest is always total minus principal."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    principal: float
    interest: float
    total: float


def to_number(raw: object) -> Optional[float]:
    """Return ``raw`` as a float, or None when it is not a number.

    Ints, floats and numeric strings are accepted. Booleans are not numbers here,
    and neither are ints too large for a float or strings with digit separators.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Real):
        try:
            return float(raw)
        except OverflowError:
            return None
    if isinstance(raw, str):
        text = raw.strip()
        if not text or "_" in text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    return None


def _require(
    raw: object,
    error: Type[CalculationError],
    accept: Callable[[float], bool],
) -> float:
    value = to_number(raw)
    if value is None or not math.isfinite(value) or not accept(value):
        raise error()
    return value


def _is_positive(value: float) -> bool:
    return value > 0


def _is_non_negative(value: float) -> bool:
    return value >= 0


def parse_input(
    principal: object,
    rate: object,
    time: object,
    compounding_frequency: object,
) -> CalculationInput:
    """Parse raw values in field order; the first bad field raises."""
    return CalculationInput(
        principal=_require(principal, InvalidPrincipal, _is_positive),
        rate=_require(rate, InvalidRate, _is_non_negative),
        time=_require(time, InvalidTime, _is_positive),
        compounding_frequency=_require(compounding_frequency, InvalidFrequency, _is_positive),
    )


def _build_result(principal: float, total: float) -> CalculationResult:
    if not math.isfinite(total):
        raise ResultOutOfRange()
    principal_rounded = round(principal, 2)
    total_rounded = round(total, 2)
    return CalculationResult(
        principal=principal_rounded,
        interest=round(total_rounded - principal_rounded, 2),
        total=total_rounded,
    )


def calculate(
    principal: object,
    rate: object,
    time: object,
    compounding_frequency: object,
) -> CalculationResult:
    """
    Compound ``principal`` at ``rate`` percent a year for ``time`` years,
    ``compounding_frequency`` times per year.

    total = principal * (1 + rate / 100 / n) ** (n * time)

    Raises a CalculationError subclass naming the first invalid field.
    """
    values = parse_input(principal, rate, time, compounding_frequency)
    n = values.compounding_frequency

    try:
        growth = math.exp(values.time * (n * math.log1p(values.rate_decimal / n)))
    except OverflowError as exc:
        raise ResultOutOfRange() from exc

    return _build_result(values.principal, values.principal * growth)


def calculate_continuous(principal: object, rate: object, time: object) -> CalculationResult:
    """Limit of ``calculate`` as the compounding frequency grows without bound."""
    values = parse_input(principal, rate, time, 1)

    try:
        growth = math.exp(values.rate_decimal * values.time)
    except OverflowError as exc:
        raise ResultOutOfRange() from exc

    return _build_result(values.principal, values.principal * growth)
