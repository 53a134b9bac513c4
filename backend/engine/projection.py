from __future__ import annotations

import math
from typing import List, Sequence

import pandas as pd

from ..data_model import (
    MAX_PROJECTION_YEARS,
    STRATEGIES,
    FinancialInputs,
    InvestmentOption,
    ProjectionResult,
)
from ..logging_config import get_logger

logger = get_logger(__name__)

FRAME_COLUMNS = ["Strategy", "Rate", "Year", "Age", "Value", "Contributions", "Interest"]


def projection_horizon(inputs: FinancialInputs) -> int:
    """Projected years: target minus current age, capped at 30 and never negative."""
    return max(0, min(inputs.target_age - inputs.current_age, MAX_PROJECTION_YEARS))


def compound_interest_with_growth(
    principal: float,
    rate: float,
    years: int,
    annual_increase: float,
    current_age: int,
) -> List[ProjectionResult]:
    """Nominal series: the principal base grows by ``annual_increase`` each year before compounding."""
    results: List[ProjectionResult] = []
    total_contributions = principal

    for y in range(1, years + 1):
        adjusted_principal = principal * (1 + annual_increase) ** (y - 1)
        value = adjusted_principal * (1 + rate) ** y
        results.append(
            ProjectionResult(
                year=y,
                age=current_age + y,
                value=value,
                contributions=total_contributions,
                interest=max(0.0, value - total_contributions),
            )
        )
        total_contributions += adjusted_principal * annual_increase

    return results


def _deflate(value: float, inflation_rate: float, year: int) -> float:
    deflator = (1 + inflation_rate) ** year
    if deflator == 0:
        # inflation of -100% wipes out the price level
        return math.nan if value == 0 else math.copysign(math.inf, value)
    return value / deflator


def calculate_adjusted_returns(
    principal: float,
    gross_rate: float,
    years: int,
    annual_increase: float,
    tax_rate: float,
    inflation_rate: float,
    current_age: int,
) -> List[ProjectionResult]:
    """Tax the rate, compound, then deflate ``value`` only; contributions and interest stay nominal."""
    taxed_rate = gross_rate * (1 - tax_rate)
    nominal = compound_interest_with_growth(principal, taxed_rate, years, annual_increase, current_age)
    return [
        ProjectionResult(
            year=row.year,
            age=row.age,
            value=_deflate(row.value, inflation_rate, row.year),
            contributions=row.contributions,
            interest=row.interest,
        )
        for row in nominal
    ]


def project(inputs: FinancialInputs) -> List[InvestmentOption]:
    years = projection_horizon(inputs)
    options = [
        InvestmentOption(
            name=strategy.name,
            rate=strategy.rate,
            color=strategy.color,
            projections=tuple(
                calculate_adjusted_returns(
                    inputs.initial_investment,
                    strategy.rate,
                    years,
                    inputs.growth_rate,
                    inputs.tax_rate,
                    inputs.inflation_rate,
                    inputs.current_age,
                )
            ),
        )
        for strategy in STRATEGIES
    ]
    logger.debug("projection_computed", horizon=years, strategies=len(options))
    return options


def projections_to_frame(options: Sequence[InvestmentOption]) -> pd.DataFrame:
    """Long-format frame, one row per (strategy, year), for charts and tables."""
    records = [
        {
            "Strategy": option.name,
            "Rate": option.rate,
            "Year": row.year,
            "Age": row.age,
            "Value": row.value,
            "Contributions": row.contributions,
            "Interest": row.interest,
        }
        for option in options
        for row in option.projections
    ]
    return pd.DataFrame(records, columns=FRAME_COLUMNS)
