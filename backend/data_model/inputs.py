from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping

from .base import ColumnDefinition, TableModel

# snake_case attribute -> camelCase wire key
PAYLOAD_KEYS: Dict[str, str] = {
    "goal_amount": "goalAmount",
    "current_age": "currentAge",
    "target_age": "targetAge",
    "initial_investment": "initialInvestment",
    "monthly_income": "monthlyIncome",
    "income_saving_rate": "incomeSavingRate",
    "growth_rate": "growthRate",
    "inflation_rate": "inflationRate",
    "tax_rate": "taxRate",
}

AGE_FIELDS = {"current_age", "target_age"}


@dataclass(frozen=True)
class FinancialInputs:
    """One snapshot of the planner's assumptions. Rates are fractions, not percentages."""

    goal_amount: float = 250000.0
    current_age: int = 25
    target_age: int = 35
    initial_investment: float = 10000.0
    monthly_income: float = 5000.0
    income_saving_rate: float = 0.20
    growth_rate: float = 0.03
    inflation_rate: float = 0.02
    tax_rate: float = 0.15

    def with_changes(self, **changes: Any) -> "FinancialInputs":
        unknown = set(changes).difference(PAYLOAD_KEYS)
        if unknown:
            raise KeyError(f"Unknown input fields: {', '.join(sorted(unknown))}")
        return replace(self, **{key: _coerce(key, value) for key, value in changes.items()})

    def years_to_goal(self) -> int:
        return self.target_age - self.current_age

    def to_payload(self) -> Dict[str, float]:
        return {PAYLOAD_KEYS[key]: value for key, value in asdict(self).items()}


def _coerce(key: str, value: Any) -> float | int:
    if isinstance(value, bool) or value is None:
        raise TypeError(f"{PAYLOAD_KEYS.get(key, key)} must be a number")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{PAYLOAD_KEYS.get(key, key)} must be a finite number")
    if key in AGE_FIELDS:
        return int(number)
    return number


def inputs_from_payload(payload: Mapping[str, Any] | None, base: FinancialInputs | None = None) -> FinancialInputs:
    """Build inputs from a camelCase (or snake_case) mapping; absent keys keep ``base`` values."""
    base = base or FinancialInputs()
    payload = payload or {}
    changes: Dict[str, Any] = {}
    for attr, wire_key in PAYLOAD_KEYS.items():
        for key in (wire_key, attr):
            if key in payload and payload[key] is not None and payload[key] != "":
                changes[attr] = payload[key]
                break
    return base.with_changes(**changes)


class InputFormModel(TableModel):
    """Field schema for the assumptions form; one default row."""

    def __init__(self) -> None:
        defaults = FinancialInputs()
        columns = [
            ColumnDefinition("goalAmount", "Goal Amount (USD)", kind="number", default=defaults.goal_amount,
                             min_value=0.0, step=1000.0, format="%.0f"),
            ColumnDefinition("currentAge", "Current Age", kind="number", default=defaults.current_age,
                             min_value=16, max_value=100, step=1),
            ColumnDefinition("targetAge", "Target Age", kind="number", default=defaults.target_age,
                             min_value=17, max_value=100, step=1),
            ColumnDefinition("initialInvestment", "Initial Investment (USD)", kind="number",
                             default=defaults.initial_investment, min_value=0.0, step=500.0, format="%.0f"),
            ColumnDefinition("monthlyIncome", "Monthly Income (USD)", kind="number",
                             default=defaults.monthly_income, min_value=0.0, step=100.0, format="%.0f"),
            ColumnDefinition("incomeSavingRate", "Savings Rate", kind="percent",
                             default=defaults.income_saving_rate, min_value=0.05, max_value=0.5, step=0.01),
            ColumnDefinition("growthRate", "Income Growth", kind="percent", default=defaults.growth_rate,
                             min_value=0.0, max_value=0.1, step=0.005),
            ColumnDefinition("inflationRate", "Inflation", kind="percent", default=defaults.inflation_rate,
                             min_value=0.0, max_value=0.08, step=0.005),
            ColumnDefinition("taxRate", "Tax Rate", kind="percent", default=defaults.tax_rate,
                             min_value=0.0, max_value=0.5, step=0.01),
        ]
        super().__init__("inputs", columns, [defaults.to_payload()])
