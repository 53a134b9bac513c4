from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from ..data_model import DashboardMetrics, FinancialInputs, RiskLevel


class KpiFormat(str, Enum):
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    NUMBER = "number"


RISK_SCORES = {RiskLevel.LOW: 30, RiskLevel.MEDIUM: 60, RiskLevel.HIGH: 90}
RISK_COLORS = {RiskLevel.LOW: "#22C55E", RiskLevel.MEDIUM: "#F59E0B", RiskLevel.HIGH: "#EF4444"}


@dataclass(frozen=True)
class Kpi:
    id: str
    label: str
    value: float
    format: KpiFormat
    color: str

    def display(self) -> str:
        return format_value(self.value, self.format)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "value": self.value,
            "format": self.format.value,
            "color": self.color,
            "display": self.display(),
        }


def format_currency(amount: float) -> str:
    """Whole US dollars with thousands separators, e.g. ``$21,700`` or ``-$1,250``."""
    rounded = round(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"


def format_percentage(value: float) -> str:
    """A fraction shown as a percent with one decimal: 0.2 -> ``20.0%``."""
    return f"{value * 100:.1f}%"


def format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_value(value: float, fmt: KpiFormat) -> str:
    # KPI percentages are already on the 0-100 scale
    if fmt is KpiFormat.CURRENCY:
        return format_currency(value)
    if fmt is KpiFormat.PERCENTAGE:
        return f"{value:.1f}%"
    if fmt is KpiFormat.NUMBER:
        return format_number(value)
    raise ValueError(f"Unsupported KPI format: {fmt!r}")


def build_kpis(metrics: DashboardMetrics, inputs: FinancialInputs) -> List[Kpi]:
    return [
        Kpi("totalBalance", "Total Balance", metrics.total_balance, KpiFormat.CURRENCY, "#2F81F7"),
        Kpi("goalProgress", "Goal Progress", metrics.goal_progress, KpiFormat.PERCENTAGE, "#22C55E"),
        Kpi("monthlyGrowth", "Monthly Growth", metrics.monthly_growth, KpiFormat.CURRENCY, "#F59E0B"),
        Kpi("diversification", "Diversification", metrics.diversification_score, KpiFormat.PERCENTAGE, "#8B5CF6"),
        Kpi("yearsToGoal", "Years to Goal", inputs.years_to_goal(), KpiFormat.NUMBER, "#EF4444"),
        Kpi(
            "riskLevel",
            "Risk Score",
            RISK_SCORES[metrics.risk_level],
            KpiFormat.NUMBER,
            RISK_COLORS[metrics.risk_level],
        ),
    ]
