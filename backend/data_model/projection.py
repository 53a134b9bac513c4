from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ProjectionResult:
    year: int
    age: int
    value: float  # deflated by cumulative inflation
    contributions: float  # nominal
    interest: float  # nominal, never negative

    def to_payload(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "age": self.age,
            "value": self.value,
            "contributions": self.contributions,
            "interest": self.interest,
        }


@dataclass(frozen=True)
class Strategy:
    name: str
    rate: float
    color: str


@dataclass(frozen=True)
class InvestmentOption:
    name: str
    rate: float
    color: str
    projections: Tuple[ProjectionResult, ...] = ()

    def final_value(self) -> float:
        return self.projections[-1].value if self.projections else 0.0

    def to_payload(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "rate": self.rate,
            "color": self.color,
            "projections": [row.to_payload() for row in self.projections],
        }


STRATEGIES: Tuple[Strategy, ...] = (
    Strategy("High Yield Savings", 0.05, "#3B82F6"),
    Strategy("Certificate of Deposit", 0.045, "#8B5CF6"),
    Strategy("Index Fund ETF", 0.08, "#10B981"),
    Strategy("Aggressive Growth", 0.12, "#F59E0B"),
)

# Substring that picks the headline strategy for monthly growth and summaries.
BEST_STRATEGY_KEY = "Index Fund"

MAX_PROJECTION_YEARS = 30
