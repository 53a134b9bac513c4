from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class DashboardMetrics:
    total_balance: float
    monthly_growth: float
    goal_progress: float  # percent, may exceed 100
    risk_level: RiskLevel
    diversification_score: float  # percent of account types present

    def to_payload(self) -> Dict[str, Any]:
        return {
            "totalBalance": self.total_balance,
            "monthlyGrowth": self.monthly_growth,
            "goalProgress": self.goal_progress,
            "riskLevel": self.risk_level.value,
            "diversificationScore": self.diversification_score,
        }
