from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from ..data_model import (
    BEST_STRATEGY_KEY,
    GROWTH_ACCOUNT_TYPES,
    AccountBalance,
    AccountType,
    DashboardMetrics,
    FinancialInputs,
    InvestmentOption,
    RiskLevel,
)

HIGH_RISK_RATIO = 0.7
MEDIUM_RISK_RATIO = 0.4


def total_balance(accounts: Sequence[AccountBalance]) -> float:
    return sum((account.balance for account in accounts), 0.0)


def find_best_strategy(options: Sequence[InvestmentOption]) -> Optional[InvestmentOption]:
    """The option whose name contains ``BEST_STRATEGY_KEY``; else the first option; None when empty."""
    for option in options:
        if BEST_STRATEGY_KEY in option.name:
            return option
    return options[0] if options else None


def investment_ratio(accounts: Sequence[AccountBalance]) -> float:
    total = total_balance(accounts)
    if total == 0:
        return 0.0
    growth = sum((a.balance for a in accounts if a.type in GROWTH_ACCOUNT_TYPES), 0.0)
    return growth / total


def risk_level_for_ratio(ratio: float) -> RiskLevel:
    if ratio > HIGH_RISK_RATIO:
        return RiskLevel.HIGH
    if ratio > MEDIUM_RISK_RATIO:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def diversification_score(accounts: Sequence[AccountBalance]) -> float:
    present = {account.type for account in accounts}
    return len(present) / len(AccountType) * 100


def aggregate(
    accounts: Sequence[AccountBalance],
    projections: Sequence[InvestmentOption],
    inputs: FinancialInputs,
) -> DashboardMetrics:
    total = total_balance(accounts)

    best = find_best_strategy(projections)
    if best is not None and best.projections:
        # first-year change only, spread over twelve months
        monthly_growth = (best.projections[0].value - inputs.initial_investment) / 12
    else:
        monthly_growth = 0.0

    goal_progress = total / inputs.goal_amount * 100 if inputs.goal_amount else 0.0

    return DashboardMetrics(
        total_balance=total,
        monthly_growth=monthly_growth,
        goal_progress=goal_progress,
        risk_level=risk_level_for_ratio(investment_ratio(accounts)),
        diversification_score=diversification_score(accounts),
    )


@dataclass(frozen=True)
class RecommendedSavings:
    years_to_save: int
    months_to_save: int
    recommended_monthly_save: float
    recommended_total_save: float

    def to_payload(self) -> Dict[str, Any]:
        return {
            "yearsToSave": self.years_to_save,
            "monthsToSave": self.months_to_save,
            "recommendedMonthlySave": self.recommended_monthly_save,
            "recommendedTotalSave": self.recommended_total_save,
        }


@dataclass(frozen=True)
class AccountProgress:
    total_saved: float
    progress_percentage: float  # capped at 100

    def to_payload(self) -> Dict[str, Any]:
        return {"totalSaved": self.total_saved, "progressPercentage": self.progress_percentage}


@dataclass(frozen=True)
class PlanSummary:
    total_current_savings: float
    projected_value: float
    monthly_required: float
    years_to_goal: int
    on_track: bool
    shortfall: float

    def to_payload(self) -> Dict[str, Any]:
        return {
            "totalCurrentSavings": self.total_current_savings,
            "projectedValue": self.projected_value,
            "monthlyRequired": self.monthly_required,
            "yearsToGoal": self.years_to_goal,
            "onTrack": self.on_track,
            "shortfall": self.shortfall,
        }


def calculate_recommended_savings(inputs: FinancialInputs) -> RecommendedSavings:
    years = inputs.years_to_goal()
    months = years * 12
    monthly = inputs.monthly_income * inputs.income_saving_rate
    return RecommendedSavings(
        years_to_save=years,
        months_to_save=months,
        recommended_monthly_save=monthly,
        recommended_total_save=monthly * months,
    )


def calculate_account_progress(accounts: Sequence[AccountBalance], goal_amount: float) -> AccountProgress:
    """Unlike ``aggregate``'s goal progress, this one is capped at 100 for progress bars."""
    saved = total_balance(accounts)
    progress = saved / goal_amount * 100 if goal_amount else 0.0
    return AccountProgress(total_saved=saved, progress_percentage=min(progress, 100.0))


def plan_summary(
    inputs: FinancialInputs,
    accounts: Sequence[AccountBalance],
    projections: Sequence[InvestmentOption],
) -> PlanSummary:
    best = find_best_strategy(projections)
    projected = best.final_value() if best is not None else 0.0
    return PlanSummary(
        total_current_savings=total_balance(accounts),
        projected_value=projected,
        monthly_required=inputs.monthly_income * inputs.income_saving_rate,
        years_to_goal=inputs.years_to_goal(),
        on_track=projected >= inputs.goal_amount,
        shortfall=max(0.0, inputs.goal_amount - projected),
    )
