import pytest

from backend.data_model import AccountBalance, AccountType, InvestmentOption, ProjectionResult, RiskLevel
from backend.engine.aggregate import (
    aggregate,
    calculate_account_progress,
    calculate_recommended_savings,
    find_best_strategy,
    investment_ratio,
    plan_summary,
    risk_level_for_ratio,
)
from backend.engine.projection import project


def _option(name, first_value):
    row = ProjectionResult(year=1, age=26, value=first_value, contributions=0.0, interest=0.0)
    return InvestmentOption(name=name, rate=0.05, color="#000000", projections=(row,))


def test_five_account_portfolio(base_inputs, sample_accounts):
    metrics = aggregate(sample_accounts, project(base_inputs), base_inputs)

    assert metrics.total_balance == pytest.approx(21700)
    assert metrics.diversification_score == pytest.approx(100)
    assert investment_ratio(sample_accounts) == pytest.approx(11200 / 21700)
    assert metrics.risk_level is RiskLevel.MEDIUM
    assert metrics.goal_progress == pytest.approx(21700 / 250000 * 100)


def test_monthly_growth_uses_index_fund_first_year(base_inputs, sample_accounts):
    metrics = aggregate(sample_accounts, project(base_inputs), base_inputs)

    first_year = 10000 * (1 + 0.08 * 0.85) / 1.02
    assert metrics.monthly_growth == pytest.approx((first_year - 10000) / 12)


def test_best_strategy_falls_back_to_first_option():
    options = [_option("Bonds", 1.0), _option("Gold", 2.0)]

    assert find_best_strategy(options).name == "Bonds"
    assert find_best_strategy([]) is None


def test_best_strategy_match_is_case_sensitive():
    options = [_option("index fund lite", 1.0), _option("My Index Fund", 2.0)]

    assert find_best_strategy(options).name == "My Index Fund"


def test_empty_accounts_do_not_divide_by_zero(base_inputs):
    metrics = aggregate([], project(base_inputs), base_inputs)

    assert metrics.total_balance == 0
    assert metrics.goal_progress == 0
    assert metrics.risk_level is RiskLevel.LOW
    assert metrics.diversification_score == 0


def test_zero_goal_gives_zero_progress(base_inputs, sample_accounts):
    inputs = base_inputs.with_changes(goal_amount=0)

    metrics = aggregate(sample_accounts, project(inputs), inputs)

    assert metrics.goal_progress == 0


def test_zero_balances_are_low_risk_but_still_diversified(base_inputs):
    accounts = [
        AccountBalance("A", 0, AccountType.INVESTMENT),
        AccountBalance("B", 0, AccountType.SAVINGS),
    ]

    metrics = aggregate(accounts, project(base_inputs), base_inputs)

    assert metrics.risk_level is RiskLevel.LOW
    assert metrics.diversification_score == pytest.approx(50)


def test_goal_progress_is_not_clamped(base_inputs, sample_accounts):
    inputs = base_inputs.with_changes(goal_amount=10000)

    metrics = aggregate(sample_accounts, project(inputs), inputs)

    assert metrics.goal_progress == pytest.approx(217)


@pytest.mark.parametrize(
    "ratio, expected",
    [(0.0, RiskLevel.LOW), (0.4, RiskLevel.LOW), (0.41, RiskLevel.MEDIUM), (0.7, RiskLevel.MEDIUM), (0.71, RiskLevel.HIGH)],
)
def test_risk_thresholds(ratio, expected):
    assert risk_level_for_ratio(ratio) is expected


def test_monthly_growth_is_zero_without_projections(base_inputs, sample_accounts):
    inputs = base_inputs.with_changes(target_age=25)

    assert aggregate(sample_accounts, project(inputs), inputs).monthly_growth == 0
    assert aggregate(sample_accounts, [], inputs).monthly_growth == 0


def test_recommended_savings(base_inputs):
    rec = calculate_recommended_savings(base_inputs)

    assert rec.years_to_save == 10
    assert rec.months_to_save == 120
    assert rec.recommended_monthly_save == pytest.approx(1000)
    assert rec.recommended_total_save == pytest.approx(120000)


def test_account_progress_is_capped(sample_accounts):
    assert calculate_account_progress(sample_accounts, 10000).progress_percentage == 100
    assert calculate_account_progress(sample_accounts, 0).progress_percentage == 0
    assert calculate_account_progress(sample_accounts, 43400).progress_percentage == pytest.approx(50)


def test_plan_summary_reports_shortfall(base_inputs, sample_accounts):
    options = project(base_inputs)

    summary = plan_summary(base_inputs, sample_accounts, options)

    index_fund = options[2]
    assert summary.projected_value == pytest.approx(index_fund.projections[-1].value)
    assert summary.on_track is False
    assert summary.shortfall == pytest.approx(250000 - summary.projected_value)
    assert summary.total_current_savings == pytest.approx(21700)
    assert summary.years_to_goal == 10
