import pytest

from backend.data_model import AccountBalance, AccountType, FinancialInputs


@pytest.fixture
def base_inputs():
    return FinancialInputs(
        goal_amount=250000,
        current_age=25,
        target_age=35,
        initial_investment=10000,
        monthly_income=5000,
        income_saving_rate=0.20,
        growth_rate=0.03,
        inflation_rate=0.02,
        tax_rate=0.15,
    )


@pytest.fixture
def sample_accounts():
    return [
        AccountBalance("HYSA (Marcus)", 3500, AccountType.SAVINGS, "#3B82F6"),
        AccountBalance("Roth IRA (Stash)", 7000, AccountType.RETIREMENT, "#8B5CF6"),
        AccountBalance("Brokerage (Schwab)", 4200, AccountType.INVESTMENT, "#10B981"),
        AccountBalance("Emergency Fund (SoFi)", 2000, AccountType.EMERGENCY, "#F59E0B"),
        AccountBalance("CD (Credit Union)", 5000, AccountType.SAVINGS, "#06B6D4"),
    ]
