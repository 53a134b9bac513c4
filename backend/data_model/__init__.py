from .accounts import (
    ACCOUNT_TYPES,
    GROWTH_ACCOUNT_TYPES,
    AccountBalance,
    AccountTableModel,
    AccountType,
    account_to_row,
    accounts_from_rows,
    dataframe_to_accounts,
)
from .inputs import FinancialInputs, InputFormModel, inputs_from_payload
from .metrics import DashboardMetrics, RiskLevel
from .projection import (
    BEST_STRATEGY_KEY,
    MAX_PROJECTION_YEARS,
    STRATEGIES,
    InvestmentOption,
    ProjectionResult,
    Strategy,
)

__all__ = [
    "ACCOUNT_TYPES",
    "BEST_STRATEGY_KEY",
    "GROWTH_ACCOUNT_TYPES",
    "MAX_PROJECTION_YEARS",
    "STRATEGIES",
    "AccountBalance",
    "AccountTableModel",
    "AccountType",
    "DashboardMetrics",
    "FinancialInputs",
    "InputFormModel",
    "InvestmentOption",
    "ProjectionResult",
    "RiskLevel",
    "Strategy",
    "account_to_row",
    "accounts_from_rows",
    "dataframe_to_accounts",
    "inputs_from_payload",
]
