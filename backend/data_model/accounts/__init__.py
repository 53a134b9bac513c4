from .constants import ACCOUNT_TYPES, DEFAULT_TYPE_COLORS, GROWTH_ACCOUNT_TYPES, AccountType
from .defaults import default_account_rows
from .items import AccountBalance, account_to_row, accounts_from_rows, dataframe_to_accounts
from .table import AccountTableModel

__all__ = [
    "ACCOUNT_TYPES",
    "DEFAULT_TYPE_COLORS",
    "GROWTH_ACCOUNT_TYPES",
    "AccountBalance",
    "AccountTableModel",
    "AccountType",
    "account_to_row",
    "accounts_from_rows",
    "dataframe_to_accounts",
    "default_account_rows",
]
