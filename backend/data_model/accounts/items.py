from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List

import pandas as pd

from .constants import DEFAULT_TYPE_COLORS, AccountType


@dataclass(frozen=True)
class AccountBalance:
    name: str
    balance: float
    type: AccountType
    color: str | None = None

    def display_color(self) -> str:
        return self.color or DEFAULT_TYPE_COLORS[self.type]


def _row_to_account(row: dict[str, Any]) -> AccountBalance | None:
    name = str(row.get("Name", row.get("name", "")) or "").strip()
    if not name:
        return None
    balance = float(row.get("Balance", row.get("balance", 0.0)) or 0.0)
    account_type = AccountType.parse(row.get("Type", row.get("type", AccountType.SAVINGS.value)))
    color = row.get("Color", row.get("color")) or None
    return AccountBalance(name=name, balance=balance, type=account_type, color=color)


def accounts_from_rows(rows: Iterable[dict[str, Any]] | None) -> List[AccountBalance]:
    """Parse table/API rows. Rows without a name are skipped; bad numbers or types raise ValueError."""
    accounts: List[AccountBalance] = []
    for row in rows or []:
        account = _row_to_account(row)
        if account is not None:
            accounts.append(account)
    return accounts


def dataframe_to_accounts(df: pd.DataFrame) -> List[AccountBalance]:
    return accounts_from_rows(df.to_dict("records"))


def account_to_row(account: AccountBalance) -> dict[str, Any]:
    return {
        "Name": account.name,
        "Balance": account.balance,
        "Type": account.type.value,
        "Color": account.color or "",
    }
