from __future__ import annotations

from enum import Enum


class AccountType(str, Enum):
    SAVINGS = "savings"
    INVESTMENT = "investment"
    RETIREMENT = "retirement"
    EMERGENCY = "emergency"

    @classmethod
    def parse(cls, value: "AccountType | str") -> "AccountType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown account type: {value!r}") from None


ACCOUNT_TYPES: list[str] = [t.value for t in AccountType]

# Balances in these types count toward the investment ratio used for risk.
GROWTH_ACCOUNT_TYPES = frozenset({AccountType.INVESTMENT, AccountType.RETIREMENT})

DEFAULT_TYPE_COLORS = {
    AccountType.SAVINGS: "#3B82F6",
    AccountType.INVESTMENT: "#10B981",
    AccountType.RETIREMENT: "#8B5CF6",
    AccountType.EMERGENCY: "#F59E0B",
}
