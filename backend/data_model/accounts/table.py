from __future__ import annotations

from .constants import ACCOUNT_TYPES
from .defaults import default_account_rows
from ..base import ColumnDefinition, TableModel


class AccountTableModel(TableModel):
    """Schema + defaults for the current-portfolio table."""

    def __init__(self) -> None:
        columns = [
            ColumnDefinition("Name", "Account"),
            ColumnDefinition(
                "Balance",
                "Balance (USD)",
                kind="number",
                default=0.0,
                min_value=0.0,
                step=100.0,
                format="%.2f",
            ),
            ColumnDefinition(
                "Type",
                "Type",
                kind="select",
                default="savings",
                options=ACCOUNT_TYPES,
                help="savings/investment/retirement/emergency",
            ),
            ColumnDefinition("Color", "Color", default="", help="Optional chart color, e.g. #3B82F6"),
        ]

        super().__init__("accounts", columns, default_account_rows())
