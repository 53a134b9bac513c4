from __future__ import annotations

from typing import List


def default_account_rows() -> List[dict[str, float | str]]:
    return [
        {
            "Name": "HYSA (Marcus)",
            "Balance": 3500.0,
            "Type": "savings",
            "Color": "#3B82F6",
        },
        {
            "Name": "Roth IRA (Stash)",
            "Balance": 7000.0,
            "Type": "retirement",
            "Color": "#8B5CF6",
        },
        {
            "Name": "Brokerage (Schwab)",
            "Balance": 4200.0,
            "Type": "investment",
            "Color": "#10B981",
        },
        {
            "Name": "Emergency Fund (SoFi)",
            "Balance": 2000.0,
            "Type": "emergency",
            "Color": "#F59E0B",
        },
        {
            "Name": "CD (Credit Union)",
            "Balance": 5000.0,
            "Type": "savings",
            "Color": "#06B6D4",
        },
    ]
