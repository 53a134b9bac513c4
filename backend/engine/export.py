"""CSV / JSON export of a complete plan.

JSON mirrors the API payload shapes (camelCase) and loads back into the same
dataclasses; CSV is the sectioned spreadsheet layout.
"""
from __future__ import annotations

import csv
import datetime
import io
import json
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..data_model import (
    AccountBalance,
    AccountType,
    FinancialInputs,
    InvestmentOption,
    ProjectionResult,
    inputs_from_payload,
)
from .aggregate import PlanSummary, plan_summary
from .kpis import format_percentage

EXPORT_FORMATS = ("csv", "json")
MIME_TYPES = {"csv": "text/csv", "json": "application/json"}
# 1-based years shown in the CSV projection table
CSV_MILESTONE_YEARS = (1, 5, 10)


@dataclass(frozen=True)
class ExportData:
    inputs: FinancialInputs
    accounts: tuple[AccountBalance, ...]
    projections: tuple[InvestmentOption, ...]
    summary: PlanSummary
    generated_at: str


def build_export_data(
    inputs: FinancialInputs,
    accounts: Sequence[AccountBalance],
    projections: Sequence[InvestmentOption],
    generated_at: Optional[datetime.datetime] = None,
) -> ExportData:
    stamp = generated_at or datetime.datetime.now(datetime.timezone.utc)
    return ExportData(
        inputs=inputs,
        accounts=tuple(accounts),
        projections=tuple(projections),
        summary=plan_summary(inputs, accounts, projections),
        generated_at=stamp.isoformat(),
    )


def export_filename(fmt: str, today: Optional[datetime.date] = None) -> str:
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt}")
    today = today or datetime.date.today()
    return f"financial-plan-{today.isoformat()}.{fmt}"


def _sanitize_json_compat(value: Any):
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return value
    if isinstance(value, dict):
        return {key: _sanitize_json_compat(val) for key, val in value.items()}
    if isinstance(value, list):
        return [_sanitize_json_compat(item) for item in value]
    return value


def export_payload(data: ExportData) -> Dict[str, Any]:
    return {
        "inputs": data.inputs.to_payload(),
        "accounts": [
            {"name": a.name, "balance": a.balance, "type": a.type.value, "color": a.color}
            for a in data.accounts
        ],
        "projections": [option.to_payload() for option in data.projections],
        "summary": data.summary.to_payload(),
        "generatedAt": data.generated_at,
    }


def export_to_json(data: ExportData) -> str:
    return json.dumps(_sanitize_json_compat(export_payload(data)), indent=2, allow_nan=False)


def _num(value: Any) -> float:
    return math.nan if value is None else float(value)


def load_export_json(text: str) -> ExportData:
    raw = json.loads(text)
    accounts = tuple(
        AccountBalance(
            name=row["name"],
            balance=_num(row["balance"]),
            type=AccountType.parse(row["type"]),
            color=row.get("color"),
        )
        for row in raw.get("accounts", [])
    )
    projections = tuple(
        InvestmentOption(
            name=option["name"],
            rate=_num(option["rate"]),
            color=option["color"],
            projections=tuple(
                ProjectionResult(
                    year=int(row["year"]),
                    age=int(row["age"]),
                    value=_num(row["value"]),
                    contributions=_num(row["contributions"]),
                    interest=_num(row["interest"]),
                )
                for row in option.get("projections", [])
            ),
        )
        for option in raw.get("projections", [])
    )
    summary = raw["summary"]
    return ExportData(
        inputs=inputs_from_payload(raw["inputs"]),
        accounts=accounts,
        projections=projections,
        summary=PlanSummary(
            total_current_savings=_num(summary["totalCurrentSavings"]),
            projected_value=_num(summary["projectedValue"]),
            monthly_required=_num(summary["monthlyRequired"]),
            years_to_goal=int(summary["yearsToGoal"]),
            on_track=bool(summary["onTrack"]),
            shortfall=_num(summary.get("shortfall", 0.0)),
        ),
        generated_at=raw["generatedAt"],
    )


def _value_at(option: InvestmentOption, year: int) -> str:
    if len(option.projections) < year:
        return "0"
    return f"{option.projections[year - 1].value:.2f}"


def _csv_rows(data: ExportData) -> List[List[Any]]:
    inputs = data.inputs
    summary = data.summary
    rows: List[List[Any]] = [
        ["Financial Planning Export"],
        ["Generated:", data.generated_at],
        [],
        ["INPUTS"],
        ["Goal Amount", inputs.goal_amount],
        ["Current Age", inputs.current_age],
        ["Target Age", inputs.target_age],
        ["Initial Investment", inputs.initial_investment],
        ["Monthly Income", inputs.monthly_income],
        ["Income Saving Rate", format_percentage(inputs.income_saving_rate)],
        ["Growth Rate", format_percentage(inputs.growth_rate)],
        ["Inflation Rate", format_percentage(inputs.inflation_rate)],
        ["Tax Rate", format_percentage(inputs.tax_rate)],
        [],
        ["CURRENT ACCOUNTS"],
        ["Account Name", "Balance", "Type"],
    ]
    rows.extend([account.name, account.balance, account.type.value] for account in data.accounts)
    rows.extend(
        [
            [],
            ["PROJECTIONS"],
            ["Investment Type"] + [f"Year {y}" for y in CSV_MILESTONE_YEARS] + ["Final Year"],
        ]
    )
    for option in data.projections:
        final = f"{option.final_value():.2f}" if option.projections else "0"
        rows.append([option.name] + [_value_at(option, y) for y in CSV_MILESTONE_YEARS] + [final])
    rows.extend(
        [
            [],
            ["SUMMARY"],
            ["Total Current Savings", summary.total_current_savings],
            ["Projected Value", summary.projected_value],
            ["Monthly Required", summary.monthly_required],
            ["Years to Goal", summary.years_to_goal],
            ["On Track", "Yes" if summary.on_track else "No"],
        ]
    )
    return rows


def export_to_csv(data: ExportData) -> str:
    stream = io.StringIO()
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerows(_csv_rows(data))
    return stream.getvalue()


def render_export(data: ExportData, fmt: str) -> str:
    if fmt == "csv":
        return export_to_csv(data)
    if fmt == "json":
        return export_to_json(data)
    raise ValueError(f"Unsupported export format: {fmt}")
