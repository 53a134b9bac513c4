from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

import pandas as pd


@dataclass
class ColumnDefinition:
    """Field descriptor shared by the Dash form, the accounts table and /api/schema."""

    field: str
    label: str
    kind: str = "text"  # text | number | select | percent
    default: Any = ""
    options: List[str] | None = None
    min_value: float | None = None
    max_value: float | None = None
    step: float | None = None
    format: str | None = None
    help: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "label": self.label,
            "kind": self.kind,
            "default": self.default,
            "options": self.options or [],
            "min": self.min_value,
            "max": self.max_value,
            "step": self.step,
            "format": self.format,
            "help": self.help,
        }


@dataclass
class TableModel:
    """A schema plus default rows."""

    name: str
    columns: List[ColumnDefinition]
    default_rows: List[dict[str, Any]] = field(default_factory=list)

    def create_default_df(self) -> pd.DataFrame:
        if self.default_rows:
            return pd.DataFrame(self.default_rows)
        return pd.DataFrame([self.blank_row()])

    def blank_row(self) -> dict[str, Any]:
        return {col.field: col.default for col in self.columns}

    def column(self, field_name: str) -> ColumnDefinition:
        for col in self.columns:
            if col.field == field_name:
                return col
        raise KeyError(f"Unknown column: {field_name}")
