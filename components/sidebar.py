# components/sidebar.py
from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html, dcc, dash_table

from backend.data_model import AccountTableModel, InputFormModel
from backend.data_model.base import ColumnDefinition

ACCOUNT_MODEL = AccountTableModel()
INPUT_MODEL = InputFormModel()


def input_id(field: str) -> str:
    return f"input-{field}"


INPUT_IDS = [input_id(col.field) for col in INPUT_MODEL.columns]


def _table_config(model: AccountTableModel):
    columns = []
    dropdowns = {}
    for col in model.columns:
        col_def = {"name": col.label, "id": col.field}
        if col.kind == "number":
            col_def["type"] = "numeric"
        if col.kind == "select":
            col_def["presentation"] = "dropdown"
            dropdowns[col.field] = [{"label": opt, "value": opt} for opt in col.options or []]
        columns.append(col_def)
    return columns, dropdowns


ACCOUNT_COLUMNS, ACCOUNT_DROPDOWNS = _table_config(ACCOUNT_MODEL)


def _percent_slider(col: ColumnDefinition):
    marks = {}
    steps = 5
    span = (col.max_value or 1.0) - (col.min_value or 0.0)
    for i in range(steps + 1):
        value = round((col.min_value or 0.0) + span * i / steps, 4)
        marks[value] = f"{value * 100:.0f}%"
    return dcc.Slider(
        id=input_id(col.field),
        min=col.min_value,
        max=col.max_value,
        step=col.step,
        value=col.default,
        marks=marks,
        updatemode="drag",
        tooltip={"placement": "bottom", "always_visible": False},
    )


def _form_field(col: ColumnDefinition):
    if col.kind == "percent":
        control = _percent_slider(col)
    else:
        control = dbc.Input(
            id=input_id(col.field),
            type="number",
            value=col.default,
            min=col.min_value,
            max=col.max_value,
            step=col.step,
            debounce=True,
        )
    return html.Div([dbc.Label(col.label), control], className="mb-2")


def accounts_table(data=None):
    table = dash_table.DataTable(
        id="accounts-table",
        data=data if data is not None else ACCOUNT_MODEL.create_default_df().to_dict("records"),
        columns=ACCOUNT_COLUMNS,
        editable=True,
        row_deletable=True,
        style_table={"height": "auto", "overflowY": "visible"},
        style_header={"backgroundColor": "#222", "color": "#eee", "fontWeight": "bold"},
        style_data={"backgroundColor": "#111", "color": "#eee"},
        dropdown={col: {"options": opts} for col, opts in ACCOUNT_DROPDOWNS.items()},
        fill_width=True,
    )
    return html.Div(table, style={"maxHeight": "240px", "overflowY": "auto"})


def build_sidebar():
    return dbc.Card(
        [
            html.H4("Plan Inputs", className="card-title"),
            *[_form_field(col) for col in INPUT_MODEL.columns if col.kind != "percent"],

            html.Hr(),
            html.H5("What-If"),
            *[_form_field(col) for col in INPUT_MODEL.columns if col.kind == "percent"],

            html.Hr(),
            html.H5("Current Accounts"),
            accounts_table(),
            dbc.Button("Add Account", id="add-account-row", color="secondary", size="sm", className="mt-2"),

            html.Hr(),
            dbc.Button("Export CSV", id="export-csv-btn", color="primary", className="mt-2 w-100"),
            dbc.Button("Export JSON", id="export-json-btn", color="secondary", className="mt-2 w-100"),
            dcc.Download(id="export-download"),
        ],
        body=True,
    )


def model_blank_row(model):
    """Return an empty row using the column defaults for the model."""
    return model.blank_row()


__all__ = [
    "ACCOUNT_MODEL",
    "INPUT_MODEL",
    "ACCOUNT_COLUMNS",
    "ACCOUNT_DROPDOWNS",
    "INPUT_IDS",
    "accounts_table",
    "build_sidebar",
    "input_id",
    "model_blank_row",
]
