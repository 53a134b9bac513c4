"""Dash front-end: inputs sidebar on the left, KPIs and charts on the right.

Form edits are staged into a ``LivePlanner``; a short interval polls it and
redraws only once the debounced recompute has produced a new snapshot.
"""

from __future__ import annotations

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State, dcc, html
from dash.exceptions import PreventUpdate

from backend.config import load_settings
from backend.data_model import FinancialInputs, accounts_from_rows, dataframe_to_accounts, inputs_from_payload
from backend.engine.aggregate import plan_summary
from backend.engine.export import build_export_data, export_filename, render_export
from backend.engine.kpis import build_kpis, format_currency
from backend.engine.live import LivePlanner
from backend.engine.projection import project
from backend.engine.scenarios import compare_scenarios
from backend.logging_config import configure_logging, get_logger
from components.dashboard import (
    accounts_figure,
    build_dashboard,
    kpi_cards,
    projection_figure,
    scenario_figure,
)
from components.sidebar import ACCOUNT_MODEL, INPUT_MODEL, build_sidebar, input_id, model_blank_row

settings = load_settings()
logger = get_logger(__name__)

PLANNER = LivePlanner(
    FinancialInputs(),
    dataframe_to_accounts(ACCOUNT_MODEL.create_default_df()),
    wait=settings.debounce_seconds,
)

app = dash.Dash(__name__, external_stylesheets=[dbc.themes.DARKLY])
app.layout = dbc.Container(
    [
        html.H2("Financial Planner", className="my-3"),
        dbc.Row(
            [
                dbc.Col(build_sidebar(), md=4),
                dbc.Col(build_dashboard(), md=8),
            ]
        ),
        dcc.Store(id="form-error"),
        dcc.Store(id="render-version"),
        dcc.Interval(id="refresh-interval", interval=max(settings.debounce_ms, 100)),
    ],
    fluid=True,
)

INPUT_STATES = [Input(input_id(col.field), "value") for col in INPUT_MODEL.columns]


def _read_form(values, rows):
    raw = {col.field: value for col, value in zip(INPUT_MODEL.columns, values)}
    return inputs_from_payload(raw), accounts_from_rows(rows)


@app.callback(
    Output("form-error", "data"),
    *INPUT_STATES,
    Input("accounts-table", "data"),
)
def stage_edits(*args):
    *values, rows = args
    try:
        inputs, accounts = _read_form(values, rows)
    except (TypeError, ValueError) as exc:
        logger.warning("invalid_form", error=str(exc))
        return str(exc)
    PLANNER.update(inputs, accounts)
    return None


@app.callback(
    Output("kpi-strip", "children"),
    Output("projection-chart", "figure"),
    Output("accounts-chart", "figure"),
    Output("scenario-chart", "figure"),
    Output("plan-status", "children"),
    Output("render-version", "data"),
    Input("refresh-interval", "n_intervals"),
    Input("form-error", "data"),
    State("render-version", "data"),
)
def refresh_dashboard(_n_intervals, form_error, rendered_version):
    if form_error:
        if rendered_version == form_error:
            raise PreventUpdate
        alert = dbc.Alert(form_error, color="danger")
        return dash.no_update, dash.no_update, dash.no_update, dash.no_update, alert, form_error

    version = PLANNER.version
    if version == rendered_version:
        raise PreventUpdate

    snapshot = PLANNER.latest
    inputs, accounts, options = snapshot.inputs, snapshot.accounts, snapshot.projections
    summary = plan_summary(inputs, accounts, options)
    if summary.on_track:
        status = dbc.Alert(f"On track: projected {format_currency(summary.projected_value)}", color="success")
    else:
        status = dbc.Alert(f"Shortfall of {format_currency(summary.shortfall)} at target age", color="warning")

    return (
        kpi_cards(build_kpis(snapshot.metrics, inputs)),
        projection_figure(options),
        accounts_figure(accounts),
        scenario_figure(compare_scenarios(inputs)),
        status,
        version,
    )


@app.callback(
    Output("accounts-table", "data"),
    Input("add-account-row", "n_clicks"),
    State("accounts-table", "data"),
    prevent_initial_call=True,
)
def add_account_row(_, rows):
    return (rows or []) + [model_blank_row(ACCOUNT_MODEL)]


def build_download(fmt, values, rows):
    """Render the current form as a ``dcc.Download`` payload; no update on a bad form."""
    try:
        inputs, accounts = _read_form(values, rows)
    except (TypeError, ValueError) as exc:
        logger.warning("export_rejected", fmt=fmt, error=str(exc))
        return dash.no_update
    data = build_export_data(inputs, accounts, project(inputs))
    return dcc.send_string(render_export(data, fmt), export_filename(fmt))


@app.callback(
    Output("export-download", "data"),
    Input("export-csv-btn", "n_clicks"),
    Input("export-json-btn", "n_clicks"),
    *[State(input_id(col.field), "value") for col in INPUT_MODEL.columns],
    State("accounts-table", "data"),
    prevent_initial_call=True,
)
def export_plan(_csv_clicks, _json_clicks, *args):
    *values, rows = args
    fmt = "json" if dash.ctx.triggered_id == "export-json-btn" else "csv"
    return build_download(fmt, values, rows)


def main() -> None:
    configure_logging(settings.log_level, format_json=settings.log_json)
    app.run(host=settings.host, debug=False)


if __name__ == "__main__":
    main()
