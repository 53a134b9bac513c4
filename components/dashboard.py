# components/dashboard.py
from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import dcc, html

from backend.data_model import AccountBalance, InvestmentOption
from backend.engine.kpis import Kpi
from backend.engine.projection import projections_to_frame
from backend.engine.scenarios import ScenarioResult, scenarios_to_frame

FIGURE_LAYOUT = dict(
    template="plotly_dark",
    margin=dict(l=40, r=20, t=40, b=40),
    legend=dict(orientation="h", y=-0.2),
)


def kpi_cards(kpis: Sequence[Kpi]):
    cards = [
        dbc.Col(
            dbc.Card(
                dbc.CardBody(
                    [
                        html.Small(kpi.label, className="text-muted"),
                        html.H4(kpi.display(), style={"color": kpi.color}),
                    ]
                ),
                id=f"kpi-{kpi.id}",
            ),
            md=2,
        )
        for kpi in kpis
    ]
    return dbc.Row(cards, className="g-2")


def projection_figure(options: Sequence[InvestmentOption]) -> go.Figure:
    """Real (inflation-adjusted) value by age, one line per strategy."""
    frame = projections_to_frame(options)
    fig = go.Figure()
    for option in options:
        rows = frame[frame["Strategy"] == option.name]
        fig.add_trace(
            go.Scatter(
                x=rows["Age"],
                y=rows["Value"],
                mode="lines",
                name=option.name,
                line=dict(color=option.color),
            )
        )
    fig.update_layout(title="Projected Value (today's dollars)", xaxis_title="Age", yaxis_title="USD", **FIGURE_LAYOUT)
    return fig


def accounts_figure(accounts: Sequence[AccountBalance]) -> go.Figure:
    fig = go.Figure(
        go.Pie(
            labels=[a.name for a in accounts],
            values=[a.balance for a in accounts],
            marker=dict(colors=[a.display_color() for a in accounts]),
            hole=0.5,
        )
    )
    fig.update_layout(title="Current Allocation", **FIGURE_LAYOUT)
    return fig


def scenario_figure(results: Sequence[ScenarioResult]) -> go.Figure:
    frame = scenarios_to_frame(list(results))
    fig = go.Figure()
    for result in results:
        name = result.scenario.name
        fig.add_trace(
            go.Scatter(x=frame.index, y=frame[name], mode="lines", name=name, line=dict(color=result.scenario.color))
        )
    fig.update_layout(title="Scenario Comparison", xaxis_title="Age", yaxis_title="USD", **FIGURE_LAYOUT)
    return fig


def build_dashboard():
    return html.Div(
        [
            html.Div(id="kpi-strip"),
            dbc.Row(
                [
                    dbc.Col(dcc.Graph(id="projection-chart"), md=8),
                    dbc.Col(dcc.Graph(id="accounts-chart"), md=4),
                ],
                className="mt-3",
            ),
            dcc.Graph(id="scenario-chart", className="mt-3"),
            html.Div(id="plan-status", className="mt-2"),
        ]
    )


__all__ = [
    "accounts_figure",
    "build_dashboard",
    "kpi_cards",
    "projection_figure",
    "scenario_figure",
]
