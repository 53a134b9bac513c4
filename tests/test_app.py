import dash
import pytest
from dash.exceptions import PreventUpdate

import app as planner_app
from components.sidebar import ACCOUNT_MODEL, INPUT_MODEL


@pytest.fixture
def planner(monkeypatch):
    monkeypatch.setattr(planner_app.PLANNER._debouncer, "wait", 60)
    yield planner_app.PLANNER
    planner_app.PLANNER.flush()


def _form(**overrides):
    values = [overrides.get(col.field, col.default) for col in INPUT_MODEL.columns]
    rows = ACCOUNT_MODEL.create_default_df().to_dict("records")
    return values, rows


def test_slider_drag_recomputes_once(planner):
    planner.flush()
    before = planner.version

    for rate in (0.10, 0.11, 0.12, 0.13, 0.14):
        values, rows = _form(taxRate=rate)
        assert planner_app.stage_edits(*values, rows) is None

    assert planner.version == before
    snapshot = planner.flush()

    assert planner.version == before + 1
    assert snapshot.inputs.tax_rate == 0.14


def test_refresh_renders_new_snapshot_once(planner):
    values, rows = _form(goalAmount=123000)
    planner_app.stage_edits(*values, rows)
    planner.flush()

    *children, version = planner_app.refresh_dashboard(1, None, None)

    assert version == planner.version
    assert len(children) == 5
    assert [trace.name for trace in children[3].data] == ["Baseline", "Aggressive", "Conservative"]
    with pytest.raises(PreventUpdate):
        planner_app.refresh_dashboard(2, None, version)


def test_invalid_form_shows_alert_and_keeps_charts(planner):
    values, rows = _form(goalAmount="lots")

    error = planner_app.stage_edits(*values, rows)
    outputs = planner_app.refresh_dashboard(3, error, 7)

    assert "must be a number" in error or "could not convert" in error
    assert outputs[:4] == (dash.no_update,) * 4
    assert outputs[4].color == "danger"
    assert outputs[5] == error
    with pytest.raises(PreventUpdate):
        planner_app.refresh_dashboard(4, error, error)


def test_download_renders_requested_format():
    values, rows = _form()

    json_download = planner_app.build_download("json", values, rows)
    csv_download = planner_app.build_download("csv", values, rows)

    assert json_download["filename"].endswith(".json")
    assert '"goalAmount"' in json_download["content"]
    assert csv_download["filename"].endswith(".csv")
    assert "INPUTS" in csv_download["content"]


def test_download_skips_invalid_form():
    values, rows = _form(currentAge=float("inf"))

    assert planner_app.build_download("csv", values, rows) is dash.no_update
