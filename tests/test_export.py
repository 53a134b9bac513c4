import csv
import datetime
import io
import json
import math

import pytest

from backend.engine.export import (
    _sanitize_json_compat,
    build_export_data,
    export_filename,
    export_to_csv,
    export_to_json,
    load_export_json,
    render_export,
)
from backend.engine.projection import project

STAMP = datetime.datetime(2024, 5, 1, 12, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture
def export_data(base_inputs, sample_accounts):
    return build_export_data(base_inputs, sample_accounts, project(base_inputs), generated_at=STAMP)


def test_sanitize_json_compat_replaces_special_numbers():
    payload = {
        "float": math.nan,
        "list": [1, float("inf"), -float("inf")],
        "nested": {"value": math.nan},
    }

    assert _sanitize_json_compat(payload) == {
        "float": None,
        "list": [1, None, None],
        "nested": {"value": None},
    }


def test_json_export_round_trips(export_data):
    text = export_to_json(export_data)

    assert load_export_json(text) == export_data


def test_json_export_uses_camel_case_shapes(export_data):
    raw = json.loads(export_to_json(export_data))

    assert raw["generatedAt"] == "2024-05-01T12:00:00+00:00"
    assert raw["inputs"]["goalAmount"] == 250000
    assert raw["accounts"][1] == {"name": "Roth IRA (Stash)", "balance": 7000, "type": "retirement", "color": "#8B5CF6"}
    assert set(raw["projections"][0]["projections"][0]) == {"year", "age", "value", "contributions", "interest"}
    assert raw["summary"]["onTrack"] is False


def test_csv_export_sections(export_data):
    rows = list(csv.reader(io.StringIO(export_to_csv(export_data))))

    assert rows[0] == ["Financial Planning Export"]
    assert ["Income Saving Rate", "20.0%"] in rows
    assert ["Account Name", "Balance", "Type"] in rows
    assert ["CD (Credit Union)", "5000", "savings"] in rows
    header = rows.index(["Investment Type", "Year 1", "Year 5", "Year 10", "Final Year"])
    index_row = rows[header + 3]
    assert index_row[0] == "Index Fund ETF"
    assert index_row[1] == f"{export_data.projections[2].projections[0].value:.2f}"
    assert index_row[3] == index_row[4]
    assert rows[-1] == ["On Track", "No"]


def test_csv_export_pads_short_horizons(base_inputs, sample_accounts):
    inputs = base_inputs.with_changes(target_age=28)
    data = build_export_data(inputs, sample_accounts, project(inputs), generated_at=STAMP)

    rows = list(csv.reader(io.StringIO(export_to_csv(data))))

    savings_row = next(row for row in rows if row and row[0] == "High Yield Savings")
    assert savings_row[2] == "0"
    assert savings_row[3] == "0"
    assert savings_row[4] != "0"


def test_export_filename_and_unknown_format(export_data):
    assert export_filename("csv", datetime.date(2024, 5, 1)) == "financial-plan-2024-05-01.csv"
    with pytest.raises(ValueError):
        export_filename("xlsx")
    with pytest.raises(ValueError):
        render_export(export_data, "xml")
