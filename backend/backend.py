"""REST backend for the financial-planning calculator."""

from __future__ import annotations

import os
import sys
from typing import Any, Dict, List, Tuple

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from flask import Flask, Response, jsonify, request

from backend.config import load_settings
from backend.data_model import (
    STRATEGIES,
    AccountBalance,
    AccountTableModel,
    FinancialInputs,
    InputFormModel,
    accounts_from_rows,
    inputs_from_payload,
)
from backend.engine.aggregate import (
    aggregate,
    calculate_account_progress,
    calculate_recommended_savings,
    plan_summary,
)
from backend.engine.export import (
    EXPORT_FORMATS,
    MIME_TYPES,
    _sanitize_json_compat,
    build_export_data,
    export_filename,
    render_export,
)
from backend.engine.kpis import build_kpis
from backend.engine.projection import project, projection_horizon
from backend.engine.scenarios import compare_scenarios
from backend.logging_config import configure_logging, get_logger

settings = load_settings()
logger = get_logger(__name__)

app = Flask(__name__)

ACCOUNT_MODEL = AccountTableModel()
INPUT_MODEL = InputFormModel()


class PayloadError(ValueError):
    """Request body could not be turned into planner inputs."""


def _model_payload(model: AccountTableModel | InputFormModel) -> Dict[str, Any]:
    defaults = model.create_default_df().to_dict("records")
    return {
        "name": model.name,
        "columns": [col.to_payload() for col in model.columns],
        "defaults": _sanitize_json_compat(defaults),
    }


def _parse_request() -> Tuple[FinancialInputs, List[AccountBalance]]:
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        raise PayloadError("Request body must be a JSON object.")
    raw_inputs = payload.get("inputs", payload)
    raw_accounts = payload.get("accounts") or []
    if not isinstance(raw_inputs, dict) or not isinstance(raw_accounts, list):
        raise PayloadError("Expected 'inputs' object and 'accounts' list.")
    try:
        return inputs_from_payload(raw_inputs), accounts_from_rows(raw_accounts)
    except (TypeError, ValueError) as exc:
        raise PayloadError(str(exc)) from exc


@app.errorhandler(PayloadError)
def handle_payload_error(exc: PayloadError):
    logger.warning("invalid_payload", path=request.path, error=str(exc))
    return jsonify({"error": str(exc)}), 400


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = settings.cors_origin
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/schema")
def get_schema():
    return jsonify(
        {
            "inputDefaults": FinancialInputs().to_payload(),
            "inputs": _model_payload(INPUT_MODEL),
            "accounts": _model_payload(ACCOUNT_MODEL),
            "strategies": [{"name": s.name, "rate": s.rate, "color": s.color} for s in STRATEGIES],
            "exportFormats": list(EXPORT_FORMATS),
        }
    )


@app.post("/api/projections")
def projections_endpoint():
    inputs, _ = _parse_request()
    options = project(inputs)
    return jsonify(
        _sanitize_json_compat(
            {
                "horizon": projection_horizon(inputs),
                "projections": [option.to_payload() for option in options],
            }
        )
    )


@app.post("/api/metrics")
def metrics_endpoint():
    inputs, accounts = _parse_request()
    metrics = aggregate(accounts, project(inputs), inputs)
    return jsonify(_sanitize_json_compat(metrics.to_payload()))


@app.post("/api/dashboard")
def dashboard_endpoint():
    inputs, accounts = _parse_request()
    options = project(inputs)
    metrics = aggregate(accounts, options, inputs)
    payload = {
        "inputs": inputs.to_payload(),
        "projections": [option.to_payload() for option in options],
        "metrics": metrics.to_payload(),
        "kpis": [kpi.to_payload() for kpi in build_kpis(metrics, inputs)],
        "summary": plan_summary(inputs, accounts, options).to_payload(),
        "recommendations": calculate_recommended_savings(inputs).to_payload(),
        "progress": calculate_account_progress(accounts, inputs.goal_amount).to_payload(),
    }
    return jsonify(_sanitize_json_compat(payload))


@app.post("/api/scenarios")
def scenarios_endpoint():
    inputs, _ = _parse_request()
    results = compare_scenarios(inputs)
    return jsonify(_sanitize_json_compat({"scenarios": [result.to_payload() for result in results]}))


@app.post("/api/export/<fmt>")
def export_endpoint(fmt: str):
    fmt = fmt.lower()
    if fmt not in EXPORT_FORMATS:
        return jsonify({"error": f"Unknown export format '{fmt}'."}), 404
    inputs, accounts = _parse_request()
    data = build_export_data(inputs, accounts, project(inputs))
    body = render_export(data, fmt)
    logger.info("plan_exported", format=fmt, accounts=len(accounts))
    return Response(
        body,
        mimetype=MIME_TYPES[fmt],
        headers={"Content-Disposition": f"attachment; filename={export_filename(fmt)}"},
    )


def main() -> None:
    configure_logging(settings.log_level, format_json=settings.log_json)
    logger.info("api_starting", host=settings.host, port=settings.port)
    app.run(host=settings.host, port=settings.port, debug=False)


if __name__ == "__main__":
    main()
