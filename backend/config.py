"""Runtime settings, read from environment variables.

Env vars:
  PLANNER_LOG_LEVEL     logging level name (default INFO)
  PLANNER_LOG_JSON      "1"/"true" for JSON log lines
  PLANNER_DEBOUNCE_MS   slider coalescing window in milliseconds (default 150)
  PLANNER_HOST          bind address for the API / Dash app
  PLANNER_PORT          port for the REST API (default 8000)
  PLANNER_CORS_ORIGIN   value of Access-Control-Allow-Origin (default *)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_json: bool = False
    debounce_ms: int = 150
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origin: str = "*"

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    defaults = Settings()
    return Settings(
        log_level=(env.get("PLANNER_LOG_LEVEL") or defaults.log_level).upper(),
        log_json=(env.get("PLANNER_LOG_JSON", "") or "").strip().lower() in TRUE_VALUES,
        debounce_ms=max(0, _env_int(env, "PLANNER_DEBOUNCE_MS", defaults.debounce_ms)),
        host=env.get("PLANNER_HOST") or defaults.host,
        port=_env_int(env, "PLANNER_PORT", defaults.port),
        cors_origin=env.get("PLANNER_CORS_ORIGIN") or defaults.cors_origin,
    )
