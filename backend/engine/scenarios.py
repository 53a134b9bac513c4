from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import pandas as pd

from ..data_model import FinancialInputs, ProjectionResult
from .aggregate import find_best_strategy
from .projection import project

MAX_AGGRESSIVE_SAVING_RATE = 0.5


@dataclass(frozen=True)
class Scenario:
    id: str
    name: str
    inputs: FinancialInputs
    color: str


@dataclass(frozen=True)
class ScenarioResult:
    scenario: Scenario
    projections: Tuple[ProjectionResult, ...]
    final_value: float
    difference: float
    difference_percent: float

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": self.scenario.id,
            "name": self.scenario.name,
            "color": self.scenario.color,
            "inputs": self.scenario.inputs.to_payload(),
            "projections": [row.to_payload() for row in self.projections],
            "finalValue": self.final_value,
            "difference": self.difference,
            "differencePercent": self.difference_percent,
        }


def build_scenarios(base: FinancialInputs) -> List[Scenario]:
    return [
        Scenario("baseline", "Baseline", base, "#2F81F7"),
        Scenario(
            "aggressive",
            "Aggressive",
            base.with_changes(
                income_saving_rate=min(base.income_saving_rate * 1.5, MAX_AGGRESSIVE_SAVING_RATE),
                growth_rate=base.growth_rate + 0.02,
            ),
            "#22C55E",
        ),
        Scenario(
            "conservative",
            "Conservative",
            base.with_changes(
                income_saving_rate=base.income_saving_rate * 0.8,
                inflation_rate=base.inflation_rate + 0.01,
            ),
            "#F59E0B",
        ),
    ]


def compare_scenarios(base: FinancialInputs) -> List[ScenarioResult]:
    """Project each scenario and compare the headline strategy's final value against the baseline."""
    scenarios = build_scenarios(base)
    series = []
    for scenario in scenarios:
        best = find_best_strategy(project(scenario.inputs))
        series.append(best.projections if best is not None else ())

    finals = [rows[-1].value if rows else 0.0 for rows in series]
    baseline_final = finals[0]

    results: List[ScenarioResult] = []
    for scenario, rows, final in zip(scenarios, series, finals):
        diff = final - baseline_final
        results.append(
            ScenarioResult(
                scenario=scenario,
                projections=rows,
                final_value=final,
                difference=diff,
                difference_percent=diff / baseline_final * 100 if baseline_final > 0 else 0.0,
            )
        )
    return results


def scenarios_to_frame(results: List[ScenarioResult]) -> pd.DataFrame:
    """Wide frame indexed by age, one column of values per scenario name."""
    frame = pd.DataFrame(
        {result.scenario.name: pd.Series({row.age: row.value for row in result.projections}) for result in results}
    )
    frame.index.name = "Age"
    return frame.sort_index()
