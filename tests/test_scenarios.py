import pytest

from backend.engine.scenarios import build_scenarios, compare_scenarios, scenarios_to_frame


def test_build_scenarios_derives_variants(base_inputs):
    baseline, aggressive, conservative = build_scenarios(base_inputs)

    assert baseline.inputs == base_inputs
    assert aggressive.inputs.income_saving_rate == pytest.approx(0.3)
    assert aggressive.inputs.growth_rate == pytest.approx(0.05)
    assert conservative.inputs.income_saving_rate == pytest.approx(0.16)
    assert conservative.inputs.inflation_rate == pytest.approx(0.03)


def test_aggressive_saving_rate_is_capped(base_inputs):
    _, aggressive, _ = build_scenarios(base_inputs.with_changes(income_saving_rate=0.45))

    assert aggressive.inputs.income_saving_rate == pytest.approx(0.5)


def test_compare_scenarios_against_baseline(base_inputs):
    baseline, aggressive, conservative = compare_scenarios(base_inputs)

    assert baseline.difference == 0
    assert baseline.difference_percent == 0
    assert aggressive.final_value > baseline.final_value
    assert conservative.final_value < baseline.final_value
    assert aggressive.difference_percent == pytest.approx(
        (aggressive.final_value - baseline.final_value) / baseline.final_value * 100
    )


def test_compare_scenarios_with_empty_horizon(base_inputs):
    results = compare_scenarios(base_inputs.with_changes(target_age=25))

    assert all(result.final_value == 0 for result in results)
    assert all(result.difference_percent == 0 for result in results)


def test_scenarios_to_frame_is_indexed_by_age(base_inputs):
    frame = scenarios_to_frame(compare_scenarios(base_inputs))

    assert list(frame.columns) == ["Baseline", "Aggressive", "Conservative"]
    assert list(frame.index) == list(range(26, 36))
