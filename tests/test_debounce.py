import threading

import pytest

from backend.data_model import RiskLevel
from backend.engine.debounce import Debouncer
from backend.engine.live import LivePlanner, compute_snapshot


def test_flush_runs_only_the_latest_call():
    calls = []
    debouncer = Debouncer(lambda value: calls.append(value), wait=60)

    debouncer(1)
    debouncer(2)
    debouncer(3)

    assert calls == []
    assert debouncer.pending
    assert debouncer.flush() is True
    assert calls == [3]
    assert debouncer.flush() is False


def test_timer_fires_once_after_quiet_period():
    fired = threading.Event()
    calls = []

    def record(value):
        calls.append(value)
        fired.set()

    debouncer = Debouncer(record, wait=0.05)
    for value in range(5):
        debouncer(value)

    assert fired.wait(timeout=5)
    assert calls == [4]


def test_cancel_drops_pending_call():
    calls = []
    debouncer = Debouncer(calls.append, wait=60)

    debouncer("x")
    debouncer.cancel()

    assert not debouncer.pending
    assert debouncer.flush() is False
    assert calls == []


def test_zero_wait_calls_immediately():
    calls = []
    debouncer = Debouncer(calls.append, wait=0)

    debouncer("now")

    assert calls == ["now"]


def test_live_planner_coalesces_slider_edits(base_inputs, sample_accounts):
    updates = []
    planner = LivePlanner(base_inputs, sample_accounts, wait=60, on_update=updates.append)

    for rate in (0.01, 0.02, 0.03, 0.04):
        planner.set_input("inflation_rate", rate)
    snapshot = planner.flush()

    assert len(updates) == 1
    assert snapshot.inputs.inflation_rate == 0.04
    assert snapshot == compute_snapshot(base_inputs.with_changes(inflation_rate=0.04), sample_accounts)
    # edits create new snapshots; the original inputs are untouched
    assert base_inputs.inflation_rate == 0.02


def test_live_planner_account_edits(base_inputs, sample_accounts):
    planner = LivePlanner(base_inputs, sample_accounts, wait=60)
    assert planner.latest.metrics.risk_level is RiskLevel.MEDIUM

    planner.set_account_balance(1, 70000)
    planner.rename_account(0, "Marcus HYSA")
    snapshot = planner.flush()
    planner.close()

    assert snapshot.metrics.risk_level is RiskLevel.HIGH
    assert snapshot.accounts[0].name == "Marcus HYSA"
    assert sample_accounts[1].balance == 7000


def test_live_planner_rejects_unknown_field(base_inputs):
    planner = LivePlanner(base_inputs, wait=60)

    with pytest.raises(KeyError):
        planner.set_input("bogus", 1.0)


def test_live_planner_update_replaces_form_state(base_inputs, sample_accounts):
    planner = LivePlanner(base_inputs, sample_accounts, wait=60)
    assert planner.version == 0

    assert planner.update(base_inputs, sample_accounts) is False
    assert planner.update(base_inputs.with_changes(goal_amount=21700), sample_accounts[:2]) is True
    assert planner.update(base_inputs.with_changes(goal_amount=43400), sample_accounts) is True
    assert planner.version == 0

    snapshot = planner.flush()
    planner.close()

    assert planner.version == 1
    assert snapshot.inputs.goal_amount == 43400
    assert snapshot.metrics.goal_progress == pytest.approx(50.0)
