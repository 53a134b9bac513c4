from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ..data_model import AccountBalance, DashboardMetrics, FinancialInputs, InvestmentOption
from ..config import load_settings
from ..logging_config import get_logger
from .aggregate import aggregate
from .debounce import Debouncer
from .projection import project

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlannerSnapshot:
    inputs: FinancialInputs
    accounts: tuple[AccountBalance, ...]
    projections: tuple[InvestmentOption, ...]
    metrics: DashboardMetrics


def compute_snapshot(inputs: FinancialInputs, accounts: Sequence[AccountBalance]) -> PlannerSnapshot:
    projections = project(inputs)
    return PlannerSnapshot(
        inputs=inputs,
        accounts=tuple(accounts),
        projections=tuple(projections),
        metrics=aggregate(accounts, projections, inputs),
    )


class LivePlanner:
    """UI-side owner of the current inputs and accounts.

    Every edit swaps in a new immutable snapshot and schedules a full recompute
    through a ``Debouncer``, so a slider drag yields one recompute at the end.
    """

    def __init__(
        self,
        inputs: Optional[FinancialInputs] = None,
        accounts: Optional[Sequence[AccountBalance]] = None,
        *,
        wait: Optional[float] = None,
        on_update: Optional[Callable[[PlannerSnapshot], None]] = None,
    ) -> None:
        self.inputs = inputs or FinancialInputs()
        self.accounts: List[AccountBalance] = list(accounts or [])
        self.on_update = on_update
        self.latest: PlannerSnapshot = compute_snapshot(self.inputs, self.accounts)
        self.version = 0
        self._debouncer = Debouncer(self._recompute, load_settings().debounce_seconds if wait is None else wait)

    def _recompute(self, inputs: FinancialInputs, accounts: tuple[AccountBalance, ...]) -> None:
        snapshot = compute_snapshot(inputs, accounts)
        self.latest = snapshot
        self.version += 1
        logger.debug("planner_recomputed", total_balance=snapshot.metrics.total_balance)
        if self.on_update is not None:
            self.on_update(snapshot)

    def _schedule(self) -> None:
        self._debouncer(self.inputs, tuple(self.accounts))

    def update(self, inputs: FinancialInputs, accounts: Sequence[AccountBalance]) -> bool:
        """Replace the whole form state; returns False when nothing changed."""
        accounts = list(accounts)
        if inputs == self.inputs and accounts == self.accounts:
            return False
        self.inputs = inputs
        self.accounts = accounts
        self._schedule()
        return True

    def set_input(self, field: str, value: float) -> None:
        self.inputs = self.inputs.with_changes(**{field: value})
        self._schedule()

    def set_account_balance(self, index: int, balance: float) -> None:
        account = self.accounts[index]
        self.accounts[index] = AccountBalance(account.name, float(balance), account.type, account.color)
        self._schedule()

    def rename_account(self, index: int, name: str) -> None:
        account = self.accounts[index]
        self.accounts[index] = AccountBalance(name, account.balance, account.type, account.color)
        self._schedule()

    def flush(self) -> PlannerSnapshot:
        self._debouncer.flush()
        return self.latest

    def close(self) -> None:
        self._debouncer.cancel()
