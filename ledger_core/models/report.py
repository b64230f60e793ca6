"""Consolidated balance report model."""

from dataclasses import dataclass, field
from decimal import Decimal

from ledger_core.models.enums import AccountKind


@dataclass(frozen=True)
class KindTotals:
    """Account count and summed balance for one account kind."""

    count: int
    total_balance: Decimal


@dataclass(frozen=True)
class ConsolidationReport:
    """Per-kind and overall totals taken from one account snapshot."""

    by_kind: dict[AccountKind, KindTotals] = field(default_factory=dict)
    total_count: int = 0
    total_balance: Decimal = Decimal("0")

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0
