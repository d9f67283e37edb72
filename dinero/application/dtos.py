from dataclasses import dataclass, field
from datetime import UTC, datetime

from dinero.domain.money import Money
from dinero.domain.records import MoneyRecord


@dataclass
class NormalizationReport:
    run_id: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    status: str = "PENDING"  # SUCCESS | PARTIAL | ERROR | EMPTY

    # Counters
    total_records: int = 0
    normalized_count: int = 0
    error_count: int = 0

    # Output
    records: list[MoneyRecord] = field(default_factory=list)
    totals: dict[str, Money] = field(default_factory=dict)

    # Errors
    errors: list[dict] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return self.status not in ("SUCCESS", "EMPTY")

    def add_to_total(self, money: Money) -> None:
        current = self.totals.get(money.currency, Money.zero(money.currency))
        self.totals[money.currency] = current + money

    def summary(self, digits: int = 2) -> dict:
        return {
            "run_id": self.run_id,
            "timestamp": self.timestamp.strftime("%Y-%m-%d %H:%M:%S UTC"),
            "status": self.status,
            "registros_totales": self.total_records,
            "registros_normalizados": self.normalized_count,
            "registros_con_error": self.error_count,
            "totales": {
                currency: total.to_fixed(digits)
                for currency, total in sorted(self.totals.items())
            },
        }
