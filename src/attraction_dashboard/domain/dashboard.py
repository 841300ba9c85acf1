"""Domain models for dashboard listings and summaries."""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

_TWO_PLACES = Decimal("0.01")


def conversion_rate(sales_made: int, qrcodes_delivered: int) -> float:
    """Return sales as a percentage of delivered codes, rounded to 2 places."""
    if not qrcodes_delivered:
        return 0.0
    rate = Decimal(sales_made) * 100 / Decimal(qrcodes_delivered)
    return float(rate.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class DashboardRow:
    """A daily record joined with its attraction name."""

    id: int
    date: date
    attraction_name: str
    attraction_id: int
    qrcodes_delivered: int
    sales_made: int

    @property
    def conversion_rate(self) -> float:
        return conversion_rate(self.sales_made, self.qrcodes_delivered)


@dataclass(frozen=True)
class SummaryTotals:
    """Raw aggregates over the filtered daily records."""

    total_days: int
    total_qrcodes: int
    total_sales: int


@dataclass(frozen=True)
class DailySummary:
    """Aggregates with the conversion rate derived from the sums."""

    total_days: int
    total_qrcodes: int
    total_sales: int
    avg_conversion_rate: float

    @classmethod
    def from_totals(cls, totals: SummaryTotals) -> "DailySummary":
        return cls(
            total_days=totals.total_days,
            total_qrcodes=totals.total_qrcodes,
            total_sales=totals.total_sales,
            avg_conversion_rate=conversion_rate(
                totals.total_sales, totals.total_qrcodes
            ),
        )
