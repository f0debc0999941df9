"""
Pricing rules and statement layout configuration
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENTS = Decimal("0.01")


def to_cents(amount: Union[Decimal, int, float]) -> Decimal:
    """Quantize a money value to two decimal places"""
    # floats go through str so 1.005 stays 1.005, not 1.00499...
    return Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class TieredRate:
    """
    Flat base price up to a day threshold, then a per-day extra rate

    Attributes:
        base: price charged for rentals up to threshold_days
        threshold_days: days covered by the base price
        extra_rate: price per day beyond threshold_days
    """
    base: Decimal
    threshold_days: int
    extra_rate: Decimal


@dataclass(frozen=True)
class LinearRate:
    """
    Per-day price with bonus points past a day threshold

    Attributes:
        rate: price per rental day
        threshold_days: days after which bonus points are earned
        bonus_points: extra points for rentals longer than threshold_days
    """
    rate: Decimal
    threshold_days: int
    bonus_points: int


@dataclass(frozen=True)
class PricingConfig:
    """Rule parameters for every category"""
    regular: TieredRate
    children: TieredRate
    new_release: LinearRate
    points_per_rental: int = 1


@dataclass(frozen=True)
class StatementLayout:
    """Column widths of a statement line"""
    label_width: int = 30
    amount_width: int = 8
    separator_char: str = "-"
    ellipsis: str = "..."

    @property
    def separator_width(self) -> int:
        return self.label_width + self.amount_width


DEFAULT_PRICING = PricingConfig(
    regular=TieredRate(base=Decimal("2.00"), threshold_days=3, extra_rate=Decimal("1.50")),
    children=TieredRate(base=Decimal("1.50"), threshold_days=3, extra_rate=Decimal("1.50")),
    new_release=LinearRate(rate=Decimal("3.00"), threshold_days=2, bonus_points=1),
)

DEFAULT_LAYOUT = StatementLayout()
