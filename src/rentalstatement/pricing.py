"""
Per-category rental pricing
"""

import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union

from .config import DEFAULT_PRICING, LinearRate, PricingConfig, TieredRate, to_cents
from .exceptions import InvalidInputError
from .models import Category, Charge, Movie

RuleFunction = Callable[[int], Charge]


class PricingEngine:
    """
    Maps a movie category and a rental duration to a charge

    Each category has one rule function in a read-only dispatch table.
    Unknown categories are billed at zero and reported through the logger.
    """

    def __init__(
        self,
        config: PricingConfig = DEFAULT_PRICING,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the pricing engine
        Args:
            config: rule parameters (uses DEFAULT_PRICING if omitted)
            logger: receives the unknown-category warning (module logger if None)
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self._rules: Mapping[Category, RuleFunction] = MappingProxyType({
            Category.REGULAR: self._tiered_rule(config.regular),
            Category.CHILDREN: self._tiered_rule(config.children),
            Category.NEW_RELEASE: self._linear_rule(config.new_release),
        })

    @property
    def rules(self) -> Mapping[Category, RuleFunction]:
        """Read-only view of the category dispatch table"""
        return self._rules

    def charge(self, category: Union[Category, str], days: int) -> Charge:
        """
        Compute the charge for renting a movie of the given category
        Raises InvalidInputError if days is not a positive integer
        """
        self._validate_days(days)

        rule = self._rules.get(self._resolve_category(category))
        if rule is None:
            self.logger.warning(f'Unknown movie category: "{category}"')
            return Charge(amount=to_cents(0), points=self.config.points_per_rental)

        return rule(days)

    def charge_movie(self, movie: Movie, days: int) -> Charge:
        """Compute the charge for renting the given movie"""
        return self.charge(movie.category, days)

    @staticmethod
    def _validate_days(days) -> None:
        # bool is an int subclass but never a valid duration
        if isinstance(days, bool) or not isinstance(days, int) or days < 1:
            raise InvalidInputError(days)

    @staticmethod
    def _resolve_category(category) -> Optional[Category]:
        """Accept a Category or its string value; None when unrecognized"""
        if isinstance(category, Category):
            return category
        try:
            return Category(category)
        except (ValueError, TypeError):
            return None

    def _tiered_rule(self, tier: TieredRate) -> RuleFunction:
        points = self.config.points_per_rental

        def rule(days: int) -> Charge:
            amount = tier.base
            if days > tier.threshold_days:
                amount += (days - tier.threshold_days) * tier.extra_rate
            return Charge(amount=to_cents(amount), points=points)

        return rule

    def _linear_rule(self, tier: LinearRate) -> RuleFunction:
        points = self.config.points_per_rental

        def rule(days: int) -> Charge:
            amount = days * tier.rate
            earned = points + tier.bonus_points if days > tier.threshold_days else points
            return Charge(amount=to_cents(amount), points=earned)

        return rule


_default_engine = PricingEngine()


def charge(category: Union[Category, str], days: int) -> Charge:
    """Compute a charge with the default pricing rules"""
    return _default_engine.charge(category, days)
