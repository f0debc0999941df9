"""
Customer statement rendering, as plain text or a rich table
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Mapping, Optional, Tuple

from rich.table import Table

from .config import DEFAULT_LAYOUT, StatementLayout, to_cents
from .exceptions import MovieNotFoundError
from .models import Customer, Movie, RentalSummary
from .pricing import PricingEngine

logger = logging.getLogger(__name__)

AMOUNT_OWED_LABEL = "Amount owed is"


@dataclass(frozen=True)
class StatementSummary:
    """
    Priced rentals of one customer

    Attributes:
        customer_name: name shown in the statement header
        lines: one summary per rental, in rental order
        total_amount: sum of the line amounts
        total_points: frequent renter points earned
    """
    customer_name: str
    lines: Tuple[RentalSummary, ...]
    total_amount: Decimal
    total_points: int


class StatementRenderer:
    """
    Builds a customer's billing statement from their rentals and a movie catalog
    """

    def __init__(
        self,
        engine: Optional[PricingEngine] = None,
        layout: StatementLayout = DEFAULT_LAYOUT
    ):
        self.engine = engine or PricingEngine()
        self.layout = layout

    def summarize(self, customer: Customer, catalog: Mapping[str, Movie]) -> StatementSummary:
        """
        Price every rental of the customer
        Raises MovieNotFoundError or InvalidInputError, aborting the whole statement
        """
        logger.debug(f"Pricing {len(customer.rentals)} rentals for {customer.name}")

        total_amount = to_cents(0)
        total_points = 0
        lines: List[RentalSummary] = []

        for rental in customer.rentals:
            movie = catalog.get(rental.movie_id)
            if movie is None:
                raise MovieNotFoundError(rental.movie_id)

            charge = self.engine.charge_movie(movie, rental.days)

            total_amount += charge.amount
            total_points += charge.points
            lines.append(RentalSummary(title=movie.title, amount=charge.amount))

        return StatementSummary(
            customer_name=customer.name,
            lines=tuple(lines),
            total_amount=total_amount,
            total_points=total_points
        )

    def render(self, customer: Customer, catalog: Mapping[str, Movie]) -> str:
        """
        Render the plain text statement, one line per rental plus totals
        """
        summary = self.summarize(customer, catalog)
        separator = self.format_line("")

        output_lines = [
            f"Rental Record for {summary.customer_name}",
            separator,
            *(self.format_line(line.title, line.amount) for line in summary.lines),
            separator,
            self.format_line(AMOUNT_OWED_LABEL, summary.total_amount),
            f"Earned {summary.total_points} frequent renter points",
        ]

        return "\n".join(output_lines) + "\n"

    def render_table(self, customer: Customer, catalog: Mapping[str, Movie]) -> Table:
        """
        Render the statement as a Rich table for terminal display
        """
        summary = self.summarize(customer, catalog)

        table = Table(
            title=f"Rental Record for {summary.customer_name}",
            caption=f"Earned {summary.total_points} frequent renter points",
            show_footer=True,
            min_width=self.layout.separator_width
        )
        table.add_column("Title", footer=AMOUNT_OWED_LABEL, max_width=self.layout.label_width)
        table.add_column(
            "Amount",
            footer=self._format_amount(summary.total_amount),
            justify="right",
            style="green"
        )

        for line in summary.lines:
            table.add_row(line.title, self._format_amount(line.amount))

        return table

    def format_line(self, label: str, amount=Decimal(0)) -> str:
        """
        Format a label and an amount into fixed-width columns
        A blank label produces a separator spanning both columns
        """
        layout = self.layout
        if not label.strip():
            return layout.separator_char * layout.separator_width

        if len(label) > layout.label_width:
            label = label[:layout.label_width - len(layout.ellipsis)] + layout.ellipsis

        return label.ljust(layout.label_width) + self._format_amount(amount).rjust(layout.amount_width)

    @staticmethod
    def _format_amount(amount) -> str:
        return f"{to_cents(amount):.2f}"


def format_line(label: str, amount=Decimal(0)) -> str:
    """Format a statement line with the default layout"""
    return StatementRenderer().format_line(label, amount)


def render_statement(customer: Customer, catalog: Mapping[str, Movie]) -> str:
    """Render a plain text statement with the default pricing and layout"""
    return StatementRenderer().render(customer, catalog)
