"""
Data model for movies, rentals and computed charges
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Tuple, Union


class Category(Enum):
    """Pricing categories a movie can belong to"""
    REGULAR = "regular"
    CHILDREN = "children"
    NEW_RELEASE = "new-release"


@dataclass(frozen=True)
class Movie:
    """
    A catalog entry

    Attributes:
        title: title shown on the statement
        category: pricing category, or a raw code string from catalog data
    """
    title: str
    category: Union[Category, str]


@dataclass(frozen=True)
class Rental:
    """
    A single rental, pointing at a movie by its catalog key

    Attributes:
        movie_id: catalog key of the rented movie
        days: rental duration in days
    """
    movie_id: str
    days: int


@dataclass(frozen=True)
class Customer:
    """A customer and their rentals, in statement order"""
    name: str
    rentals: Tuple[Rental, ...] = ()


@dataclass(frozen=True)
class Charge:
    """Amount owed and loyalty points earned for one rental"""
    amount: Decimal
    points: int


@dataclass(frozen=True)
class RentalSummary:
    """One statement line"""
    title: str
    amount: Decimal
