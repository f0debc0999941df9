"""
Sample catalog and customer used by the command line demo
"""

from typing import Dict

from .models import Category, Customer, Movie, Rental


def sample_catalog() -> Dict[str, Movie]:
    """Four movies covering every pricing category"""
    return {
        "F001": Movie("Ran", Category.REGULAR),
        "F002": Movie("Trois Couleurs: Bleu", Category.REGULAR),
        "F003": Movie("Sunes Sommar", Category.CHILDREN),
        "F004": Movie("Yara", Category.NEW_RELEASE),
    }


def sample_customer(name: str = "martin") -> Customer:
    return Customer(
        name=name,
        rentals=(
            Rental("F001", 3),
            Rental("F002", 1),
            Rental("F003", 1),
            Rental("F004", 1),
        )
    )
