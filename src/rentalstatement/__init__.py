__version__ = "0.1.0"

# Package metadata
__description__ = "Movie rental pricing and customer statement rendering"

# Public API
from .models import Category, Movie, Rental, Customer, Charge, RentalSummary
from .config import (
    PricingConfig,
    TieredRate,
    LinearRate,
    StatementLayout,
    DEFAULT_PRICING,
    DEFAULT_LAYOUT
)
from .pricing import PricingEngine, charge
from .statement import StatementRenderer, StatementSummary, format_line, render_statement
from .exceptions import (
    RentalStatementError,
    InvalidInputError,
    MovieNotFoundError
)

__all__ = [
    # Version
    "__version__",

    # Main classes
    "PricingEngine",
    "StatementRenderer",

    # Functions
    "charge",
    "format_line",
    "render_statement",

    # Configuration
    "PricingConfig",
    "TieredRate",
    "LinearRate",
    "StatementLayout",
    "DEFAULT_PRICING",
    "DEFAULT_LAYOUT",

    # Data classes
    "Category",
    "Movie",
    "Rental",
    "Customer",
    "Charge",
    "RentalSummary",
    "StatementSummary",

    # Exceptions
    "RentalStatementError",
    "InvalidInputError",
    "MovieNotFoundError"
]
