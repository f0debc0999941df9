"""
Command Line Interface for rentalstatement
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .exceptions import RentalStatementError
from .sample import sample_catalog, sample_customer
from .statement import StatementRenderer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("rentalstatement")

app = typer.Typer(
    name="rentalstatement",
    help="Print a movie rental statement for the sample customer",
)
console = Console()


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        from . import __version__
        console.print(f"rentalstatement version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    name: str = typer.Option(
        "martin",
        "--name",
        "-n",
        help="Customer name shown in the statement header"
    ),
    table: bool = typer.Option(
        False,
        "--table",
        help="Show the statement as a table instead of plain text"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information"
    ),
) -> None:

    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")

    try:
        renderer = StatementRenderer()
        customer = sample_customer(name)
        catalog = sample_catalog()

        if table:
            console.print(renderer.render_table(customer, catalog))
        else:
            typer.echo(renderer.render(customer, catalog), nl=False)

    except RentalStatementError as e:
        logger.error(f"Statement error: {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
