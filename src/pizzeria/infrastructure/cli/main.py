import click

from pizzeria.infrastructure.cli.order_commands import (
    order_checkout,
    order_demo,
    order_show,
)
from pizzeria.infrastructure.logging_config import setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Pizzeria — order summaries and checkout notifications."""
    setup_logging(verbose)


# Register subcommands
cli.add_command(order_checkout)
cli.add_command(order_demo)
cli.add_command(order_show)
