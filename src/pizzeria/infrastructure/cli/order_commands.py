"""CLI commands for the Order aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from pizzeria.application.checkout_order import CheckoutOrderHandler
from pizzeria.application.show_order import ShowOrderHandler
from pizzeria.domain.exceptions import DomainException
from pizzeria.domain.notification.notifier import Notifier
from pizzeria.infrastructure.bootstrap import (
    DEFAULT_CHANNELS,
    build_notifier,
    demo_order_source,
    json_order_source,
    message_sink,
    parse_channels,
)

_channels_option = click.option(
    "--channels",
    default=",".join(DEFAULT_CHANNELS),
    show_default=True,
    envvar="PIZZERIA_CHANNELS",
    help="Notification channels, in delivery order.",
)

_file_option = click.option(
    "--file",
    "file_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Order document (JSON).",
)


def _notifier(channels: str) -> Notifier:
    try:
        return build_notifier(parse_channels(channels), message_sink())
    except DomainException as exc:
        raise click.BadParameter(str(exc), param_hint="--channels")


@click.command("show")
@_file_option
def order_show(file_path: Path) -> None:
    """Show the summary of an order file."""
    handler = ShowOrderHandler(order_source=json_order_source(file_path))

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.summary)


@click.command("checkout")
@_file_option
@_channels_option
def order_checkout(file_path: Path, channels: str) -> None:
    """Pay an order file and notify the customer."""
    handler = CheckoutOrderHandler(
        order_source=json_order_source(file_path),
        notifier=_notifier(channels),
    )

    click.echo("Processing checkout...")
    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order status changed to: {dto.status}")
    click.echo("Checkout finished.")
    click.echo()
    click.echo(dto.summary)


@click.command("demo")
@_channels_option
def order_demo(channels: str) -> None:
    """Walk through the built-in order: summary, checkout, summary."""
    notifier = _notifier(channels)
    source = demo_order_source()
    show = ShowOrderHandler(order_source=source)
    checkout = CheckoutOrderHandler(order_source=source, notifier=notifier)

    click.echo("### STEP 1: Order before payment ###")
    click.echo()
    click.echo(show.handle().summary)

    click.echo("### STEP 2: Checkout and notifications ###")
    click.echo()
    click.echo("Processing checkout...")
    dto = checkout.handle()
    click.echo(f"Order status changed to: {dto.status}")
    click.echo("Checkout finished.")
    click.echo()

    click.echo("### STEP 3: Order after payment ###")
    click.echo()
    click.echo(show.handle().summary)
