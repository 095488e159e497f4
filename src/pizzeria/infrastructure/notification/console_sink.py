"""MessageSink that stands in for real channels by echoing to the console."""

from __future__ import annotations

import click

from pizzeria.domain.notification.notifier import MessageSink


class ConsoleMessageSink(MessageSink):

    def deliver(self, channel: str, address: str, message: str) -> None:
        click.echo(f"[{channel.upper()} SENT to {address}] -> {message}")
