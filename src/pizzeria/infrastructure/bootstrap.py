"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pizzeria.domain.exceptions import ValidationError
from pizzeria.domain.notification.channels import NOTIFIERS_BY_CHANNEL
from pizzeria.domain.notification.notifier import BaseNotifier, MessageSink, Notifier
from pizzeria.infrastructure.demo import demo_order
from pizzeria.infrastructure.notification.console_sink import ConsoleMessageSink
from pizzeria.infrastructure.persistence.in_memory_order_source import (
    InMemoryOrderSource,
)
from pizzeria.infrastructure.persistence.json_order_source import JsonOrderSource

DEFAULT_CHANNELS = ("email", "sms", "whatsapp")


def parse_channels(raw: str) -> list[str]:
    """Parse 'email,sms' into ['email', 'sms'], rejecting unknown names."""
    channels = [part.strip().lower() for part in raw.split(",") if part.strip()]
    unknown = [c for c in channels if c not in NOTIFIERS_BY_CHANNEL]
    if unknown:
        raise ValidationError(
            f"Unknown notification channel(s): {', '.join(unknown)}. "
            f"Expected any of: {', '.join(NOTIFIERS_BY_CHANNEL)}"
        )
    return channels


def build_notifier(channels: Sequence[str], sink: MessageSink) -> Notifier:
    """Compose a notifier chain that delivers in the order of *channels*.

    The first channel is wrapped innermost, so it fires first.
    """
    notifier: Notifier = BaseNotifier()
    for channel in channels:
        notifier_cls = NOTIFIERS_BY_CHANNEL.get(channel)
        if notifier_cls is None:
            raise ValidationError(f"Unknown notification channel: {channel!r}")
        notifier = notifier_cls(notifier, sink)
    return notifier


def message_sink() -> ConsoleMessageSink:
    return ConsoleMessageSink()


def json_order_source(path: Path) -> JsonOrderSource:
    return JsonOrderSource(path)


def demo_order_source() -> InMemoryOrderSource:
    return InMemoryOrderSource(demo_order())
