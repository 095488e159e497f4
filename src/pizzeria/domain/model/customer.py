"""Customer record consumed by orders and notifiers."""

from __future__ import annotations

from dataclasses import dataclass

CHANNELS = ("email", "sms", "whatsapp")


@dataclass(frozen=True)
class Customer:
    """Who placed the order and how to reach them.

    Every contact field is optional; a notifier whose channel has no
    address on the customer simply skips it.
    """

    name: str
    email: str | None = None
    sms: str | None = None
    whatsapp: str | None = None

    def contact(self, channel: str) -> str | None:
        """Return the address for *channel*, or None when not provided."""
        if channel not in CHANNELS:
            return None
        return getattr(self, channel) or None
