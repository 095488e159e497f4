"""Concrete channel decorators: e-mail, SMS and WhatsApp."""

from __future__ import annotations

import logging

from pizzeria.domain.model.customer import Customer
from pizzeria.domain.notification.notifier import (
    BaseNotifier,
    MessageSink,
    Notifier,
    NotifierDecorator,
)

log = logging.getLogger(__name__)


class ChannelNotifier(NotifierDecorator):
    """Delivers through ``sink`` when the customer has a ``channel`` contact."""

    channel: str = ""

    def __init__(self, wrapped: Notifier | None, sink: MessageSink) -> None:
        super().__init__(wrapped if wrapped is not None else BaseNotifier())
        self._sink = sink

    def send(self, message: str, customer: Customer) -> None:
        super().send(message, customer)

        address = customer.contact(self.channel)
        if address is None:
            log.debug("No %s contact for %s, skipping", self.channel, customer.name)
            return

        self._sink.deliver(self.channel, address, message)
        log.info("Sent %s notification to %s", self.channel, address)


class EmailNotifier(ChannelNotifier):
    channel = "email"


class SmsNotifier(ChannelNotifier):
    channel = "sms"


class WhatsAppNotifier(ChannelNotifier):
    channel = "whatsapp"


NOTIFIERS_BY_CHANNEL: dict[str, type[ChannelNotifier]] = {
    EmailNotifier.channel: EmailNotifier,
    SmsNotifier.channel: SmsNotifier,
    WhatsAppNotifier.channel: WhatsAppNotifier,
}
