"""Notifier chain: the decorator half of checkout.

A chain starts from a ``BaseNotifier`` and is wrapped, innermost first,
by channel decorators.  Each decorator forwards to the notifier it wraps
*before* doing its own delivery, so the innermost channel fires first.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pizzeria.domain.model.customer import Customer


class MessageSink(ABC):
    """Output port that actually hands a message to a channel."""

    @abstractmethod
    def deliver(self, channel: str, address: str, message: str) -> None:
        """Deliver *message* to *address* over *channel*."""


class Notifier(ABC):

    @abstractmethod
    def send(self, message: str, customer: Customer) -> None:
        """Send *message* to *customer* over every channel in the chain."""


class BaseNotifier(Notifier):
    """Innermost link of every chain.  Delivers nothing."""

    def send(self, message: str, customer: Customer) -> None:
        return None


class NotifierDecorator(Notifier):
    """Wraps another notifier and adds behaviour after delegating to it."""

    def __init__(self, wrapped: Notifier) -> None:
        self._wrapped = wrapped

    @property
    def wrapped(self) -> Notifier:
        return self._wrapped

    def send(self, message: str, customer: Customer) -> None:
        self._wrapped.send(message, customer)
