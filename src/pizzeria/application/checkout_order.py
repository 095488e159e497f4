"""Application service: Checkout Order use case.

Loads the order, lets the Order aggregate flip its status and fan the
confirmation out through the notifier chain, then reports the result.
"""

from __future__ import annotations

import logging

from pizzeria.application.dto import CheckoutDTO
from pizzeria.domain.notification.notifier import Notifier
from pizzeria.domain.repository.order_source import OrderSource

log = logging.getLogger(__name__)


class CheckoutOrderHandler:

    def __init__(self, order_source: OrderSource, notifier: Notifier) -> None:
        self._order_source = order_source
        self._notifier = notifier

    def handle(self) -> CheckoutDTO:
        order = self._order_source.load()
        log.info("Processing checkout for %s", order.customer.name)

        message = order.checkout(self._notifier)

        log.info("Checkout finished for %s", order.customer.name)
        return CheckoutDTO(
            customer_name=order.customer.name,
            status=order.status.value,
            total=str(order.total),
            message=message,
            summary=order.generate_summary(),
        )
