"""Order aggregate: binds a customer to a priced item tree.

The Order owns the root ``ItemGroup`` and the payment status.  Checkout
is the only state transition and it is deliberately unguarded: calling
it again re-sends the confirmation and leaves the order PAID.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from pizzeria.domain.model.customer import Customer
from pizzeria.domain.model.items import ItemGroup
from pizzeria.domain.model.value_objects import Money

if TYPE_CHECKING:
    from pizzeria.domain.notification.notifier import Notifier

log = logging.getLogger(__name__)

SUMMARY_WIDTH = 41
SUMMARY_TITLE = "        PIZZERIA ORDER SUMMARY"


class OrderStatus(Enum):
    PENDING = "PENDING"
    PAID = "PAID"


@dataclass
class Order:
    """Aggregate root for a pizzeria order."""

    customer: Customer
    root: ItemGroup
    status: OrderStatus = OrderStatus.PENDING

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return self.root.get_price()

    # --- Reporting ------------------------------------------------------------

    def generate_summary(self) -> str:
        """Build the human-readable order report.  Pure: nothing is printed."""
        double_rule = "=" * SUMMARY_WIDTH
        single_rule = "-" * SUMMARY_WIDTH
        lines = [
            double_rule,
            SUMMARY_TITLE,
            double_rule,
            f"CUSTOMER: {self.customer.name}",
            f"STATUS: {self.status.value}",
            "",
            "ITEMS:",
            single_rule,
            self.root.render_structure(),
            single_rule,
            f"ORDER TOTAL: {self.total}",
            double_rule,
        ]
        return "\n".join(lines) + "\n"

    # --- State transitions ----------------------------------------------------

    def checkout(self, notifier: Notifier) -> str:
        """Mark the order PAID and notify the customer.

        Returns the confirmation message that was sent.
        """
        previous = self.status
        self.status = OrderStatus.PAID
        log.info(
            "Order for %s moved %s -> %s",
            self.customer.name,
            previous.value,
            self.status.value,
        )

        message = f"Order confirmed! Total: {self.total}"
        notifier.send(message, self.customer)
        return message
