"""OrderSource that hands back one Order instance held in memory."""

from __future__ import annotations

from pizzeria.domain.model.order import Order
from pizzeria.domain.repository.order_source import OrderSource


class InMemoryOrderSource(OrderSource):
    """Returns the same object on every load, so status changes stick."""

    def __init__(self, order: Order) -> None:
        self._order = order

    def load(self) -> Order:
        return self._order
