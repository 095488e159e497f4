"""Application service: Show Order use case (query)."""

from __future__ import annotations

from pizzeria.application.dto import ItemLineDTO, OrderDTO
from pizzeria.domain.model.items import ItemGroup
from pizzeria.domain.model.order import Order
from pizzeria.domain.repository.order_source import OrderSource


class ShowOrderHandler:

    def __init__(self, order_source: OrderSource) -> None:
        self._order_source = order_source

    def handle(self) -> OrderDTO:
        return self._to_dto(self._order_source.load())

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        lines = []
        for depth, item in order.root.walk():
            surcharge = None
            if isinstance(item, ItemGroup) and not item.surcharge.is_zero:
                surcharge = str(item.surcharge)
            lines.append(
                ItemLineDTO(
                    depth=depth,
                    name=item.get_name(),
                    surcharge=surcharge,
                    subtotal=str(item.get_price()),
                )
            )

        return OrderDTO(
            customer_name=order.customer.name,
            status=order.status.value,
            items=lines,
            total=str(order.total),
            summary=order.generate_summary(),
        )
