"""The walkthrough order used by ``pizzeria demo``."""

from __future__ import annotations

from pizzeria.domain.model.customer import Customer
from pizzeria.domain.model.items import ItemGroup, PricedItem
from pizzeria.domain.model.order import Order
from pizzeria.domain.model.value_objects import Money


def demo_customer() -> Customer:
    return Customer(
        name="Ana Silva",
        email="ana.silva@example.com",
        sms="+5511987654321",
        whatsapp="+5511987654321",
    )


def demo_order() -> Order:
    """Three-level tree: delivery fee > pizza / drinks combo > products.

    Totals R$ 96.50.
    """
    pizza = ItemGroup("Pizza de Calabresa G com borda recheada", Money.of("5.50"))
    pizza.add(PricedItem("Pizza de Calabresa base", Money.of("40.00")))
    pizza.add(PricedItem("Queijo extra", Money.of("5.00")))

    drinks = ItemGroup("Combo de Bebidas")
    drinks.add(PricedItem("Refrigerante 2L", Money.of("10.00")))
    drinks.add(PricedItem("Água Mineral", Money.of("4.00")))

    root = ItemGroup("Pedido Principal com Taxa de Entrega", Money.of("7.00"))
    root.add(pizza)
    root.add(drinks)
    root.add(PricedItem("Pizza de Chocolate pequena", Money.of("25.00")))

    return Order(customer=demo_customer(), root=root)
